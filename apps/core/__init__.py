"""
Core App - Shared plumbing for the coffee shop apps

Holds what the barista, coffee and order apps have in common:
- Exceptions: the domain error taxonomy
- Handlers: error classification and the DRF exception handler
- Entities: base entity class and field validators
- Persistence: database error translation and offset paging
- Policies: delete policy switch (reject / cascade)
"""
