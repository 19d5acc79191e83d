"""
Baristas App - People who prepare orders

Barista id 0 is the default barista. It is seeded by a migration, can't
be deleted and receives the orders of every deleted barista.
"""
