"""
Orders App - Order lifecycle, pricing and the work queue

An order is priced from its coffees and its barista's tip, and is
finalized exactly once through the complete action.
"""
