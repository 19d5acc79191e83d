"""Coffees App - The drinks menu and the orders each drink is part of."""
