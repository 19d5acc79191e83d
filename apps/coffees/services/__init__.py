"""Services for coffee business logic."""

from .coffee_management import (
    create_coffee,
    update_coffee,
    delete_coffee,
    get_coffee_by_id,
    get_all_coffees,
    get_coffees_page,
)

__all__ = [
    'create_coffee',
    'update_coffee',
    'delete_coffee',
    'get_coffee_by_id',
    'get_all_coffees',
    'get_coffees_page',
]
