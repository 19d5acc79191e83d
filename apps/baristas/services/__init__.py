"""Services for barista business logic."""

from .barista_management import (
    create_barista,
    update_barista,
    delete_barista,
    get_barista_by_id,
    get_all_baristas,
    get_baristas_page,
)

__all__ = [
    'create_barista',
    'update_barista',
    'delete_barista',
    'get_barista_by_id',
    'get_all_baristas',
    'get_baristas_page',
]
