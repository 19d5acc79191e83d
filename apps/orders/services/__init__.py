"""Services for order business logic."""

from .pricing import (
    calculate_order_price,
    reprice_orders,
    PRICE_PRECISION,
)
from .order_management import (
    create_order,
    update_order,
    complete_order,
    delete_order,
    get_order_by_id,
    get_all_orders,
    get_orders_page,
    get_order_queue,
)

__all__ = [
    # Pricing
    'calculate_order_price',
    'reprice_orders',
    'PRICE_PRECISION',
    # Order Management
    'create_order',
    'update_order',
    'complete_order',
    'delete_order',
    'get_order_by_id',
    'get_all_orders',
    'get_orders_page',
    'get_order_queue',
]
