"""Order price calculation."""

import logging
from typing import Iterable

from apps.coffees.repositories import CoffeeRepository

from ..repositories import OrderRepository

logger = logging.getLogger(__name__)

PRICE_PRECISION = 2

order_repository = OrderRepository()
coffee_repository = CoffeeRepository()


def calculate_order_price(barista, coffees) -> float:
    """
    Price of an order: coffee subtotal plus the barista's tip.

    Args:
        barista: Barista preparing the order
        coffees: Coffees in the order

    Returns:
        ``(sum of coffee prices) * (1 + tip_size)``, rounded to cents
    """
    subtotal = sum(coffee.price for coffee in coffees)
    return round(subtotal * (1 + barista.tip_size), PRICE_PRECISION)


def reprice_orders(order_ids: Iterable[int]) -> int:
    """
    Recompute and store the price of the given orders.

    Called after a barista or coffee change that feeds into existing
    order prices. Must run inside the caller's transaction.

    Returns:
        Number of orders whose price changed
    """
    order_ids = sorted(set(order_ids))
    if not order_ids:
        return 0

    orders = order_repository.find_all_by_id(order_ids)
    coffees_by_order = coffee_repository.find_by_order_ids(order_ids)

    changed = {}
    for order in orders:
        price = calculate_order_price(order.barista, coffees_by_order.get(order.id, []))
        if price != order.price:
            changed[order.id] = price

    if changed:
        order_repository.update_prices(changed)
        logger.info("Repriced orders %s", sorted(changed))
    return len(changed)
