"""Order use cases: CRUD, completion and the work queue."""

import logging
from datetime import timedelta
from typing import List

from django.db import transaction
from django.utils import timezone

from apps.baristas.repositories import BaristaRepository
from apps.coffees.repositories import CoffeeRepository
from apps.core.exceptions import (
    CompletedNotClearableError,
    OrderAlreadyCompletedError,
    OrderHasReferencesError,
    OrderNotFoundError,
)
from apps.core.policies import DeletePolicy, get_delete_policy

from ..dto import OrderCreate, OrderPublic, OrderUpdate
from ..entities import Order
from ..mappers import order_from_create, order_from_update, order_to_public
from ..repositories import OrderCoffeeRepository, OrderRepository
from .pricing import calculate_order_price

logger = logging.getLogger(__name__)

order_repository = OrderRepository()
order_coffee_repository = OrderCoffeeRepository()
barista_repository = BaristaRepository()
coffee_repository = CoffeeRepository()


def _now():
    """Current time at the one-second precision timestamps are rendered with."""
    return timezone.now().replace(microsecond=0)


def _get_order(order_id: int) -> Order:
    order = order_repository.find_by_id(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


def _with_coffees(orders: List[Order]) -> List[Order]:
    coffees_by_order = coffee_repository.find_by_order_ids([order.id for order in orders])
    for order in orders:
        order.coffees = coffees_by_order.get(order.id, [])
    return orders


def _reconcile_coffees(order_id: int, coffee_ids) -> None:
    """Make the stored links of an order match ``coffee_ids``. Unlinks run first."""
    existing = order_coffee_repository.coffee_ids_for_order(order_id)
    supplied = set(coffee_ids)
    for coffee_id in sorted(existing - supplied):
        order_coffee_repository.unlink(order_id, coffee_id)
    for coffee_id in sorted(supplied - existing):
        order_coffee_repository.link(order_id, coffee_id)


@transaction.atomic
def create_order(*, data: OrderCreate) -> OrderPublic:
    """
    Place a new order.

    Args:
        data: Barista id and coffee ids of the order

    Returns:
        The stored order, priced and stamped with the current time

    Raises:
        BaristaNotFoundError: If the barista doesn't exist
        CoffeeNotFoundError: If any listed coffee doesn't exist
        DuplicatedElementsError: If a coffee id is listed twice
    """
    order = order_from_create(data, _now(), barista_repository, coffee_repository)
    order.price = calculate_order_price(order.barista, order.coffees)

    stored = order_repository.create(order)
    for coffee in order.coffees:
        order_coffee_repository.link(stored.id, coffee.id)
    stored.coffees = order.coffees

    logger.info("Created order %s for barista %s (price %s)", stored.id, stored.barista.id, stored.price)
    return order_to_public(stored)


@transaction.atomic
def update_order(*, data: OrderUpdate) -> OrderPublic:
    """
    Replace the editable state of an order.

    The price in ``data`` is ignored and recomputed. A missing
    ``created`` keeps the stored one.

    Raises:
        OrderNotFoundError: If the order doesn't exist
        CompletedNotClearableError: If the update would reopen a completed order
    """
    stored = _get_order(data.id)
    order = order_from_update(data, stored.created, barista_repository, coffee_repository)
    if stored.completed is not None and order.completed is None:
        raise CompletedNotClearableError()

    order.price = calculate_order_price(order.barista, order.coffees)
    updated = order_repository.update(order)
    _reconcile_coffees(updated.id, [coffee.id for coffee in order.coffees])
    updated.coffees = order.coffees

    logger.info("Updated order %s (price %s)", updated.id, updated.price)
    return order_to_public(updated)


@transaction.atomic
def complete_order(*, order_id: int) -> OrderPublic:
    """
    Finalize an open order at the current time.

    Raises:
        OrderNotFoundError: If the order doesn't exist
        OrderAlreadyCompletedError: If the order was completed before
    """
    order = _get_order(order_id)
    if not order.is_open:
        raise OrderAlreadyCompletedError(order.id, order.completed)

    # Completing within the creation second still has to land after it.
    order.completed = max(_now(), order.created + timedelta(seconds=1))
    updated = order_repository.update(order)
    updated.coffees = coffee_repository.find_by_order_id(updated.id)

    logger.info("Completed order %s", updated.id)
    return order_to_public(updated)


@transaction.atomic
def delete_order(*, order_id: int) -> None:
    """
    Delete an order.

    With the ``reject`` policy an order that still has coffees is kept
    and OrderHasReferencesError is raised. With ``cascade`` its links
    are removed first.

    Raises:
        OrderNotFoundError: If the order doesn't exist
        OrderHasReferencesError: If coffees are linked and the policy is ``reject``
    """
    if get_delete_policy() is DeletePolicy.CASCADE:
        unlinked = order_coffee_repository.unlink_by_order(order_id)
        order_repository.delete(order_id)
        logger.info("Deleted order %s with %s coffee links", order_id, unlinked)
        return

    if order_coffee_repository.coffee_ids_for_order(order_id):
        raise OrderHasReferencesError(order_id)
    order_repository.delete(order_id)
    order_coffee_repository.unlink_by_order(order_id)
    logger.info("Deleted order %s", order_id)


@transaction.atomic
def get_order_by_id(*, order_id: int) -> OrderPublic:
    order = _get_order(order_id)
    order.coffees = coffee_repository.find_by_order_id(order.id)
    return order_to_public(order)


@transaction.atomic
def get_all_orders() -> List[OrderPublic]:
    return [order_to_public(order) for order in _with_coffees(order_repository.find_all())]


@transaction.atomic
def get_orders_page(*, page: int, limit: int) -> List[OrderPublic]:
    orders = order_repository.find_all_by_page(page, limit)
    return [order_to_public(order) for order in _with_coffees(orders)]


@transaction.atomic
def get_order_queue() -> List[OrderPublic]:
    """
    Orders waiting to be prepared.

    Returns:
        Open orders, oldest ``created`` first, ties broken by id
    """
    orders = sorted(
        (order for order in order_repository.find_all() if order.is_open),
        key=lambda order: (order.created, order.id),
    )
    return [order_to_public(order) for order in _with_coffees(orders)]
