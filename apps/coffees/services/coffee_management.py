"""Coffee CRUD operations service."""

import logging
from typing import List

from django.db import transaction

from apps.core.exceptions import CoffeeHasReferencesError, CoffeeNotFoundError
from apps.core.policies import DeletePolicy, get_delete_policy
from apps.orders.repositories import OrderCoffeeRepository, OrderRepository
from apps.orders.services.pricing import reprice_orders

from ..dto import CoffeeCreate, CoffeePublic, CoffeeUpdate
from ..entities import Coffee
from ..mappers import coffee_from_create, coffee_from_update, coffee_to_public
from ..repositories import CoffeeRepository

logger = logging.getLogger(__name__)

coffee_repository = CoffeeRepository()
order_repository = OrderRepository()
order_coffee_repository = OrderCoffeeRepository()


def _with_orders(coffees: List[Coffee]) -> List[Coffee]:
    orders_by_coffee = order_repository.find_by_coffee_ids([coffee.id for coffee in coffees])
    for coffee in coffees:
        coffee.order_list = orders_by_coffee.get(coffee.id, [])
    return coffees


@transaction.atomic
def create_coffee(*, data: CoffeeCreate) -> CoffeePublic:
    """
    Add a coffee to the menu.

    Raises:
        NoValidNameError: If the name is empty
        NoValidPriceError: If the price is negative or not finite
    """
    coffee = coffee_repository.create(coffee_from_create(data))
    logger.info("Created coffee %s (%s, %s)", coffee.id, coffee.name, coffee.price)
    return coffee_to_public(coffee)


@transaction.atomic
def update_coffee(*, data: CoffeeUpdate) -> CoffeePublic:
    """
    Update a coffee and the orders it belongs to.

    Links missing from ``data.order_id_list`` are removed before the new
    ones are added. Every order whose coffees or coffee price changed is
    repriced.

    Raises:
        CoffeeNotFoundError: If the coffee doesn't exist
        OrderNotFoundError: With every listed order id that doesn't exist
        DuplicatedElementsError: If an order id is listed twice
    """
    coffee = coffee_from_update(data, order_repository)
    updated = coffee_repository.update(coffee)

    existing = order_coffee_repository.order_ids_for_coffee(updated.id)
    supplied = {order.id for order in coffee.order_list}
    for order_id in sorted(existing - supplied):
        order_coffee_repository.unlink(order_id, updated.id)
    for order_id in sorted(supplied - existing):
        order_coffee_repository.link(order_id, updated.id)
    reprice_orders(existing | supplied)

    updated.order_list = order_repository.find_by_coffee_id(updated.id)
    logger.info("Updated coffee %s (%s orders)", updated.id, len(updated.order_list))
    return coffee_to_public(updated)


@transaction.atomic
def delete_coffee(*, coffee_id: int) -> None:
    """
    Remove a coffee from the menu.

    With the ``reject`` policy a coffee that is still part of an order is
    kept and CoffeeHasReferencesError is raised. With ``cascade`` it is
    taken out of those orders, which are then repriced.

    Raises:
        CoffeeNotFoundError: If the coffee doesn't exist
        CoffeeHasReferencesError: If orders reference it and the policy is ``reject``
    """
    order_ids = order_coffee_repository.order_ids_for_coffee(coffee_id)

    if get_delete_policy() is DeletePolicy.CASCADE:
        order_coffee_repository.unlink_by_coffee(coffee_id)
        coffee_repository.delete(coffee_id)
        reprice_orders(order_ids)
        logger.info("Deleted coffee %s, removed from orders %s", coffee_id, sorted(order_ids))
        return

    if order_ids:
        raise CoffeeHasReferencesError(coffee_id)
    coffee_repository.delete(coffee_id)
    order_coffee_repository.unlink_by_coffee(coffee_id)
    logger.info("Deleted coffee %s", coffee_id)


@transaction.atomic
def get_coffee_by_id(*, coffee_id: int) -> CoffeePublic:
    coffee = coffee_repository.find_by_id(coffee_id)
    if coffee is None:
        raise CoffeeNotFoundError(coffee_id)
    coffee.order_list = order_repository.find_by_coffee_id(coffee.id)
    return coffee_to_public(coffee)


@transaction.atomic
def get_all_coffees() -> List[CoffeePublic]:
    return [coffee_to_public(coffee) for coffee in _with_orders(coffee_repository.find_all())]


@transaction.atomic
def get_coffees_page(*, page: int, limit: int) -> List[CoffeePublic]:
    coffees = coffee_repository.find_all_by_page(page, limit)
    return [coffee_to_public(coffee) for coffee in _with_orders(coffees)]
