"""Barista CRUD operations service."""

import logging
from typing import List

from django.db import transaction

from apps.core.entities import validate_id
from apps.core.exceptions import BaristaNotFoundError, DefaultBaristaDeletionError
from apps.orders.repositories import OrderRepository
from apps.orders.services.pricing import reprice_orders

from ..dto import BaristaCreate, BaristaPublic, BaristaUpdate
from ..entities import Barista
from ..mappers import barista_from_create, barista_from_update, barista_to_public
from ..models import DEFAULT_BARISTA_ID
from ..repositories import BaristaRepository

logger = logging.getLogger(__name__)

barista_repository = BaristaRepository()
order_repository = OrderRepository()


def _with_orders(baristas: List[Barista]) -> List[Barista]:
    orders_by_barista = order_repository.find_by_barista_ids([barista.id for barista in baristas])
    for barista in baristas:
        barista.order_list = orders_by_barista.get(barista.id, [])
    return baristas


@transaction.atomic
def create_barista(*, data: BaristaCreate) -> BaristaPublic:
    """
    Create a new barista.

    Args:
        data: Name and tip size

    Returns:
        The stored barista, without orders

    Raises:
        NoValidNameError: If the name is empty
        NoValidTipSizeError: If the tip size is negative or not finite
    """
    barista = barista_repository.create(barista_from_create(data))
    logger.info("Created barista %s (%s)", barista.id, barista.full_name)
    return barista_to_public(barista)


@transaction.atomic
def update_barista(*, data: BaristaUpdate) -> BaristaPublic:
    """
    Update a barista and the set of orders assigned to them.

    Orders currently assigned but missing from ``data.order_id_list``
    go back to the default barista; listed orders are moved to this
    barista. Detaching happens before attaching, and every touched
    order is repriced.

    Raises:
        BaristaNotFoundError: If the barista doesn't exist
        OrderNotFoundError: With every listed order id that doesn't exist
        DuplicatedElementsError: If an order id is listed twice
    """
    barista = barista_from_update(data, order_repository)
    updated = barista_repository.update(barista)

    current_ids = {order.id for order in order_repository.find_by_barista_id(updated.id)}
    requested_ids = {order.id for order in barista.order_list}

    detached = order_repository.reassign_barista(current_ids - requested_ids, DEFAULT_BARISTA_ID)
    attached = order_repository.reassign_barista(requested_ids - current_ids, updated.id)
    reprice_orders(current_ids | requested_ids)

    updated.order_list = order_repository.find_by_barista_id(updated.id)
    logger.info(
        "Updated barista %s (%s orders detached, %s attached)",
        updated.id, detached, attached,
    )
    return barista_to_public(updated)


@transaction.atomic
def delete_barista(*, barista_id: int) -> None:
    """
    Delete a barista, handing their orders to the default barista.

    Raises:
        DefaultBaristaDeletionError: If ``barista_id`` is the default barista
        BaristaNotFoundError: If the barista doesn't exist
    """
    if validate_id(barista_id) == DEFAULT_BARISTA_ID:
        raise DefaultBaristaDeletionError()

    order_ids = [order.id for order in order_repository.find_by_barista_id(barista_id)]
    order_repository.reassign_barista(order_ids, DEFAULT_BARISTA_ID)
    barista_repository.delete(barista_id)
    reprice_orders(order_ids)

    logger.info("Deleted barista %s, %s orders moved to default barista", barista_id, len(order_ids))


@transaction.atomic
def get_barista_by_id(*, barista_id: int) -> BaristaPublic:
    barista = barista_repository.find_by_id(barista_id)
    if barista is None:
        raise BaristaNotFoundError(barista_id)
    barista.order_list = order_repository.find_by_barista_id(barista.id)
    return barista_to_public(barista)


@transaction.atomic
def get_all_baristas() -> List[BaristaPublic]:
    return [barista_to_public(barista) for barista in _with_orders(barista_repository.find_all())]


@transaction.atomic
def get_baristas_page(*, page: int, limit: int) -> List[BaristaPublic]:
    baristas = barista_repository.find_all_by_page(page, limit)
    return [barista_to_public(barista) for barista in _with_orders(baristas)]
