"""Order DTO <-> entity mapping."""
from apps.baristas.dto import BaristaNoRef
from apps.coffees.dto import CoffeeNoRef
from apps.core.entities import require, validate_id
from apps.core.exceptions import BaristaNotFoundError, CoffeeNotFoundError
from apps.core.mappers import resolve_references

from .dto import OrderCreate, OrderPublic, OrderUpdate
from .entities import Order


def resolve_barista(barista_id, barista_repository):
    barista = barista_repository.find_by_id(validate_id(barista_id))
    if barista is None:
        raise BaristaNotFoundError(barista_id)
    return barista


def order_from_create(dto: OrderCreate, created, barista_repository, coffee_repository) -> Order:
    """
    Build a new order stamped with ``created``.

    The price is left at zero; the service computes it.
    """
    require(dto)
    barista = resolve_barista(dto.barista_id, barista_repository)
    coffees = resolve_references(
        dto.coffee_id_list,
        coffee_repository.find_all_by_id,
        CoffeeNotFoundError,
    )
    return Order(barista=barista, coffees=coffees, created=created)


def order_from_update(dto: OrderUpdate, created, barista_repository, coffee_repository) -> Order:
    """
    Build the requested state of an existing order.

    Args:
        dto: Requested state
        created: Creation time to use when ``dto.created`` is missing
        barista_repository: Gateway used to resolve ``dto.barista_id``
        coffee_repository: Gateway used to resolve ``dto.coffee_id_list``
    """
    require(dto)
    require(dto.id)
    barista = resolve_barista(dto.barista_id, barista_repository)
    coffees = resolve_references(
        dto.coffee_id_list,
        coffee_repository.find_all_by_id,
        CoffeeNotFoundError,
    )
    return Order(
        id=validate_id(dto.id),
        barista=barista,
        coffees=coffees,
        created=dto.created if dto.created is not None else created,
        completed=dto.completed,
    )


def order_to_public(order: Order) -> OrderPublic:
    return OrderPublic(
        id=order.id,
        barista=BaristaNoRef.from_entity(order.barista),
        created=order.created,
        completed=order.completed,
        price=order.price,
        coffees=tuple(CoffeeNoRef.from_entity(coffee) for coffee in order.coffees),
    )
