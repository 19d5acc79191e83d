"""Barista DTO <-> entity mapping."""
from apps.core.entities import require, validate_id
from apps.core.exceptions import OrderNotFoundError
from apps.core.mappers import resolve_references
from apps.orders.dto import OrderNoRef

from .dto import BaristaCreate, BaristaPublic, BaristaUpdate
from .entities import Barista


def barista_from_create(dto: BaristaCreate) -> Barista:
    require(dto)
    return Barista(full_name=dto.full_name, tip_size=dto.tip_size)


def barista_from_update(dto: BaristaUpdate, order_repository) -> Barista:
    """
    Build a barista whose ``order_list`` holds the stored orders named
    in ``dto.order_id_list``.

    Raises:
        NullParamError: If the id or the order id list is missing
        DuplicatedElementsError: If an order id is listed twice
        OrderNotFoundError: With every order id that does not exist
    """
    require(dto)
    require(dto.id)
    barista = Barista(
        id=validate_id(dto.id),
        full_name=dto.full_name,
        tip_size=dto.tip_size,
    )
    barista.order_list = resolve_references(
        dto.order_id_list,
        order_repository.find_all_by_id,
        OrderNotFoundError,
    )
    return barista


def barista_to_public(barista: Barista) -> BaristaPublic:
    return BaristaPublic(
        id=barista.id,
        full_name=barista.full_name,
        tip_size=barista.tip_size,
        orders=tuple(OrderNoRef.from_entity(order) for order in barista.order_list),
    )
