"""Coffee DTO <-> entity mapping."""
from apps.core.entities import require, validate_id
from apps.core.exceptions import OrderNotFoundError
from apps.core.mappers import resolve_references
from apps.orders.dto import OrderNoRef

from .dto import CoffeeCreate, CoffeePublic, CoffeeUpdate
from .entities import Coffee


def coffee_from_create(dto: CoffeeCreate) -> Coffee:
    require(dto)
    return Coffee(name=dto.name, price=dto.price)


def coffee_from_update(dto: CoffeeUpdate, order_repository) -> Coffee:
    require(dto)
    require(dto.id)
    coffee = Coffee(id=validate_id(dto.id), name=dto.name, price=dto.price)
    coffee.order_list = resolve_references(
        dto.order_id_list,
        order_repository.find_all_by_id,
        OrderNotFoundError,
    )
    return coffee


def coffee_to_public(coffee: Coffee) -> CoffeePublic:
    return CoffeePublic(
        id=coffee.id,
        name=coffee.name,
        price=coffee.price,
        orders=tuple(OrderNoRef.from_entity(order) for order in coffee.order_list),
    )
