"""Transfer objects for coffee requests and responses."""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from apps.orders.dto import OrderNoRef
    from .entities import Coffee


@dataclass(frozen=True)
class CoffeeCreate:
    name: Optional[str]
    price: Optional[float]


@dataclass(frozen=True)
class CoffeeUpdate:
    id: Optional[int]
    name: Optional[str]
    price: Optional[float]
    order_id_list: Optional[Tuple[int, ...]]


@dataclass(frozen=True)
class CoffeeNoRef:
    id: int
    name: str
    price: float

    @classmethod
    def from_entity(cls, coffee: 'Coffee') -> 'CoffeeNoRef':
        return cls(id=coffee.id, name=coffee.name, price=coffee.price)


@dataclass(frozen=True)
class CoffeePublic:
    id: int
    name: str
    price: float
    orders: Tuple['OrderNoRef', ...] = ()
