"""Transfer objects for order requests and responses."""
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional, Tuple

from apps.baristas.dto import BaristaNoRef
from apps.coffees.dto import CoffeeNoRef

if TYPE_CHECKING:
    from .entities import Order


@dataclass(frozen=True)
class OrderCreate:
    barista_id: Optional[int]
    coffee_id_list: Optional[Tuple[int, ...]]


@dataclass(frozen=True)
class OrderUpdate:
    """
    Full editable state of an order.

    ``price`` is accepted for symmetry with the response shape but is
    always recomputed. A missing ``created`` keeps the stored value.
    """
    id: Optional[int]
    barista_id: Optional[int]
    coffee_id_list: Optional[Tuple[int, ...]]
    created: Optional[datetime] = None
    completed: Optional[datetime] = None
    price: Optional[float] = None


@dataclass(frozen=True)
class OrderNoRef:
    """Scalar summary; the barista is reduced to its id."""
    id: int
    barista_id: int
    created: datetime
    completed: Optional[datetime]
    price: float

    @classmethod
    def from_entity(cls, order: 'Order') -> 'OrderNoRef':
        return cls(
            id=order.id,
            barista_id=order.barista.id,
            created=order.created,
            completed=order.completed,
            price=order.price,
        )


@dataclass(frozen=True)
class OrderPublic:
    id: int
    barista: BaristaNoRef
    created: datetime
    completed: Optional[datetime]
    price: float
    coffees: Tuple[CoffeeNoRef, ...] = ()
