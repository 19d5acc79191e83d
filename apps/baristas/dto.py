"""Transfer objects for barista requests and responses."""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from .models import DEFAULT_TIP_SIZE

if TYPE_CHECKING:
    from apps.orders.dto import OrderNoRef
    from .entities import Barista


@dataclass(frozen=True)
class BaristaCreate:
    full_name: Optional[str]
    tip_size: Optional[float] = DEFAULT_TIP_SIZE


@dataclass(frozen=True)
class BaristaUpdate:
    id: Optional[int]
    full_name: Optional[str]
    tip_size: Optional[float]
    order_id_list: Optional[Tuple[int, ...]]


@dataclass(frozen=True)
class BaristaNoRef:
    """Scalar summary, embedded in order responses."""
    id: int
    full_name: str
    tip_size: float

    @classmethod
    def from_entity(cls, barista: 'Barista') -> 'BaristaNoRef':
        return cls(
            id=barista.id,
            full_name=barista.full_name,
            tip_size=barista.tip_size,
        )


@dataclass(frozen=True)
class BaristaPublic:
    id: int
    full_name: str
    tip_size: float
    orders: Tuple['OrderNoRef', ...] = ()
