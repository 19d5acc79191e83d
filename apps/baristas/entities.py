from apps.core.entities import (
    Entity,
    NOT_ASSIGNED,
    require,
    validate_amount,
    validate_name,
)
from apps.core.exceptions import NoValidTipSizeError

from .models import DEFAULT_TIP_SIZE


class Barista(Entity):
    """
    Person who prepares orders.

    ``tip_size`` is the fraction added on top of an order's subtotal,
    e.g. 0.15 for a 15% markup. ``order_list`` is only filled in by the
    service layer when the orders are actually needed.
    """

    def __init__(self, full_name, tip_size=DEFAULT_TIP_SIZE, order_list=None, id=NOT_ASSIGNED):
        super().__init__(id)
        self._full_name = validate_name(full_name)
        self._tip_size = validate_amount(tip_size, NoValidTipSizeError)
        self._order_list = list(order_list) if order_list is not None else []

    @property
    def full_name(self):
        return self._full_name

    @full_name.setter
    def full_name(self, value):
        self._full_name = validate_name(value)

    @property
    def tip_size(self):
        return self._tip_size

    @tip_size.setter
    def tip_size(self, value):
        self._tip_size = validate_amount(value, NoValidTipSizeError)

    @property
    def order_list(self):
        return self._order_list

    @order_list.setter
    def order_list(self, value):
        require(value)
        self._order_list = list(value)

    def __repr__(self):
        return f"Barista(id={self.id}, full_name={self.full_name!r}, tip_size={self.tip_size})"
