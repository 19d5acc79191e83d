from apps.core.entities import (
    Entity,
    NOT_ASSIGNED,
    require,
    validate_amount,
    validate_name,
)
from apps.core.exceptions import NoValidPriceError


class Coffee(Entity):
    """A drink on the menu. ``order_list`` holds the orders it is part of."""

    def __init__(self, name, price, order_list=None, id=NOT_ASSIGNED):
        super().__init__(id)
        self._name = validate_name(name)
        self._price = validate_amount(price, NoValidPriceError)
        self._order_list = list(order_list) if order_list is not None else []

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = validate_name(value)

    @property
    def price(self):
        return self._price

    @price.setter
    def price(self, value):
        self._price = validate_amount(value, NoValidPriceError)

    @property
    def order_list(self):
        return self._order_list

    @order_list.setter
    def order_list(self, value):
        require(value)
        self._order_list = list(value)

    def __repr__(self):
        return f"Coffee(id={self.id}, name={self.name!r}, price={self.price})"
