"""
Order entity and its lifecycle rules.

An order is open while ``completed`` is unset and finalized once it is
set. Finalizing is one-way: ``completed`` can be moved but never cleared,
and it must always lie strictly after ``created``.
"""
from django.utils import timezone

from apps.core.entities import (
    Entity,
    NOT_ASSIGNED,
    require,
    validate_amount,
)
from apps.core.exceptions import (
    CompletedBeforeCreatedError,
    CompletedNotClearableError,
    CreatedInFutureError,
    CreatedNotDefinedError,
    DuplicatedElementsError,
    NoValidPriceError,
)


def _check_coffees(coffees):
    require(coffees)
    coffees = list(coffees)
    seen = set()
    duplicates = set()
    for coffee in coffees:
        if coffee in seen:
            duplicates.add(coffee.id)
        seen.add(coffee)
    if duplicates:
        raise DuplicatedElementsError(duplicates)
    return coffees


class Order(Entity):

    def __init__(self, barista, coffees, created, completed=None, price=0.0, id=NOT_ASSIGNED):
        super().__init__(id)
        require(barista)
        self._barista = barista
        self._coffees = _check_coffees(coffees)

        if created is None:
            if completed is not None:
                raise CreatedNotDefinedError()
            require(created)
        self._check_created(created, completed)
        self._created = created
        self._completed = completed
        self._price = validate_amount(price, NoValidPriceError)

    @staticmethod
    def _check_created(created, completed):
        if created > timezone.now():
            raise CreatedInFutureError(created)
        if completed is not None and completed <= created:
            raise CompletedBeforeCreatedError(created, completed)

    @property
    def barista(self):
        return self._barista

    @barista.setter
    def barista(self, value):
        require(value)
        self._barista = value

    @property
    def coffees(self):
        return self._coffees

    @coffees.setter
    def coffees(self, value):
        self._coffees = _check_coffees(value)

    @property
    def created(self):
        return self._created

    @created.setter
    def created(self, value):
        require(value)
        self._check_created(value, self._completed)
        self._created = value

    @property
    def completed(self):
        return self._completed

    @completed.setter
    def completed(self, value):
        if value is None:
            if self._completed is not None:
                raise CompletedNotClearableError()
            return
        if self._created is None:
            raise CreatedNotDefinedError()
        if value <= self._created:
            raise CompletedBeforeCreatedError(self._created, value)
        self._completed = value

    @property
    def price(self):
        return self._price

    @price.setter
    def price(self, value):
        self._price = validate_amount(value, NoValidPriceError)

    @property
    def is_open(self):
        return self._completed is None

    def __repr__(self):
        return (
            f"Order(id={self.id}, barista={self.barista.id}, "
            f"coffees={[coffee.id for coffee in self.coffees]}, "
            f"created={self.created}, completed={self.completed}, price={self.price})"
        )
