"""
Building blocks for the domain entities.

Entities are plain Python objects, separate from the ORM rows in each
app's ``models.py``. Every setter validates before it assigns, so a
rejected value leaves the entity untouched.
"""
import math

from .exceptions import (
    NullParamError,
    NoValidIdError,
    NoValidNameError,
)

# Id of an entity that has not been stored yet.
NOT_ASSIGNED = -1


def require(*values):
    """Raise NullParamError if any value is None."""
    if any(value is None for value in values):
        raise NullParamError()


def validate_id(value):
    require(value)
    if value < 0:
        raise NoValidIdError(value)
    return int(value)


def validate_name(value):
    require(value)
    if value == '':
        raise NoValidNameError()
    return value


def validate_amount(value, error_class):
    """
    Validate a money-like amount.

    Args:
        value: Number to check
        error_class: Exception raised for NaN, infinite or negative values

    Returns:
        The value as float
    """
    require(value)
    value = float(value)
    if math.isnan(value) or math.isinf(value) or value < 0.0:
        raise error_class(value)
    return value


class Entity:
    """
    Base class giving entities an id and id-based equality.

    Two entities are equal when they are of the same kind and share an
    assigned id. Entities that were never stored are only equal to
    themselves.
    """

    def __init__(self, id=NOT_ASSIGNED):
        self._id = NOT_ASSIGNED if id == NOT_ASSIGNED else validate_id(id)

    @property
    def id(self):
        return self._id

    @id.setter
    def id(self, value):
        self._id = validate_id(value)

    @property
    def is_new(self):
        """True until the store has assigned an id."""
        return self._id == NOT_ASSIGNED

    def __eq__(self, other):
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        if self.is_new or other.is_new:
            return False
        return self._id == other._id

    def __hash__(self):
        if self.is_new:
            return object.__hash__(self)
        return hash((type(self).__name__, self._id))
