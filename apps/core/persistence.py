"""
Helpers shared by the persistence gateways.

Gateways never open their own transactions; they run inside the
``transaction.atomic`` block of the calling service.
"""
import functools
import logging
import re

from django.db import DatabaseError, IntegrityError

from .exceptions import (
    DataBaseError,
    KeyNotPresentError,
    NoValidLimitError,
    NoValidPageError,
)

logger = logging.getLogger(__name__)

# SQLite: "FOREIGN KEY constraint failed"
# PostgreSQL: "... violates foreign key constraint ..."
FOREIGN_KEY_VIOLATION = re.compile(r'foreign key constraint', re.IGNORECASE)


def translate_database_errors(func):
    """
    Re-raise driver errors as service errors.

    Foreign key violations become KeyNotPresentError, every other
    DatabaseError becomes DataBaseError. Service errors pass through.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IntegrityError as e:
            if FOREIGN_KEY_VIOLATION.search(str(e)):
                raise KeyNotPresentError(str(e)) from e
            logger.error("Integrity error in %s: %s", func.__qualname__, e)
            raise DataBaseError(str(e)) from e
        except DatabaseError as e:
            logger.error("Database error in %s: %s", func.__qualname__, e)
            raise DataBaseError(str(e)) from e
    return wrapper


def validate_page(page, limit):
    if page is None or page < 0:
        raise NoValidPageError(page)
    if limit is None or limit < 1:
        raise NoValidLimitError(limit)


def page_slice(queryset, page, limit):
    """Return rows [page*limit, page*limit + limit) of an ordered queryset."""
    validate_page(page, limit)
    offset = page * limit
    return queryset[offset:offset + limit]
