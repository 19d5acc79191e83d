"""
Domain exceptions shared by the barista, coffee and order apps.

Every failure the service layer can produce is a subclass of
``ShopServiceError``. Exceptions carry a short machine-readable ``code``
and a human-readable message; the HTTP status is chosen centrally in
``apps.core.handlers.classify``.
"""


class ShopServiceError(Exception):
    """Base exception for all coffee shop service errors."""
    code = 'shop_error'
    default_message = 'Unexpected coffee shop error.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


# =============================================================================
# Validation errors
# =============================================================================

class NullParamError(ShopServiceError):
    """A required value is missing."""
    code = 'null_param'
    default_message = 'Parameter cannot be null!'


class NoValidIdError(ShopServiceError):
    """Identifier is negative or not assigned yet."""
    code = 'no_valid_id'

    def __init__(self, value=None):
        if value is None:
            super().__init__('Id is not specified!')
        else:
            super().__init__(f"ID can't be less than zero! Current value is '{value}'.")
        self.value = value


class NoValidNameError(ShopServiceError):
    """Name is empty."""
    code = 'no_valid_name'
    default_message = "Name can't be empty!"


class NoValidPriceError(ShopServiceError):
    """Price is NaN, infinite or negative."""
    code = 'no_valid_price'

    def __init__(self, value):
        super().__init__(
            f"Price must be a finite number not less than zero! Your value '{value}'."
        )
        self.value = value


class NoValidTipSizeError(ShopServiceError):
    """Tip size is NaN, infinite or negative."""
    code = 'no_valid_tip_size'

    def __init__(self, value):
        super().__init__(
            f"Tip size must be a finite number not less than zero! Your value '{value}'."
        )
        self.value = value


class NoValidPageError(ShopServiceError):
    """Page number is negative."""
    code = 'no_valid_page'

    def __init__(self, page):
        super().__init__(f"Page can't be less than zero! Your page value is '{page}'.")
        self.page = page


class NoValidLimitError(ShopServiceError):
    """Page size is less than one."""
    code = 'no_valid_limit'

    def __init__(self, limit):
        super().__init__(f"Limit can't be less than one! Your limit is '{limit}'.")
        self.limit = limit


class CreatedNotDefinedError(ShopServiceError):
    """Completion time supplied for an order without a creation time."""
    code = 'created_not_defined'
    default_message = "Created time can't be null when completed time is set!"


class CompletedBeforeCreatedError(ShopServiceError):
    """Completion time is not strictly after creation time."""
    code = 'completed_before_created'

    def __init__(self, created, completed):
        super().__init__(
            f"Complete time '{completed}' must be after create time '{created}'!"
        )
        self.created = created
        self.completed = completed


class CreatedInFutureError(ShopServiceError):
    """Creation time lies in the future."""
    code = 'created_in_future'

    def __init__(self, created):
        super().__init__(f"Created time '{created}' can't be in the future!")
        self.created = created


class DuplicatedElementsError(ShopServiceError):
    """An id list contains the same id more than once."""
    code = 'duplicated_elements'

    def __init__(self, duplicates=None):
        self.duplicates = sorted(duplicates or [])
        if self.duplicates:
            super().__init__(f"List contains duplicated elements: {self.duplicates}!")
        else:
            super().__init__('List contains duplicated elements!')


class KeyNotPresentError(ShopServiceError):
    """Association row references a row that does not exist."""
    code = 'key_not_present'

    def __init__(self, detail=''):
        super().__init__(f"The key is not present in coupled table! {detail}".strip())


# =============================================================================
# Lookup errors
# =============================================================================

class EntityNotFoundError(ShopServiceError):
    """Base for lookups that returned nothing.

    Carries every missing id so bulk resolution can report them all at once.
    """
    code = 'not_found'
    entity_name = 'Entity'

    def __init__(self, ids):
        if isinstance(ids, (list, tuple, set, frozenset)):
            self.ids = sorted(ids)
        else:
            self.ids = [ids]

        if len(self.ids) == 1:
            message = f"{self.entity_name} '{self.ids[0]}' is not found!"
        else:
            message = f"{self.entity_name} entities {self.ids} are not found!"
        super().__init__(message)


class BaristaNotFoundError(EntityNotFoundError):
    code = 'barista_not_found'
    entity_name = 'Barista'


class CoffeeNotFoundError(EntityNotFoundError):
    code = 'coffee_not_found'
    entity_name = 'Coffee'


class OrderNotFoundError(EntityNotFoundError):
    code = 'order_not_found'
    entity_name = 'Order'


# =============================================================================
# State conflicts
# =============================================================================

class OrderAlreadyCompletedError(ShopServiceError):
    """Order was already finalized."""
    code = 'order_already_completed'

    def __init__(self, order_id, completed):
        super().__init__(f"Order '{order_id}' is already completed at '{completed}'!")
        self.order_id = order_id
        self.completed = completed


class CompletedNotClearableError(ShopServiceError):
    """A finalized order cannot be reopened."""
    code = 'completed_not_clearable'
    default_message = "Completed time can't be cleared once the order is completed!"


class OrderHasReferencesError(ShopServiceError):
    """Order still has coffees linked to it."""
    code = 'order_has_references'

    def __init__(self, order_id):
        super().__init__(f"Order entity '{order_id}' has references!")
        self.order_id = order_id


class CoffeeHasReferencesError(ShopServiceError):
    """Coffee is still part of at least one order."""
    code = 'coffee_has_references'

    def __init__(self, coffee_id):
        super().__init__(f"Coffee entity '{coffee_id}' has references!")
        self.coffee_id = coffee_id


class DefaultBaristaDeletionError(ShopServiceError):
    """The default barista must always exist."""
    code = 'default_barista_deletion'
    default_message = "The default barista can't be deleted!"


# =============================================================================
# Infrastructure errors
# =============================================================================

class DataBaseError(ShopServiceError):
    """Persistence layer failure."""
    code = 'database_error'
    default_message = 'Database operation failed.'
