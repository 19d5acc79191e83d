"""
Error classification and the DRF exception handler.

``classify`` is the single place that decides which response category a
service error belongs to. ``shop_exception_handler`` is wired in as
``REST_FRAMEWORK['EXCEPTION_HANDLER']``.
"""
import enum
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from .exceptions import (
    ShopServiceError,
    NullParamError,
    NoValidIdError,
    NoValidNameError,
    NoValidPriceError,
    NoValidTipSizeError,
    NoValidPageError,
    NoValidLimitError,
    CreatedNotDefinedError,
    CompletedBeforeCreatedError,
    CreatedInFutureError,
    DuplicatedElementsError,
    KeyNotPresentError,
    BaristaNotFoundError,
    CoffeeNotFoundError,
    OrderNotFoundError,
    OrderAlreadyCompletedError,
    CompletedNotClearableError,
    OrderHasReferencesError,
    CoffeeHasReferencesError,
    DefaultBaristaDeletionError,
    DataBaseError,
)

logger = logging.getLogger(__name__)


class ErrorCategory(enum.Enum):
    BAD_REQUEST = status.HTTP_400_BAD_REQUEST
    NOT_FOUND = status.HTTP_404_NOT_FOUND
    CONFLICT = status.HTTP_409_CONFLICT
    INTERNAL_ERROR = status.HTTP_500_INTERNAL_SERVER_ERROR


ERROR_CATEGORIES = {
    NullParamError: ErrorCategory.BAD_REQUEST,
    NoValidIdError: ErrorCategory.BAD_REQUEST,
    NoValidNameError: ErrorCategory.BAD_REQUEST,
    NoValidPriceError: ErrorCategory.BAD_REQUEST,
    NoValidTipSizeError: ErrorCategory.BAD_REQUEST,
    NoValidPageError: ErrorCategory.BAD_REQUEST,
    NoValidLimitError: ErrorCategory.BAD_REQUEST,
    CreatedNotDefinedError: ErrorCategory.BAD_REQUEST,
    CompletedBeforeCreatedError: ErrorCategory.BAD_REQUEST,
    CreatedInFutureError: ErrorCategory.BAD_REQUEST,
    DuplicatedElementsError: ErrorCategory.BAD_REQUEST,
    KeyNotPresentError: ErrorCategory.BAD_REQUEST,
    BaristaNotFoundError: ErrorCategory.NOT_FOUND,
    CoffeeNotFoundError: ErrorCategory.NOT_FOUND,
    OrderNotFoundError: ErrorCategory.NOT_FOUND,
    OrderAlreadyCompletedError: ErrorCategory.CONFLICT,
    CompletedNotClearableError: ErrorCategory.CONFLICT,
    OrderHasReferencesError: ErrorCategory.CONFLICT,
    CoffeeHasReferencesError: ErrorCategory.CONFLICT,
    DefaultBaristaDeletionError: ErrorCategory.CONFLICT,
    DataBaseError: ErrorCategory.INTERNAL_ERROR,
}


def classify(exc: BaseException) -> ErrorCategory:
    """
    Map an error to its response category.

    Subclasses inherit the category of the closest classified ancestor.
    Anything unclassified is an internal error.
    """
    for klass in type(exc).__mro__:
        category = ERROR_CATEGORIES.get(klass)
        if category is not None:
            return category
    return ErrorCategory.INTERNAL_ERROR


def error_response(message, code, category: ErrorCategory) -> Response:
    set_rollback()
    return Response(
        {
            'error': message,
            'code': code,
            'status': category.value,
        },
        status=category.value,
    )


def shop_exception_handler(exc, context):
    """
    Convert exceptions raised by views into JSON error responses.

    Service errors go through ``classify``. DRF's own exceptions (request
    validation, unsupported media type, ...) keep DRF's default rendering.
    Anything else is logged and reported as an internal error.
    """
    view = context.get('view')
    view_name = type(view).__name__ if view is not None else 'unknown view'

    if isinstance(exc, ShopServiceError):
        category = classify(exc)
        if category is ErrorCategory.INTERNAL_ERROR:
            logger.error("%s failed: %s", view_name, exc, exc_info=exc)
        else:
            logger.debug("%s rejected request: %s", view_name, exc)
        return error_response(str(exc), exc.code, category)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    logger.error("Unhandled error in %s", view_name, exc_info=exc)
    return error_response(
        'Internal server error',
        'internal_error',
        ErrorCategory.INTERNAL_ERROR,
    )
