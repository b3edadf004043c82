"""Outer request boundary: turns storage failures into a generic error page."""
import logging
from typing import TypeVar

from fastapi import Request, status
from returns.pipeline import is_successful
from returns.result import Result

from config.templates import templates
from repositories.exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ERROR_TEMPLATE = "error.html"
GENERIC_FAILURE_MESSAGE = "The request could not be completed. Please try again later."


def unwrap_or_raise(result: Result[T, Exception]) -> T:
    """Return the success value, or raise the contained error for the app's handlers."""
    if not is_successful(result):
        error = result.failure()
        raise error from getattr(error, "original", None)
    return result.unwrap()


async def storage_error_handler(request: Request, exc: StorageError):
    """Log a storage failure and answer with a generic 500 page."""
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return templates.TemplateResponse(
        request,
        ERROR_TEMPLATE,
        {"error_message": GENERIC_FAILURE_MESSAGE},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
