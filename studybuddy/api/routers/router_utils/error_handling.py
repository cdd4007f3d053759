"""
Service error handling for API endpoints.

Maps the application exception hierarchy onto HTTP status codes so
routers stay free of repetitive try/except blocks.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from studybuddy.core.exceptions import (
    DocumentNotFoundError,
    EmbeddingProviderError,
    GenerationError,
    NoContentError,
    StudyBuddyException,
    ValidationError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_STATUS_BY_EXCEPTION: tuple[tuple[type[StudyBuddyException], int], ...] = (
    (DocumentNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NoContentError, status.HTTP_409_CONFLICT),
    (EmbeddingProviderError, status.HTTP_502_BAD_GATEWAY),
    (GenerationError, status.HTTP_502_BAD_GATEWAY),
)


def status_for(exc: StudyBuddyException) -> int:
    for exc_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_service_errors(func: F) -> F:
    """
    Decorator turning application exceptions into HTTPExceptions.

    Client errors are logged as warnings, upstream and internal failures
    as errors. The response detail is the exception message.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except StudyBuddyException as e:
            status_code = status_for(e)
            log = logger.warning if status_code < 500 else logger.error
            log(
                f"{func.__name__} failed",
                extra={
                    "status_code": status_code,
                    "error_type": type(e).__name__,
                    "error_msg": e.message,
                },
            )
            raise HTTPException(status_code=status_code, detail=e.message) from e

    return wrapper  # type: ignore[return-value]
