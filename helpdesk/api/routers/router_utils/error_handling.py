"""
Error handling utilities for helpdesk endpoints.

Maps the application's exception hierarchy onto HTTP status codes and
{"error", "details"} JSON bodies, and provides a decorator applying the
mapping to route handlers.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from helpdesk.core.exceptions import (
    AnalysisTimeoutError,
    CompletionTimeoutError,
    HelpdeskException,
    InvalidInputError,
    ProviderError,
    TicketNotFoundError,
)
from helpdesk.models.common import ErrorResponse
from helpdesk.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

TIMEOUT_DETAILS = (
    "The analysis took too long to complete. Please try again with a shorter message."
)

# Provider error code -> (status, error message)
PROVIDER_ERRORS: dict[str, tuple[int, str]] = {
    ProviderError.QUOTA_EXCEEDED: (status.HTTP_429_TOO_MANY_REQUESTS, "OpenAI API quota exceeded"),
    ProviderError.INVALID_API_KEY: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Invalid OpenAI API key"),
    ProviderError.MISSING_API_KEY: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "OpenAI API key is not configured",
    ),
}


def _json(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def error_response(exc: Exception, fallback_error: str) -> JSONResponse:
    """
    Build the HTTP error response for an exception.

    Args:
        exc: Exception raised while handling the request
        fallback_error: Error message for failures without a specific mapping

    Returns:
        JSONResponse: Status code and {"error", "details"} body
    """
    if isinstance(exc, InvalidInputError):
        return _json(status.HTTP_400_BAD_REQUEST, exc.message)

    if isinstance(exc, TicketNotFoundError):
        return _json(status.HTTP_404_NOT_FOUND, "Ticket not found")

    if isinstance(exc, AnalysisTimeoutError):
        return _json(status.HTTP_504_GATEWAY_TIMEOUT, "Analysis timed out", TIMEOUT_DETAILS)

    if isinstance(exc, ProviderError):
        status_code, error = PROVIDER_ERRORS.get(
            exc.code or "",
            (status.HTTP_500_INTERNAL_SERVER_ERROR, fallback_error),
        )
        return _json(status_code, error, exc.message)

    if isinstance(exc, CompletionTimeoutError):
        return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, fallback_error, exc.message)

    return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, fallback_error, str(exc) or "Unknown error")


def handle_helpdesk_errors(fallback_error: str) -> Callable[[F], F]:
    """
    Decorator turning raised exceptions into JSON error responses.

    Centralizes:
    - Logging (warning for client errors, full traceback for unexpected ones)
    - Mapping exception types and provider codes to status codes
    - The uniform {"error", "details"} body

    Args:
        fallback_error: Error message for unmapped failures
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except (InvalidInputError, TicketNotFoundError) as e:
                logger.warning(f"{func.__name__} - Rejected request: {e}")
                return error_response(e, fallback_error)

            except HelpdeskException as e:
                logger.error(f"{func.__name__} - {type(e).__name__}: {e}")
                return error_response(e, fallback_error)

            except Exception as e:
                log_exception_with_context(logger, f"{func.__name__} - Unexpected failure", e)
                return error_response(e, fallback_error)

        return wrapper  # type: ignore

    return decorator
