"""
Logging utilities for safe structured logging.

Renders prompts, completions and request context into bounded, log-safe
values and attaches them as record extras.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

from helpdesk.observability.correlation import get_correlation_id


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Convert any value to a bounded string for logging.

    Prompt and completion texts are truncated; containers are summarized
    by size instead of rendered, so ticket content never floods the logs.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            text = value
        elif isinstance(value, (list, tuple)):
            return f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            return f"dict({len(value)} keys)"
        else:
            text = str(value)

        if len(text) > max_length:
            return text[:max_length] + f"... ({len(text)} chars)"
        return text
    except Exception as e:
        return f"<unloggable {type(e).__name__}>"


def _render(message: str, context: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    extra: dict[str, Any] = {
        f"ctx_{key}": safe_log_value(val) for key, val in context.items()
    }
    extra["request_id"] = get_correlation_id() or None
    if context:
        rendered = ", ".join(f"{key}={extra[f'ctx_{key}']}" for key in context)
        message = f"{message} ({rendered})"
    return message, extra


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with safely converted context and the correlation ID.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached as record extras
    """
    message, extra = _render(message, context)
    logger.log(level, message, extra=extra)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception with its type, message and traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional key-value pairs
    """
    message, extra = _render(f"{message}: {type(exc).__name__}: {exc}", context)
    logger.error(message, exc_info=exc, extra=extra)
