"""
Exception hierarchy for the helpdesk assistant.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class HelpdeskException(Exception):
    """Base exception for all helpdesk application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(HelpdeskException):
    """Raised when a request field is missing or malformed. Never retried."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid input error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class ProviderError(HelpdeskException):
    """Raised when the completion provider rejects or fails a request."""

    QUOTA_EXCEEDED = "insufficient_quota"
    INVALID_API_KEY = "invalid_api_key"
    MISSING_API_KEY = "missing_api_key"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message reported by the provider
            code: Provider error code, passed through unchanged
            status_code: Provider HTTP status, when known
            details: Additional context
        """
        details = details or {}
        if code:
            details["code"] = code
        if status_code is not None:
            details["status_code"] = status_code
        self.code = code
        self.status_code = status_code
        super().__init__(message, details)


class EmptyCompletionError(ProviderError):
    """Raised when the provider answers without any usable text."""

    def __init__(self, message: str = "No analysis generated") -> None:
        super().__init__(message, code="empty_completion")


class CompletionTimeoutError(HelpdeskException):
    """Raised when a completion call misses its deadline."""

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize timeout error.

        Args:
            message: Error message
            timeout: Deadline in seconds that was exceeded
            details: Additional context
        """
        details = details or {}
        if timeout is not None:
            details["timeout_seconds"] = timeout
        self.timeout = timeout
        super().__init__(message, details)


class AnalysisTimeoutError(CompletionTimeoutError):
    """Raised when a whole analysis request exceeds its end-to-end deadline."""

    pass


class TicketNotFoundError(HelpdeskException):
    """Raised when a ticket cannot be found."""

    def __init__(self, ticket_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize ticket not found error.

        Args:
            ticket_id: ID of the missing ticket
            details: Additional context
        """
        details = details or {}
        details["ticket_id"] = ticket_id
        self.ticket_id = ticket_id
        super().__init__(f"Ticket not found: {ticket_id}", details)
