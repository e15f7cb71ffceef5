"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from helpdesk.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from helpdesk.observability.logger import CorrelationIdFilter, configure_logging

__all__ = [
    "configure_logging",
    "CorrelationIdFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
