"""
Router utility functions.

Contains helpers extracted from router endpoints to keep them clean.
"""

from helpdesk.api.routers.router_utils.error_handling import (
    error_response,
    handle_helpdesk_errors,
)
from helpdesk.api.routers.router_utils.request_parsing import parse_body

__all__ = [
    "error_response",
    "handle_helpdesk_errors",
    "parse_body",
]
