"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_analysis_pipeline,
    get_completion_client,
    get_member_service,
    get_service_cache,
    get_settings_dependency,
    get_ticket_chat_service,
)

__all__ = [
    "ServiceCache",
    "get_analysis_pipeline",
    "get_completion_client",
    "get_member_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_ticket_chat_service",
]
