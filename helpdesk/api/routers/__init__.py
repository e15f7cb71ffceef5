"""API routers."""

from .admin_chat import router as admin_chat_router
from .analyze import router as analyze_router
from .health import router as health_router
from .members import router as members_router
from .ticket_chat import router as ticket_chat_router

__all__ = [
    "admin_chat_router",
    "analyze_router",
    "health_router",
    "members_router",
    "ticket_chat_router",
]
