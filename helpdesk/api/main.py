"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, helpdesk.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helpdesk.api.deps.dependencies import get_service_cache
from helpdesk.configs import get_settings
from helpdesk.observability.logger import configure_logging
from helpdesk.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    admin_chat_router,
    analyze_router,
    health_router,
    members_router,
    ticket_chat_router,
)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and pre-warms the service cache on startup;
    clears the cache on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.completion_client
    _ = cache.analysis_pipeline
    logger.info(
        f"Service cache pre-warmed (model={settings.llm.model}, "
        f"chunk_size={settings.analysis.chunk_size}, "
        f"max_concurrency={settings.analysis.max_concurrency})"
    )

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Helpdesk AI Assistant API",
        description="Support-ticket assistant: content analysis and ticket chat",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Outermost middleware is added last; correlation must wrap logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(analyze_router, prefix=API_PREFIX)
    app.include_router(ticket_chat_router, prefix=API_PREFIX)
    app.include_router(admin_chat_router, prefix=API_PREFIX)
    app.include_router(members_router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "helpdesk.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
