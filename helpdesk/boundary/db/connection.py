"""
Database connection management.

Provides the async SQLAlchemy engine, session factory and FastAPI
dependency for database session injection.

Dependencies: sqlalchemy, asyncpg, helpdesk.configs
System role: Database connection lifecycle management
"""

from collections.abc import AsyncGenerator
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from helpdesk.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the process-wide async engine with connection pooling.

    pool_pre_ping=True verifies connections before use to detect
    stale connections to the managed database early.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine
    """
    db_config = get_settings().database

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory with explicit transaction control.

    Returns:
        async_sessionmaker: Factory producing sessions with autoflush off
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a request-scoped async session.

    The session is closed after the route completes, even on error.

    Yields:
        AsyncSession: Async SQLAlchemy database session

    Usage:
        @router.get("/tickets/{id}")
        async def get_ticket(id: UUID, db: AsyncSession = Depends(get_async_db)):
            return await ticket_crud.get_by_id(db, id)
    """
    session_factory = get_async_session_factory()
    async with session_factory() as session:
        yield session
