"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, helpdesk.configs
System role: Database schema initialization

Usage:
    python -m helpdesk.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from helpdesk.boundary.db.base import Base
from helpdesk.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from helpdesk.boundary.db import models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all tables registered with Base.metadata.

    Idempotent: existing tables remain unchanged.

    Args:
        engine: Target engine (configured engine if None)
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"{__name__}:create_all_tables - Tables created")


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info(f"{__name__}:drop_all_tables - Tables dropped")


if __name__ == "__main__":
    asyncio.run(create_all_tables())
