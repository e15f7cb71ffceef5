"""
Shared test fixtures and configuration for entire test suite.

Provides: completion client mocks, analysis settings, in-memory async database
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from helpdesk.boundary.llm.completion_client import CompletionClient
from helpdesk.configs.analysis import AnalysisSettings


@pytest.fixture
def analysis_settings() -> AnalysisSettings:
    """Analysis settings with the documented defaults and a tiny backoff."""
    return AnalysisSettings(
        chunk_size=2000,
        max_retries=2,
        retry_backoff_seconds=1.0,
        timeout_seconds=5.0,
        chunk_timeout_seconds=5.0,
        max_concurrency=4,
    )


@pytest.fixture
def mock_completion_client() -> MagicMock:
    """
    Create mock CompletionClient.

    Returns:
        MagicMock: Client whose complete() returns a bulleted reply
    """
    client = MagicMock(spec=CompletionClient)
    client.complete = AsyncMock(
        return_value="Summary of the content.\n- Reply to the customer\n- Close the ticket"
    )
    client.complete_messages = AsyncMock(return_value="Assistant reply")
    return client


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with all helpdesk tables
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from helpdesk.boundary.db.create_tables import create_all_tables, drop_all_tables

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all_tables(engine)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await drop_all_tables(engine)
    await engine.dispose()
