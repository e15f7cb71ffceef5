"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from helpdesk.configs.analysis import AnalysisSettings
from helpdesk.configs.base import BaseSettings
from helpdesk.configs.chat import ChatSettings
from helpdesk.configs.database import DatabaseSettings
from helpdesk.configs.llm import LLMSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    llm: LLMSettings = LLMSettings()
    analysis: AnalysisSettings = AnalysisSettings()
    chat: ChatSettings = ChatSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from helpdesk.configs import get_settings
        settings = get_settings()
        chunk_size = settings.analysis.chunk_size
    """
    return Settings()
