"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: helpdesk.configs, helpdesk.core, helpdesk.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.application.services import MemberService, TicketChatService
from helpdesk.boundary.db import get_async_db
from helpdesk.boundary.llm.completion_client import CompletionClient
from helpdesk.configs import Settings, get_settings
from helpdesk.core.analysis.chunk_analyzer import ChunkAnalyzer
from helpdesk.core.analysis.pipeline import AnalysisPipeline


class ServiceCache:
    """Container for process-wide service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._completion_client = None
        self._analysis_pipeline = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def completion_client(self) -> CompletionClient:
        """Get cached completion client."""
        if self._completion_client is None:
            self._completion_client = CompletionClient(settings=self.settings.llm)
        return self._completion_client

    @property
    def analysis_pipeline(self) -> AnalysisPipeline:
        """Get cached analysis pipeline wired to the completion client."""
        if self._analysis_pipeline is None:
            analysis = self.settings.analysis
            analyzer = ChunkAnalyzer(
                self.completion_client,
                max_retries=analysis.max_retries,
                backoff_seconds=analysis.retry_backoff_seconds,
                call_timeout=analysis.chunk_timeout_seconds,
                max_tokens=analysis.max_tokens,
                temperature=analysis.temperature,
            )
            self._analysis_pipeline = AnalysisPipeline(analyzer, settings=analysis)
        return self._analysis_pipeline

    def clear(self) -> None:
        """Clear all cached instances."""
        self._completion_client = None
        self._analysis_pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_completion_client() -> CompletionClient:
    """Get the shared completion provider client."""
    return get_service_cache().completion_client


def get_analysis_pipeline() -> AnalysisPipeline:
    """Get the shared content analysis pipeline."""
    return get_service_cache().analysis_pipeline


def get_ticket_chat_service(
    db: AsyncSession = Depends(get_async_db),
    completion_client: CompletionClient = Depends(get_completion_client),
) -> TicketChatService:
    """
    Get ticket chat service instance.

    Args:
        db: Async database session (injected via Depends)
        completion_client: Shared completion client (injected via Depends)

    Returns:
        TicketChatService: Ticket chat service bound to this request's session
    """
    return TicketChatService(
        db=db,
        completion_client=completion_client,
        settings=get_service_cache().settings.chat,
    )


def get_member_service(db: AsyncSession = Depends(get_async_db)) -> MemberService:
    """
    Get member directory service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        MemberService: Member service bound to this request's session
    """
    return MemberService(db=db)
