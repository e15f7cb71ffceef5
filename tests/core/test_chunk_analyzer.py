"""
Test suite for ChunkAnalyzer.

Tests cover:
- Result assembly from model reply and chunk heuristics
- Linear-backoff retry of provider failures and timeouts
- Propagation of the final attempt's error

System role: Verification of per-chunk analysis
"""

from unittest.mock import AsyncMock, MagicMock, call

import pytest

from helpdesk.core.analysis.chunk_analyzer import ChunkAnalyzer
from helpdesk.core.exceptions import (
    CompletionTimeoutError,
    EmptyCompletionError,
    InvalidInputError,
    ProviderError,
)
from helpdesk.models.analysis import Sentiment

REPLY = "Customer cannot log in.\n- Reset the password\n- Check account lock"


@pytest.fixture
def fake_sleep() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def analyzer(mock_completion_client: MagicMock, fake_sleep: AsyncMock) -> ChunkAnalyzer:
    return ChunkAnalyzer(
        mock_completion_client,
        max_retries=2,
        backoff_seconds=1.0,
        call_timeout=5.0,
        max_tokens=500,
        temperature=0.7,
        sleep=fake_sleep,
    )


class TestAnalyzeOnce:
    """Test suite for a single analysis call."""

    @pytest.mark.asyncio
    async def test_analyze_once_should_build_result(
        self,
        analyzer: ChunkAnalyzer,
        mock_completion_client: MagicMock,
    ) -> None:
        """Summary and suggestions come from the reply, sentiment and keywords from the chunk."""
        # Arrange
        mock_completion_client.complete.return_value = REPLY
        chunk = "Login error again. The login page shows an error"

        # Act
        result = await analyzer.analyze_once(chunk, chunk_index=3)

        # Assert
        assert result.summary == REPLY
        assert result.suggestions == ["Reset the password", "Check account lock"]
        assert result.sentiment == Sentiment.NEGATIVE
        assert result.keywords == ["login", "error"]
        assert result.chunk_index == 3

    @pytest.mark.asyncio
    async def test_analyze_once_should_pass_generation_options(
        self,
        analyzer: ChunkAnalyzer,
        mock_completion_client: MagicMock,
    ) -> None:
        # Act
        await analyzer.analyze_once("text", context={"ticketId": "T-1"})

        # Assert
        system_prompt, user_prompt = mock_completion_client.complete.call_args.args
        kwargs = mock_completion_client.complete.call_args.kwargs
        assert '"ticketId": "T-1"' in system_prompt
        assert "text" in user_prompt
        assert kwargs == {"max_tokens": 500, "temperature": 0.7, "timeout": 5.0}

    @pytest.mark.asyncio
    async def test_analyze_once_should_prefer_explicit_timeout(
        self,
        analyzer: ChunkAnalyzer,
        mock_completion_client: MagicMock,
    ) -> None:
        await analyzer.analyze_once("text", timeout=60.0)

        assert mock_completion_client.complete.call_args.kwargs["timeout"] == 60.0

    @pytest.mark.asyncio
    async def test_analyze_once_should_not_retry(
        self,
        analyzer: ChunkAnalyzer,
        mock_completion_client: MagicMock,
    ) -> None:
        mock_completion_client.complete.side_effect = ProviderError("boom")

        with pytest.raises(ProviderError):
            await analyzer.analyze_once("text")

        assert mock_completion_client.complete.await_count == 1


class TestAnalyzeWithRetry:
    """Test suite for retrying analysis."""

    @pytest.mark.asyncio
    async def test_should_succeed_after_two_failures(
        self,
        analyzer: ChunkAnalyzer,
        mock_completion_client: MagicMock,
        fake_sleep: AsyncMock,
    ) -> None:
        """Two failures then success: three calls, waits of 1s then 2s."""
        # Arrange
        mock_completion_client.complete.side_effect = [
            ProviderError("rate limited", code="rate_limit_exceeded"),
            CompletionTimeoutError("slow", timeout=5.0),
            REPLY,
        ]

        # Act
        result = await analyzer.analyze("chunk text", chunk_index=1)

        # Assert
        assert result.summary == REPLY
        assert mock_completion_client.complete.await_count == 3
        assert fake_sleep.await_args_list == [call(1.0), call(2.0)]

    @pytest.mark.asyncio
    async def test_should_raise_last_error_when_attempts_exhausted(
        self,
        analyzer: ChunkAnalyzer,
        mock_completion_client: MagicMock,
        fake_sleep: AsyncMock,
    ) -> None:
        # Arrange
        mock_completion_client.complete.side_effect = [
            ProviderError("first"),
            ProviderError("second"),
            ProviderError("third", code="insufficient_quota"),
        ]

        # Act & Assert
        with pytest.raises(ProviderError) as exc_info:
            await analyzer.analyze("chunk text")

        assert exc_info.value.message == "third"
        assert exc_info.value.code == "insufficient_quota"
        assert mock_completion_client.complete.await_count == 3
        assert fake_sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_should_retry_empty_completion(
        self,
        analyzer: ChunkAnalyzer,
        mock_completion_client: MagicMock,
    ) -> None:
        mock_completion_client.complete.side_effect = [EmptyCompletionError(), REPLY]

        result = await analyzer.analyze("chunk text")

        assert result.summary == REPLY
        assert mock_completion_client.complete.await_count == 2

    @pytest.mark.asyncio
    async def test_should_not_retry_non_provider_errors(
        self,
        analyzer: ChunkAnalyzer,
        mock_completion_client: MagicMock,
        fake_sleep: AsyncMock,
    ) -> None:
        mock_completion_client.complete.side_effect = InvalidInputError("bad")

        with pytest.raises(InvalidInputError):
            await analyzer.analyze("chunk text")

        assert mock_completion_client.complete.await_count == 1
        fake_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_zero_retries_should_make_one_attempt(
        self,
        mock_completion_client: MagicMock,
        fake_sleep: AsyncMock,
    ) -> None:
        # Arrange
        analyzer = ChunkAnalyzer(mock_completion_client, max_retries=0, sleep=fake_sleep)
        mock_completion_client.complete.side_effect = ProviderError("down")

        # Act & Assert
        with pytest.raises(ProviderError):
            await analyzer.analyze("chunk text")
        assert mock_completion_client.complete.await_count == 1
