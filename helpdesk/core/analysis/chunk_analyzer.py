"""
Retrying chunk analyzer.

Analyzes one chunk with the completion provider, retrying transient
provider failures with linear backoff, then augments the reply with
keyword heuristics.

Dependencies: tenacity, helpdesk.boundary.llm, helpdesk.core.analysis
System role: Per-chunk analysis with bounded retry
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from helpdesk.boundary.llm.completion_client import CompletionClient
from helpdesk.core.analysis.heuristics import (
    classify_sentiment,
    extract_keywords,
    extract_suggestions,
)
from helpdesk.core.analysis.prompts import build_system_prompt, build_user_prompt
from helpdesk.core.exceptions import CompletionTimeoutError, ProviderError
from helpdesk.models.analysis import ChunkResult

logger = logging.getLogger(__name__)

# EmptyCompletionError is a ProviderError
RETRYABLE_ERRORS = (ProviderError, CompletionTimeoutError)

DEFAULT_MAX_RETRIES = 2
DEFAULT_BACKOFF_SECONDS = 1.0


class ChunkAnalyzer:
    """
    Turns one chunk of text into a ChunkResult.

    The model's reply becomes the summary and the source of suggestions;
    sentiment and keywords come from the chunk text itself.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        max_retries: int = DEFAULT_MAX_RETRIES,
        backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
        call_timeout: float | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """
        Initialize chunk analyzer.

        Args:
            completion_client: Adapter for the completion provider
            max_retries: Attempts allowed after the first failure
            backoff_seconds: Wait before retry N is N * backoff_seconds
            call_timeout: Deadline per provider call in seconds
            max_tokens: Completion token budget per call
            temperature: Sampling temperature
            sleep: Awaitable sleep used between attempts
        """
        self._client = completion_client
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds
        self._call_timeout = call_timeout
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._sleep = sleep

    async def analyze_once(
        self,
        chunk: str,
        context: dict[str, Any] | None = None,
        chunk_index: int = 0,
        timeout: float | None = None,
    ) -> ChunkResult:
        """
        Analyze a chunk with a single provider call and no retry.

        Args:
            chunk: Chunk text
            context: Context serialized into the system prompt
            chunk_index: Position of the chunk in the original input
            timeout: Deadline for the provider call (analyzer default if None)

        Returns:
            ChunkResult: Analysis of this chunk
        """
        model_text = await self._client.complete(
            build_system_prompt(context),
            build_user_prompt(chunk),
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            timeout=timeout if timeout is not None else self._call_timeout,
        )
        return ChunkResult(
            chunk_index=chunk_index,
            summary=model_text,
            sentiment=classify_sentiment(chunk),
            suggestions=extract_suggestions(model_text),
            keywords=extract_keywords(chunk),
        )

    async def analyze(
        self,
        chunk: str,
        context: dict[str, Any] | None = None,
        chunk_index: int = 0,
    ) -> ChunkResult:
        """
        Analyze a chunk, retrying provider failures and timeouts.

        Makes at most max_retries + 1 attempts, waiting backoff_seconds
        times the attempt number between them. The final attempt's error
        propagates unchanged.

        Args:
            chunk: Chunk text
            context: Context serialized into the system prompt
            chunk_index: Position of the chunk in the original input

        Returns:
            ChunkResult: Analysis of this chunk

        Raises:
            ProviderError: All attempts failed at the provider
            CompletionTimeoutError: All attempts timed out
        """

        def _log_retry(retry_state: RetryCallState) -> None:
            exc = retry_state.outcome.exception() if retry_state.outcome else None
            logger.warning(
                f"{__name__}:analyze - Chunk {chunk_index} attempt "
                f"{retry_state.attempt_number}/{self._max_retries + 1} failed "
                f"({type(exc).__name__}: {exc}), retrying"
            )

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            stop=stop_after_attempt(self._max_retries + 1),
            wait=wait_incrementing(start=self._backoff_seconds, increment=self._backoff_seconds),
            before_sleep=_log_retry,
            sleep=self._sleep,
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                result = await self.analyze_once(chunk, context, chunk_index)
        logger.debug(f"{__name__}:analyze - Chunk {chunk_index} analyzed")
        return result
