"""
Chunked content analysis pipeline.

Chunk-split, per-chunk model call with bounded retry, then merge. Short
inputs take a single-call fast path raced against an end-to-end deadline.

Dependencies: asyncio, helpdesk.core.analysis, helpdesk.configs
System role: Orchestrates the content analysis flow
"""

import asyncio
import logging

from helpdesk.configs.analysis import AnalysisSettings
from helpdesk.core.analysis.chunk_analyzer import ChunkAnalyzer
from helpdesk.core.analysis.chunker import split_into_chunks
from helpdesk.core.analysis.merger import merge_results
from helpdesk.core.exceptions import (
    AnalysisTimeoutError,
    CompletionTimeoutError,
    InvalidInputError,
)
from helpdesk.models.analysis import AnalysisRequest, AnalysisResult, ChunkContext, ChunkResult
from helpdesk.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """
    Content analysis over arbitrarily long text.

    Multi-chunk requests fan out to at most max_concurrency concurrent
    chunk analyses; results are merged in chunk order once every chunk
    has succeeded. Any chunk failure fails the whole request.
    """

    def __init__(
        self,
        analyzer: ChunkAnalyzer,
        settings: AnalysisSettings | None = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            analyzer: Per-chunk analyzer (owns retry policy)
            settings: Chunking, timeout and concurrency tunables
        """
        self._analyzer = analyzer
        self._settings = settings or AnalysisSettings()

    @property
    def settings(self) -> AnalysisSettings:
        return self._settings

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult | None:
        """
        Analyze request content.

        Args:
            request: Content plus optional caller context

        Returns:
            AnalysisResult | None: Merged analysis (None only if no chunk produced a result)

        Raises:
            InvalidInputError: Empty content
            AnalysisTimeoutError: End-to-end deadline exceeded
            ProviderError: A chunk failed at the provider after all retries
            CompletionTimeoutError: A chunk timed out on every attempt
        """
        if not request.content:
            raise InvalidInputError("Missing required field: content", field="content")

        chunks = split_into_chunks(request.content, self._settings.chunk_size)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:analyze - START",
            content_length=len(request.content),
            chunk_count=len(chunks),
        )

        if len(chunks) == 1:
            return await self._analyze_single(chunks[0], request)

        results = await self._analyze_chunks(chunks, request)
        merged = merge_results(results)
        logger.info(f"{__name__}:analyze - Merged {len(results)} chunk results")
        return merged

    async def _analyze_single(self, chunk: str, request: AnalysisRequest) -> AnalysisResult:
        timeout = self._settings.timeout_seconds
        try:
            result = await asyncio.wait_for(
                self._analyzer.analyze_once(chunk, request.context, timeout=timeout),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, CompletionTimeoutError):
            raise AnalysisTimeoutError("Analysis timed out", timeout=timeout)
        return result.to_analysis_result()

    async def _analyze_chunks(
        self,
        chunks: list[str],
        request: AnalysisRequest,
    ) -> list[ChunkResult]:
        semaphore = asyncio.Semaphore(self._settings.max_concurrency)
        total = len(chunks)

        async def _bounded(index: int, chunk: str) -> ChunkResult:
            context = ChunkContext.for_chunk(request.context, index, total)
            async with semaphore:
                return await self._analyzer.analyze(chunk, context.to_prompt_dict(), index)

        tasks = [asyncio.ensure_future(_bounded(i, chunk)) for i, chunk in enumerate(chunks)]
        gathered = asyncio.gather(*tasks)
        overall = self._settings.overall_timeout_seconds

        try:
            if overall is None:
                return list(await gathered)
            return list(await asyncio.wait_for(gathered, timeout=overall))
        except asyncio.TimeoutError:
            raise AnalysisTimeoutError("Analysis timed out", timeout=overall)
        finally:
            # A failed chunk fails the request; stop the siblings
            for task in tasks:
                if not task.done():
                    task.cancel()
