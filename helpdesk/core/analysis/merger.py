"""
Chunk result merger.

Combines per-chunk analyses, in chunk order, into one result.

Dependencies: helpdesk.models.analysis
System role: Fan-in step of the analysis pipeline
"""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence

from helpdesk.core.analysis.heuristics import MAX_KEYWORDS
from helpdesk.models.analysis import AnalysisResult, ChunkResult, Sentiment

logger = logging.getLogger(__name__)

SUMMARY_SEPARATOR = "\n\n"

# Exact ties go to the earlier entry
SENTIMENT_PRECEDENCE = (Sentiment.POSITIVE, Sentiment.NEUTRAL, Sentiment.NEGATIVE)


def _unique(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def majority_sentiment(sentiments: Sequence[Sentiment]) -> Sentiment:
    """
    Pick the most common sentiment.

    Ties resolve as positive, then neutral, then negative.
    """
    counts = Counter(sentiments)
    return max(
        SENTIMENT_PRECEDENCE,
        key=lambda s: (counts[s], -SENTIMENT_PRECEDENCE.index(s)),
    )


def merge_results(results: Sequence[ChunkResult]) -> AnalysisResult | None:
    """
    Merge chunk results into a single analysis.

    Results are ordered by chunk index before merging, so callers may
    pass them in completion order.

    Args:
        results: One result per chunk, all chunks succeeded

    Returns:
        AnalysisResult | None: Merged analysis, None for an empty input
    """
    if not results:
        logger.error(f"{__name__}:merge_results - No chunk results to merge")
        return None

    ordered = sorted(results, key=lambda r: r.chunk_index)

    return AnalysisResult(
        summary=SUMMARY_SEPARATOR.join(r.summary for r in ordered),
        sentiment=majority_sentiment([r.sentiment for r in ordered]),
        suggestions=_unique(s for r in ordered for s in r.suggestions),
        keywords=_unique(k.lower() for r in ordered for k in r.keywords)[:MAX_KEYWORDS],
    )
