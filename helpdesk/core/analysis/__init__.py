"""
Chunked content analysis.

Splits long text into bounded chunks, analyzes each chunk with the
completion provider plus keyword heuristics, and merges the results.
"""

from helpdesk.core.analysis.chunk_analyzer import ChunkAnalyzer
from helpdesk.core.analysis.chunker import split_into_chunks
from helpdesk.core.analysis.heuristics import (
    classify_sentiment,
    extract_keywords,
    extract_suggestions,
)
from helpdesk.core.analysis.merger import merge_results
from helpdesk.core.analysis.pipeline import AnalysisPipeline

__all__ = [
    "AnalysisPipeline",
    "ChunkAnalyzer",
    "classify_sentiment",
    "extract_keywords",
    "extract_suggestions",
    "merge_results",
    "split_into_chunks",
]
