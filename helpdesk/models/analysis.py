"""
Content analysis domain models.

Request, per-chunk and merged result schemas for the analysis pipeline.

Dependencies: pydantic
System role: Analysis pipeline data contracts
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Sentiment(str, Enum):
    """Coarse sentiment label. Declaration order is the merge tie-break order."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class AnalysisRequest(BaseModel):
    """One analysis call: the text to analyze plus opaque caller context."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(min_length=1, description="Text to analyze")
    context: dict[str, Any] | None = Field(
        default=None,
        description="Opaque caller context embedded in the system prompt",
    )


class ChunkContext(BaseModel):
    """Caller context extended with the chunk's position in the input."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    chunk_index: int = Field(ge=0, alias="chunkIndex")
    chunk_total: int = Field(ge=1, alias="chunkTotal")
    is_partial: bool = Field(default=True, alias="isPartial")

    @classmethod
    def for_chunk(
        cls,
        context: dict[str, Any] | None,
        chunk_index: int,
        chunk_total: int,
    ) -> "ChunkContext":
        """Build the context for one chunk of a multi-chunk request."""
        data = dict(context or {})
        data.update(
            chunkIndex=chunk_index,
            chunkTotal=chunk_total,
            isPartial=chunk_total > 1,
        )
        return cls.model_validate(data)

    def to_prompt_dict(self) -> dict[str, Any]:
        """Caller keys followed by the camelCase chunk keys."""
        data = dict(self.model_extra or {})
        data.update(
            chunkIndex=self.chunk_index,
            chunkTotal=self.chunk_total,
            isPartial=self.is_partial,
        )
        return data


class AnalysisResult(BaseModel):
    """Analysis of a whole input."""

    summary: str
    sentiment: Sentiment
    suggestions: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)


class ChunkResult(AnalysisResult):
    """Analysis of one chunk, tagged with its source position."""

    chunk_index: int = Field(default=0, ge=0, exclude=True)

    def to_analysis_result(self) -> AnalysisResult:
        """Drop the chunk position for single-chunk responses."""
        return AnalysisResult(
            summary=self.summary,
            sentiment=self.sentiment,
            suggestions=list(self.suggestions),
            keywords=list(self.keywords),
        )


class AnalyzeRequestBody(BaseModel):
    """Request schema for POST /analyze."""

    content: str | None = Field(default=None, description="Text to analyze")
    context: dict[str, Any] | None = Field(default=None, description="Optional context")


class AnalyzeResponse(BaseModel):
    """Response schema for POST /analyze."""

    analysis: AnalysisResult | None
