"""
Content analysis pipeline configuration.

Chunking, retry, timeout and fan-out tunables for the analysis pipeline.

Dependencies: pydantic, pydantic_settings
System role: Analysis pipeline configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisSettings(BaseSettings):
    """Tunables for chunked content analysis."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ANALYSIS_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=2000, gt=0, description="Maximum characters per chunk")
    max_retries: int = Field(
        default=2,
        ge=0,
        description="Additional attempts per chunk after the first failure",
    )
    retry_backoff_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Linear backoff step; attempt N waits N * step",
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="End-to-end deadline for single-chunk analysis",
    )
    chunk_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-call deadline for each chunk attempt",
    )
    max_concurrency: int = Field(
        default=4,
        ge=1,
        description="Maximum chunks analyzed concurrently",
    )
    overall_timeout_seconds: float | None = Field(
        default=None,
        description="Optional deadline for the whole multi-chunk request",
    )
    max_tokens: int = Field(default=500, description="Completion token budget per call")
    temperature: float = Field(default=0.7, description="Sampling temperature")
