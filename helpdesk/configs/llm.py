"""
Completion provider configuration settings.

Credentials and default generation parameters for the OpenAI chat model.

Dependencies: pydantic, pydantic_settings
System role: LLM client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """OpenAI chat completion configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPENAI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="OpenAI API key")
    model: str = Field(default="gpt-4-turbo-preview", description="Chat model name")
    temperature: float = Field(default=0.7, description="Default sampling temperature")
    max_tokens: int = Field(default=500, description="Default completion token budget")
    request_timeout: float = Field(
        default=30.0,
        description="Per-call deadline in seconds",
    )
