"""
Ticket chat configuration settings.

Dependencies: pydantic_settings
System role: Ticket assistant chat configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChatSettings(BaseSettings):
    """Ticket chat behaviour."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_",
        case_sensitive=False,
        extra="ignore",
    )

    history_limit: int = Field(
        default=20,
        ge=0,
        description="Maximum prior messages forwarded to the model",
    )
    persist_messages: bool = Field(
        default=True,
        description="Store each user/assistant exchange on the ticket",
    )
