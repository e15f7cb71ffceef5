"""
Ticket chat schemas.

Request/response schemas for the ticket assistant chat endpoints.
Field aliases keep the camelCase wire format used by the portal.

Dependencies: pydantic
System role: Ticket chat API contracts
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatHistoryMessage(BaseModel):
    """One prior turn of the conversation."""

    role: Literal["user", "assistant", "system"] = Field(description="Message author")
    content: str = Field(description="Message content")


class TicketChatRequest(BaseModel):
    """Request schema for POST /tickets/ai-chat."""

    model_config = ConfigDict(populate_by_name=True)

    ticket_id: str | None = Field(default=None, alias="ticketId")
    message: str | None = Field(default=None, description="Agent's message")
    history: list[ChatHistoryMessage] = Field(default_factory=list)


class AdminChatRequest(TicketChatRequest):
    """Request schema for POST /admin/ai-chat."""

    user_role: str | None = Field(
        default=None,
        alias="userRole",
        description="'client' for the client-facing assistant, anything else for agents",
    )


class TicketTriage(BaseModel):
    """Heuristic ticket assessment attached to a chat reply."""

    model_config = ConfigDict(populate_by_name=True)

    suggested_priority: str = Field(alias="suggestedPriority")
    suggested_category: str = Field(alias="suggestedCategory")
    next_steps: list[str] = Field(default_factory=list, alias="nextSteps")


class TicketChatResponse(BaseModel):
    """Response schema for POST /tickets/ai-chat."""

    response: str
    analysis: TicketTriage | None = None
