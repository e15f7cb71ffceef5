"""
Ticket chat service.

Orchestrates the ticket assistant: ticket lookup, prompt assembly with
conversation history, completion call, best-effort persistence of the
exchange, and the optional heuristic assessment.

Dependencies: helpdesk.boundary.db, helpdesk.boundary.llm, helpdesk.core
System role: Ticket chat orchestration layer
"""

import json
import logging
from collections.abc import AsyncIterator, Sequence
from uuid import UUID

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.boundary.db.CRUD.ticket_crud import ticket_crud
from helpdesk.boundary.db.CRUD.ticket_message_crud import ticket_message_crud
from helpdesk.boundary.db.models.ticket_model import TicketModel
from helpdesk.boundary.llm.completion_client import CompletionClient
from helpdesk.configs.chat import ChatSettings
from helpdesk.core.exceptions import InvalidInputError, TicketNotFoundError
from helpdesk.core.ticket_chat_prompts import TICKET_CHAT_PROMPT, get_admin_chat_prompt
from helpdesk.core.ticket_triage import (
    suggest_category,
    suggest_next_steps,
    suggest_priority,
    wants_assessment,
)
from helpdesk.models.chat import ChatHistoryMessage, TicketChatResponse, TicketTriage

logger = logging.getLogger(__name__)

_HISTORY_MESSAGE_TYPES: dict[str, type[BaseMessage]] = {
    "user": HumanMessage,
    "assistant": AIMessage,
    "system": SystemMessage,
}


def to_langchain_history(history: Sequence[ChatHistoryMessage]) -> list[BaseMessage]:
    """Convert wire-format history into LangChain messages, order preserved."""
    return [_HISTORY_MESSAGE_TYPES[msg.role](content=msg.content) for msg in history]


def assess_ticket(ticket: TicketModel) -> TicketTriage:
    """Heuristic priority, category and next steps for a ticket."""
    return TicketTriage(
        suggestedPriority=suggest_priority(ticket),
        suggestedCategory=suggest_category(ticket),
        nextSteps=suggest_next_steps(ticket),
    )


class TicketChatService:
    """
    Ticket assistant chat.

    Coordinates ticket lookup, completion calls and message persistence.
    Persistence is best-effort: a storage failure is logged and never
    fails the request.
    """

    def __init__(
        self,
        db: AsyncSession,
        completion_client: CompletionClient,
        settings: ChatSettings | None = None,
    ) -> None:
        """
        Initialize ticket chat service.

        Args:
            db: AsyncSession for ticket lookup and message storage
            completion_client: Completion provider adapter
            settings: History and persistence options
        """
        self.db = db
        self.completion_client = completion_client
        self.settings = settings or ChatSettings()

    async def get_ticket(self, ticket_id: str) -> TicketModel:
        """
        Load a ticket with its project.

        Raises:
            TicketNotFoundError: Unknown or malformed ticket ID
        """
        try:
            ticket_uuid = UUID(str(ticket_id))
        except ValueError:
            raise TicketNotFoundError(str(ticket_id))

        ticket = await ticket_crud.get_with_project(self.db, ticket_uuid)
        if ticket is None:
            raise TicketNotFoundError(str(ticket_id))
        return ticket

    def _trim_history(self, history: Sequence[ChatHistoryMessage]) -> list[BaseMessage]:
        limit = self.settings.history_limit
        recent = list(history)[-limit:] if limit else []
        return to_langchain_history(recent)

    async def process_chat(
        self,
        ticket_id: str,
        message: str,
        history: Sequence[ChatHistoryMessage] = (),
    ) -> TicketChatResponse:
        """
        Answer an agent's message about a ticket.

        Flow:
        1. Load the ticket
        2. Build system + history + user prompt
        3. Invoke the completion provider
        4. Attach a heuristic assessment when the message asks for one
        5. Store the exchange (best-effort)

        Args:
            ticket_id: Ticket UUID string
            message: Agent's message
            history: Prior conversation turns, oldest first

        Returns:
            TicketChatResponse: Assistant reply and optional assessment

        Raises:
            InvalidInputError: Empty message
            TicketNotFoundError: Ticket does not exist
            ProviderError: Provider failed the request
            CompletionTimeoutError: Provider did not answer in time
        """
        if not message:
            raise InvalidInputError("Missing required field: message", field="message")

        ticket = await self.get_ticket(ticket_id)
        logger.info(f"{__name__}:process_chat - ticket_id={ticket.id}, history_len={len(history)}")

        messages = TICKET_CHAT_PROMPT.invoke({
            "title": ticket.title,
            "description": ticket.description,
            "priority": ticket.priority,
            "status": ticket.status,
            "history": self._trim_history(history),
            "message": message,
        }).to_messages()

        reply = await self.completion_client.complete_messages(messages)

        analysis = assess_ticket(ticket) if wants_assessment(message) else None

        if self.settings.persist_messages:
            await self._store_exchange(ticket.id, message, reply)

        return TicketChatResponse(response=reply, analysis=analysis)

    async def _store_exchange(self, ticket_id: UUID, message: str, reply: str) -> None:
        try:
            await ticket_message_crud.add_exchange(self.db, ticket_id, message, reply)
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error(
                f"{__name__}:_store_exchange - Failed to store messages for "
                f"ticket_id={ticket_id}: {type(e).__name__}: {e}"
            )
            await self.db.rollback()

    async def stream_admin_chat(
        self,
        ticket_id: str,
        message: str,
        history: Sequence[ChatHistoryMessage] = (),
        user_role: str | None = None,
    ) -> AsyncIterator[str]:
        """
        Stream the assistant's reply for the admin portal chat.

        The ticket is loaded and the prompt assembled before returning, so
        the returned iterator only talks to the completion provider.

        Args:
            ticket_id: Ticket UUID string
            message: User's message
            history: Prior conversation turns, oldest first
            user_role: 'client' selects the client-facing prompt

        Returns:
            AsyncIterator[str]: Reply text deltas

        Raises:
            InvalidInputError: Empty message
            TicketNotFoundError: Ticket does not exist
        """
        if not message:
            raise InvalidInputError("Missing required field: message", field="message")

        ticket = await self.get_ticket(ticket_id)
        prompt = get_admin_chat_prompt(user_role)
        messages = prompt.invoke({
            "ticket_json": json.dumps(ticket.to_prompt_dict(), default=str),
            "history": self._trim_history(history),
            "message": message,
        }).to_messages()

        logger.info(
            f"{__name__}:stream_admin_chat - ticket_id={ticket.id}, "
            f"role={user_role or 'agent'}, messages={len(messages)}"
        )
        return self.completion_client.stream_messages(messages)
