"""
Ticket message CRUD operations.

Stores and lists the assistant conversation attached to a ticket.

Dependencies: sqlalchemy, helpdesk.boundary.db
System role: Chat message persistence on tickets
"""

from datetime import datetime, timedelta, timezone
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.boundary.db.CRUD.base_crud import BaseCRUD
from helpdesk.boundary.db.models.ticket_message_model import MessageRole, TicketMessageModel


class TicketMessageCRUD(BaseCRUD[TicketMessageModel]):
    """CRUD operations for ticket chat messages."""

    def __init__(self) -> None:
        super().__init__(TicketMessageModel)

    async def add_exchange(
        self,
        session: AsyncSession,
        ticket_id: UUID,
        user_content: str,
        assistant_content: str,
    ) -> list[TicketMessageModel]:
        """
        Store a user message and the assistant's reply in one flush.

        Args:
            session: Async database session
            ticket_id: Parent ticket UUID
            user_content: Message sent by the agent
            assistant_content: Assistant reply

        Returns:
            list[TicketMessageModel]: The two stored rows, user first
        """
        # Reply always sorts after its message
        sent_at = datetime.now(timezone.utc)
        messages = [
            TicketMessageModel(
                ticket_id=ticket_id,
                role=MessageRole.USER,
                content=user_content,
                created_at=sent_at,
            ),
            TicketMessageModel(
                ticket_id=ticket_id,
                role=MessageRole.ASSISTANT,
                content=assistant_content,
                created_at=sent_at + timedelta(microseconds=1),
            ),
        ]
        session.add_all(messages)
        await session.flush()
        return messages

    async def list_for_ticket(
        self,
        session: AsyncSession,
        ticket_id: UUID,
        limit: int | None = None,
    ) -> Sequence[TicketMessageModel]:
        """
        List a ticket's messages oldest first.

        Args:
            session: Async database session
            ticket_id: Parent ticket UUID
            limit: Keep only the most recent N messages

        Returns:
            Sequence of messages in chronological order
        """
        stmt = (
            select(TicketMessageModel)
            .where(TicketMessageModel.ticket_id == ticket_id)
            .order_by(TicketMessageModel.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return list(reversed(result.scalars().all()))


ticket_message_crud = TicketMessageCRUD()
