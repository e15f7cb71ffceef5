"""
Ticket message ORM model.

Dependencies: sqlalchemy, helpdesk.boundary.db.base
System role: Persistence of assistant chat exchanges on a ticket
"""

import enum
from uuid import UUID

from sqlalchemy import Enum, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class MessageRole(str, enum.Enum):
    """Author of a stored chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class TicketMessageModel(Base, UUIDMixin, TimestampMixin):
    """
    One chat message stored on a ticket.

    Attributes:
        ticket_id: Parent ticket (cascade delete)
        role: user or assistant
        content: Message text
    """

    __tablename__ = "ticket_messages"

    ticket_id: Mapped[UUID] = mapped_column(
        ForeignKey("tickets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[MessageRole] = mapped_column(
        Enum(MessageRole, name="message_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    ticket = relationship("TicketModel", back_populates="messages")
