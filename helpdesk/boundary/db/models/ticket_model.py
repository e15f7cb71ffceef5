"""
Ticket ORM model.

Represents a support ticket and its stored assistant conversation.

Dependencies: sqlalchemy, helpdesk.boundary.db.base
System role: Ticket persistence for the assistant chat
"""

from typing import Any
from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class TicketModel(Base, UUIDMixin, TimestampMixin):
    """
    Support ticket ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Short summary line
        description: Full problem description
        priority: low / medium / high / urgent (free text)
        status: Workflow state, "new" on creation
        category: Optional category label
        assigned_to: Optional assignee identifier
        project_id: Optional parent project
        messages: Stored chat exchange (cascade delete)
    """

    __tablename__ = "tickets"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    priority: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="new")
    category: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    assigned_to: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    project_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    project = relationship("ProjectModel", back_populates="tickets")
    messages = relationship(
        "TicketMessageModel",
        back_populates="ticket",
        cascade="all, delete-orphan",
        order_by="TicketMessageModel.created_at",
    )

    def to_prompt_dict(self) -> dict[str, Any]:
        """Ticket fields (and project, when loaded) for prompt embedding."""
        data: dict[str, Any] = {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "priority": self.priority,
            "status": self.status,
            "category": self.category,
            "assigned_to": self.assigned_to,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        project = self.__dict__.get("project")
        if project is not None:
            data["project"] = {"name": project.name, "description": project.description}
        return data
