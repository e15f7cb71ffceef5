"""
Project ORM model.

Dependencies: sqlalchemy, helpdesk.boundary.db.base
System role: Project persistence for ticket grouping and membership
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ProjectModel(Base, UUIDMixin, TimestampMixin):
    """
    Project that tickets are filed against.

    Attributes:
        name: Display name
        description: Free-text project description
        admin_id: Administering user (SET NULL on user deletion)
        tickets: Tickets filed against this project
        members: Client and employee memberships
    """

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    admin_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
        index=True,
    )

    tickets = relationship("TicketModel", back_populates="project")
    members = relationship(
        "ProjectMemberModel",
        back_populates="project",
        cascade="all, delete-orphan",
    )
