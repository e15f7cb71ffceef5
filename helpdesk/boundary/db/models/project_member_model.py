"""
Project membership ORM model.

Dependencies: sqlalchemy, helpdesk.boundary.db.base
System role: Links users to the projects they work on
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ProjectMemberModel(Base, UUIDMixin, TimestampMixin):
    """
    Membership of a user in a project.

    Attributes:
        project_id: Project (cascade delete)
        user_id: Member user (cascade delete)
        role: Role within the project, free text
    """

    __tablename__ = "project_members"
    __table_args__ = (UniqueConstraint("project_id", "user_id", name="uq_project_member"),)

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)

    project = relationship("ProjectModel", back_populates="members")
    user = relationship("UserModel", back_populates="memberships")
