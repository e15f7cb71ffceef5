"""
User ORM models.

Portal accounts and the role-specific profiles attached to them.

Dependencies: sqlalchemy, helpdesk.boundary.db.base
System role: Persistence of admins, clients and employees
"""

import enum
from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserRole(str, enum.Enum):
    """Portal role of a user account."""

    ADMIN = "admin"
    CLIENT = "client"
    EMPLOYEE = "employee"


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    Portal user account.

    Attributes:
        email: Login email (unique)
        name: Display name, may be empty
        role: admin / client / employee
        client_profile: Company details when role is client
        employee_profile: Department details when role is employee
        memberships: Projects the user belongs to
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default=UserRole.CLIENT.value)

    client_profile = relationship("ClientModel", back_populates="user", uselist=False)
    employee_profile = relationship("EmployeeModel", back_populates="user", uselist=False)
    memberships = relationship("ProjectMemberModel", back_populates="user")


class ClientModel(Base, UUIDMixin, TimestampMixin):
    """Client profile: the company a client user belongs to."""

    __tablename__ = "clients"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    company: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    user = relationship("UserModel", back_populates="client_profile")


class EmployeeModel(Base, UUIDMixin, TimestampMixin):
    """Employee profile: the department an employee user works in."""

    __tablename__ = "employees"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    department: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    user = relationship("UserModel", back_populates="employee_profile")
