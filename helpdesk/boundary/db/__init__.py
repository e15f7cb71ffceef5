"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - ProjectModel, TicketModel, TicketMessageModel, MessageRole: Helpdesk entities
  - UserModel, ClientModel, EmployeeModel, ProjectMemberModel: Portal members
  - ticket_crud, project_crud, ticket_message_crud, member_crud, user_crud: CRUD singletons

Dependencies: sqlalchemy, helpdesk.configs
System role: Database adapter for tickets and their assistant conversations
"""

from helpdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin
from helpdesk.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from helpdesk.boundary.db.models import (
    ClientModel,
    EmployeeModel,
    MessageRole,
    ProjectMemberModel,
    ProjectModel,
    TicketMessageModel,
    TicketModel,
    UserModel,
    UserRole,
)
from helpdesk.boundary.db.CRUD import (
    BaseCRUD,
    MemberCRUD,
    ProjectCRUD,
    TicketCRUD,
    TicketMessageCRUD,
    UserCRUD,
    member_crud,
    project_crud,
    ticket_crud,
    ticket_message_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ProjectModel",
    "TicketModel",
    "TicketMessageModel",
    "MessageRole",
    "ProjectMemberModel",
    "UserModel",
    "UserRole",
    "ClientModel",
    "EmployeeModel",
    # CRUD classes
    "BaseCRUD",
    "MemberCRUD",
    "ProjectCRUD",
    "TicketCRUD",
    "TicketMessageCRUD",
    "UserCRUD",
    # CRUD singletons
    "project_crud",
    "ticket_crud",
    "ticket_message_crud",
    "member_crud",
    "user_crud",
]
