"""
Database models package.

Exports:
  - ProjectModel, ProjectMemberModel: Projects and their members
  - UserModel, UserRole, ClientModel, EmployeeModel: Portal users and profiles
  - TicketModel: Support ticket
  - TicketMessageModel, MessageRole: Chat exchange stored on a ticket

Dependencies: sqlalchemy, helpdesk.boundary.db.base
System role: Database model definitions for helpdesk entities
"""

from helpdesk.boundary.db.models.project_member_model import ProjectMemberModel
from helpdesk.boundary.db.models.project_model import ProjectModel
from helpdesk.boundary.db.models.ticket_message_model import MessageRole, TicketMessageModel
from helpdesk.boundary.db.models.ticket_model import TicketModel
from helpdesk.boundary.db.models.user_model import (
    ClientModel,
    EmployeeModel,
    UserModel,
    UserRole,
)

__all__ = [
    "ProjectModel",
    "ProjectMemberModel",
    "UserModel",
    "UserRole",
    "ClientModel",
    "EmployeeModel",
    "TicketModel",
    "TicketMessageModel",
    "MessageRole",
]
