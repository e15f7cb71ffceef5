"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from helpdesk.boundary.db.CRUD import ticket_crud, ticket_message_crud

    ticket = await ticket_crud.get_with_project(db, ticket_id)
"""

from helpdesk.boundary.db.CRUD.base_crud import BaseCRUD
from helpdesk.boundary.db.CRUD.member_crud import MemberCRUD, UserCRUD, member_crud, user_crud
from helpdesk.boundary.db.CRUD.ticket_crud import ProjectCRUD, TicketCRUD, project_crud, ticket_crud
from helpdesk.boundary.db.CRUD.ticket_message_crud import TicketMessageCRUD, ticket_message_crud

__all__ = [
    "BaseCRUD",
    "MemberCRUD",
    "member_crud",
    "ProjectCRUD",
    "project_crud",
    "TicketCRUD",
    "ticket_crud",
    "TicketMessageCRUD",
    "ticket_message_crud",
    "UserCRUD",
    "user_crud",
]
