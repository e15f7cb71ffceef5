"""
Ticket CRUD operations.

Dependencies: sqlalchemy, helpdesk.boundary.db
System role: Ticket lookups for the assistant chat
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from helpdesk.boundary.db.CRUD.base_crud import BaseCRUD
from helpdesk.boundary.db.models.project_model import ProjectModel
from helpdesk.boundary.db.models.ticket_model import TicketModel


class TicketCRUD(BaseCRUD[TicketModel]):
    """CRUD operations for tickets."""

    def __init__(self) -> None:
        super().__init__(TicketModel)

    async def get_with_project(self, session: AsyncSession, id: UUID) -> TicketModel | None:
        """
        Retrieve a ticket with its project eagerly loaded.

        Args:
            session: Async database session
            id: Ticket UUID

        Returns:
            TicketModel with project populated (None if not found)
        """
        stmt = (
            select(TicketModel)
            .options(selectinload(TicketModel.project))
            .where(TicketModel.id == id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


class ProjectCRUD(BaseCRUD[ProjectModel]):
    """CRUD operations for projects."""

    def __init__(self) -> None:
        super().__init__(ProjectModel)


ticket_crud = TicketCRUD()
project_crud = ProjectCRUD()
