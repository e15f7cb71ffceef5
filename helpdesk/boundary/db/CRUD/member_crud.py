"""
Project member CRUD operations.

Dependencies: sqlalchemy, helpdesk.boundary.db
System role: Member lookups for the admin portal
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from helpdesk.boundary.db.CRUD.base_crud import BaseCRUD
from helpdesk.boundary.db.models.project_member_model import ProjectMemberModel
from helpdesk.boundary.db.models.project_model import ProjectModel
from helpdesk.boundary.db.models.user_model import UserModel, UserRole

MEMBER_ROLES = (UserRole.CLIENT.value, UserRole.EMPLOYEE.value)


class MemberCRUD(BaseCRUD[ProjectMemberModel]):
    """CRUD operations for project memberships."""

    def __init__(self) -> None:
        super().__init__(ProjectMemberModel)

    async def list_admin_projects(
        self,
        session: AsyncSession,
        admin_id: UUID,
    ) -> Sequence[ProjectModel]:
        """Projects administered by a user, by name."""
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.admin_id == admin_id)
            .order_by(ProjectModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_for_projects(
        self,
        session: AsyncSession,
        project_ids: Sequence[UUID],
    ) -> Sequence[ProjectMemberModel]:
        """
        Client and employee memberships of the given projects.

        Users, their role profiles and the projects are eagerly loaded.
        Rows are grouped per user (ordered by name) and by project name
        within a user.

        Args:
            session: Async database session
            project_ids: Projects to list members of

        Returns:
            Sequence of memberships (empty when project_ids is empty)
        """
        if not project_ids:
            return []

        stmt = (
            select(ProjectMemberModel)
            .join(ProjectMemberModel.user)
            .join(ProjectMemberModel.project)
            .where(
                ProjectMemberModel.project_id.in_(project_ids),
                UserModel.role.in_(MEMBER_ROLES),
            )
            .options(
                selectinload(ProjectMemberModel.project),
                selectinload(ProjectMemberModel.user).selectinload(UserModel.client_profile),
                selectinload(ProjectMemberModel.user).selectinload(UserModel.employee_profile),
            )
            .order_by(UserModel.name, UserModel.id, ProjectModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for portal users."""

    def __init__(self) -> None:
        super().__init__(UserModel)


member_crud = MemberCRUD()
user_crud = UserCRUD()
