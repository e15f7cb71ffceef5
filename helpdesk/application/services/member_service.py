"""
Project member directory service.

Lists the clients and employees working on an admin's projects.

Dependencies: helpdesk.boundary.db, helpdesk.models.member
System role: Member directory for the admin portal
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.boundary.db.CRUD.member_crud import member_crud
from helpdesk.boundary.db.models.project_member_model import ProjectMemberModel
from helpdesk.boundary.db.models.user_model import UserModel, UserRole
from helpdesk.core.exceptions import InvalidInputError
from helpdesk.models.member import ClientMember, EmployeeMember, MemberProject, MembersResponse

logger = logging.getLogger(__name__)

UNKNOWN_USER = "Unknown User"


def group_members(memberships: Sequence[ProjectMemberModel]) -> MembersResponse:
    """
    Fold membership rows into one entry per user, split by role.

    Users without the profile row matching their role are left out.
    Entry order follows the first membership row of each user.
    """
    users: dict[UUID, UserModel] = {}
    projects: dict[UUID, list[MemberProject]] = {}
    for membership in memberships:
        user = membership.user
        users.setdefault(user.id, user)
        projects.setdefault(user.id, []).append(
            MemberProject(id=str(membership.project.id), name=membership.project.name)
        )

    response = MembersResponse()
    for user_id, user in users.items():
        name = user.name or UNKNOWN_USER
        if user.role == UserRole.CLIENT.value and user.client_profile is not None:
            response.clients.append(ClientMember(
                id=str(user_id),
                name=name,
                email=user.email,
                company=user.client_profile.company,
                projects=projects[user_id],
            ))
        elif user.role == UserRole.EMPLOYEE.value and user.employee_profile is not None:
            response.employees.append(EmployeeMember(
                id=str(user_id),
                name=name,
                email=user.email,
                department=user.employee_profile.department,
                projects=projects[user_id],
            ))
    return response


class MemberService:
    """Member directory queries for a project admin."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_members(self, admin_id: str | None) -> MembersResponse:
        """
        List clients and employees of the projects an admin runs.

        Args:
            admin_id: Admin user UUID string

        Returns:
            MembersResponse: Empty lists when the admin has no projects

        Raises:
            InvalidInputError: Missing or malformed admin ID
        """
        if not admin_id:
            raise InvalidInputError("User ID is required", field="userId")
        try:
            admin_uuid = UUID(admin_id)
        except ValueError:
            raise InvalidInputError("Invalid user ID", field="userId")

        projects = await member_crud.list_admin_projects(self.db, admin_uuid)
        if not projects:
            logger.info(f"{__name__}:list_members - No projects for admin_id={admin_uuid}")
            return MembersResponse()

        memberships = await member_crud.list_for_projects(self.db, [p.id for p in projects])
        response = group_members(memberships)
        logger.info(
            f"{__name__}:list_members - admin_id={admin_uuid}, projects={len(projects)}, "
            f"clients={len(response.clients)}, employees={len(response.employees)}"
        )
        return response
