"""
Integration tests for the member directory against an in-memory SQLite database.

Tests cover:
- Input validation of the admin ID
- Admins without projects
- Client and employee split with company, department and projects
- Users missing their role profile, unnamed users, foreign projects

System role: Verification of membership storage and the member service
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.application.services.member_service import UNKNOWN_USER, MemberService
from helpdesk.boundary.db.CRUD import member_crud, project_crud, user_crud
from helpdesk.boundary.db.models import ClientModel, EmployeeModel, UserModel
from helpdesk.core.exceptions import InvalidInputError


async def _user(session: AsyncSession, email: str, role: str, name: str | None = None) -> UserModel:
    return await user_crud.create(session, email=email, name=name, role=role)


async def _client(session: AsyncSession, email: str, name: str, company: str | None) -> UserModel:
    user = await _user(session, email, "client", name)
    session.add(ClientModel(user_id=user.id, company=company))
    await session.flush()
    return user


async def _employee(session: AsyncSession, email: str, name: str, department: str | None) -> UserModel:
    user = await _user(session, email, "employee", name)
    session.add(EmployeeModel(user_id=user.id, department=department))
    await session.flush()
    return user


async def _join(session: AsyncSession, project, *users: UserModel) -> None:
    for user in users:
        await member_crud.create(session, project_id=project.id, user_id=user.id)


async def _settle(session: AsyncSession) -> None:
    await session.commit()
    session.expunge_all()


class TestMemberServiceValidation:
    """Test suite for admin ID validation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("admin_id", [None, ""])
    async def test_missing_id_should_be_rejected(
        self,
        test_async_db: AsyncSession,
        admin_id: str | None,
    ) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            await MemberService(test_async_db).list_members(admin_id)

        assert exc_info.value.message == "User ID is required"

    @pytest.mark.asyncio
    async def test_malformed_id_should_be_rejected(self, test_async_db: AsyncSession) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            await MemberService(test_async_db).list_members("not-a-uuid")

        assert exc_info.value.message == "Invalid user ID"


class TestMemberDirectory:
    """Test suite for listing members of an admin's projects."""

    @pytest.mark.asyncio
    async def test_admin_without_projects_should_get_empty_lists(
        self,
        test_async_db: AsyncSession,
    ) -> None:
        # Arrange
        admin = await _user(test_async_db, "admin@example.com", "admin", "Ada")
        other_admin = await _user(test_async_db, "boss@example.com", "admin", "Bo")
        project = await project_crud.create(test_async_db, name="Elsewhere", admin_id=other_admin.id)
        client = await _client(test_async_db, "c@example.com", "Cara", "Acme")
        await _join(test_async_db, project, client)
        await _settle(test_async_db)

        # Act
        response = await MemberService(test_async_db).list_members(str(admin.id))

        # Assert
        assert response.model_dump() == {"clients": [], "employees": []}

    @pytest.mark.asyncio
    async def test_members_should_split_into_clients_and_employees(
        self,
        test_async_db: AsyncSession,
    ) -> None:
        # Arrange
        admin = await _user(test_async_db, "admin@example.com", "admin", "Ada")
        network = await project_crud.create(test_async_db, name="Network", admin_id=admin.id)
        billing = await project_crud.create(test_async_db, name="Billing", admin_id=admin.id)
        cara = await _client(test_async_db, "cara@example.com", "Cara", "Acme")
        eli = await _employee(test_async_db, "eli@example.com", "Eli", "Support")
        await _join(test_async_db, network, cara, eli)
        await _join(test_async_db, billing, cara)
        await _settle(test_async_db)

        # Act
        response = await MemberService(test_async_db).list_members(str(admin.id))

        # Assert
        assert [c.model_dump() for c in response.clients] == [
            {
                "id": str(cara.id),
                "name": "Cara",
                "email": "cara@example.com",
                "company": "Acme",
                "projects": [
                    {"id": str(billing.id), "name": "Billing"},
                    {"id": str(network.id), "name": "Network"},
                ],
            }
        ]
        assert [e.model_dump() for e in response.employees] == [
            {
                "id": str(eli.id),
                "name": "Eli",
                "email": "eli@example.com",
                "department": "Support",
                "projects": [{"id": str(network.id), "name": "Network"}],
            }
        ]

    @pytest.mark.asyncio
    async def test_member_projects_should_be_limited_to_the_admins(
        self,
        test_async_db: AsyncSession,
    ) -> None:
        # Arrange
        admin = await _user(test_async_db, "admin@example.com", "admin", "Ada")
        other_admin = await _user(test_async_db, "boss@example.com", "admin", "Bo")
        mine = await project_crud.create(test_async_db, name="Mine", admin_id=admin.id)
        theirs = await project_crud.create(test_async_db, name="Theirs", admin_id=other_admin.id)
        eli = await _employee(test_async_db, "eli@example.com", "Eli", None)
        await _join(test_async_db, mine, eli)
        await _join(test_async_db, theirs, eli)
        await _settle(test_async_db)

        # Act
        response = await MemberService(test_async_db).list_members(str(admin.id))

        # Assert
        assert [p.name for p in response.employees[0].projects] == ["Mine"]
        assert response.employees[0].department is None

    @pytest.mark.asyncio
    async def test_users_without_role_profile_or_name_should_be_handled(
        self,
        test_async_db: AsyncSession,
    ) -> None:
        # Arrange
        admin = await _user(test_async_db, "admin@example.com", "admin", "Ada")
        project = await project_crud.create(test_async_db, name="Network", admin_id=admin.id)
        no_profile = await _user(test_async_db, "ghost@example.com", "client", "Ghost")
        unnamed = await _client(test_async_db, "anon@example.com", "", None)
        co_admin = await _user(test_async_db, "co@example.com", "admin", "Cy")
        await _join(test_async_db, project, no_profile, unnamed, co_admin)
        await _settle(test_async_db)

        # Act
        response = await MemberService(test_async_db).list_members(str(admin.id))

        # Assert
        assert [c.email for c in response.clients] == ["anon@example.com"]
        assert response.clients[0].name == UNKNOWN_USER
        assert response.employees == []


class TestMemberCRUD:
    """Test suite for membership queries."""

    @pytest.mark.asyncio
    async def test_list_for_projects_should_return_nothing_without_ids(
        self,
        test_async_db: AsyncSession,
    ) -> None:
        assert await member_crud.list_for_projects(test_async_db, []) == []

    @pytest.mark.asyncio
    async def test_admin_projects_should_be_sorted_by_name(self, test_async_db: AsyncSession) -> None:
        # Arrange
        admin = await _user(test_async_db, "admin@example.com", "admin", "Ada")
        await project_crud.create(test_async_db, name="Zeta", admin_id=admin.id)
        await project_crud.create(test_async_db, name="Alpha", admin_id=admin.id)
        await project_crud.create(test_async_db, name="Orphan")
        await _settle(test_async_db)

        # Act
        projects = await member_crud.list_admin_projects(test_async_db, admin.id)

        # Assert
        assert [p.name for p in projects] == ["Alpha", "Zeta"]

    @pytest.mark.asyncio
    async def test_user_should_be_found_by_id(self, test_async_db: AsyncSession) -> None:
        user = await _user(test_async_db, "eli@example.com", "employee", "Eli")
        await _settle(test_async_db)

        assert (await user_crud.get_by_id(test_async_db, user.id)).email == "eli@example.com"
        assert await user_crud.get_by_id(test_async_db, uuid.uuid4()) is None
