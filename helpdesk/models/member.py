"""
Project member schemas.

Response shapes for the admin portal's member directory.

Dependencies: pydantic
System role: Member listing data contracts
"""

from pydantic import BaseModel, Field


class MemberProject(BaseModel):
    """Project a member belongs to."""

    id: str
    name: str


class ClientMember(BaseModel):
    """Client user with company and projects."""

    id: str
    name: str
    email: str
    company: str | None = None
    projects: list[MemberProject] = Field(default_factory=list)


class EmployeeMember(BaseModel):
    """Employee user with department and projects."""

    id: str
    name: str
    email: str
    department: str | None = None
    projects: list[MemberProject] = Field(default_factory=list)


class MembersResponse(BaseModel):
    """Response schema for GET /members."""

    clients: list[ClientMember] = Field(default_factory=list)
    employees: list[EmployeeMember] = Field(default_factory=list)
