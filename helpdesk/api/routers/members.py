"""Project member directory endpoint.

Routes:
- GET /members?userId=<admin id> - Clients and employees of an admin's projects

Dependencies: helpdesk.application.services.member_service
System role: Member directory HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from helpdesk.api.deps import get_member_service
from helpdesk.api.routers.router_utils import handle_helpdesk_errors
from helpdesk.application.services.member_service import MemberService
from helpdesk.models.common import ErrorResponse
from helpdesk.models.member import MembersResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/members", tags=["members"])


@router.get(
    "",
    response_model=MembersResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@handle_helpdesk_errors("Failed to fetch members")
async def list_members(
    user_id: str | None = Query(default=None, alias="userId"),
    member_service: MemberService = Depends(get_member_service),
) -> MembersResponse:
    """List the members of the requesting admin's projects.

    Error responses:
        400: userId missing or not a UUID
        500: Database failure
    """
    return await member_service.list_members(user_id)
