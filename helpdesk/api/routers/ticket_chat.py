"""Ticket assistant chat endpoint.

Routes:
- POST /tickets/ai-chat - Chat with the assistant about a ticket

Dependencies: helpdesk.application.services.ticket_chat_service
System role: Ticket chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request

from helpdesk.api.deps import get_ticket_chat_service
from helpdesk.api.routers.router_utils import handle_helpdesk_errors, parse_body
from helpdesk.application.services.ticket_chat_service import TicketChatService
from helpdesk.core.exceptions import InvalidInputError
from helpdesk.models.chat import TicketChatRequest, TicketChatResponse
from helpdesk.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tickets", tags=["ticket-chat"])

MISSING_FIELDS = "Missing required fields: ticketId and message are required"


@router.post(
    "/ai-chat",
    response_model=TicketChatResponse,
    response_model_by_alias=True,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@handle_helpdesk_errors("Failed to get AI response")
async def ticket_chat(
    request: Request,
    chat_service: TicketChatService = Depends(get_ticket_chat_service),
) -> TicketChatResponse:
    """Send a message to the ticket assistant.

    Flow:
    1. Parse body ({ticketId, message, history[]})
    2. Process chat through TicketChatService
    3. Return {response, analysis}

    Args:
        request: Raw request (body parsed manually for portal-style errors)
        chat_service: Injected TicketChatService

    Returns:
        TicketChatResponse: Assistant reply and optional assessment
    """
    body = await parse_body(request, TicketChatRequest)
    if not body.ticket_id or not body.message:
        raise InvalidInputError(MISSING_FIELDS)

    return await chat_service.process_chat(
        ticket_id=body.ticket_id,
        message=body.message,
        history=body.history,
    )
