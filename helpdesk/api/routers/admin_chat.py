"""Admin portal streaming chat endpoint.

Routes:
- POST /admin/ai-chat - Stream the assistant's reply as plain text

Dependencies: helpdesk.application.services.ticket_chat_service
System role: Streaming ticket chat HTTP API
"""

import logging
from collections.abc import AsyncGenerator, AsyncIterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from helpdesk.api.deps import get_ticket_chat_service
from helpdesk.api.routers.router_utils import handle_helpdesk_errors, parse_body
from helpdesk.application.services.ticket_chat_service import TicketChatService
from helpdesk.core.exceptions import InvalidInputError
from helpdesk.models.chat import AdminChatRequest
from helpdesk.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin-chat"])

MISSING_FIELDS = "Missing required fields: ticketId and message are required"


async def _relay(first: str, rest: AsyncIterator[str]) -> AsyncGenerator[str, None]:
    """Yield the already-received first delta, then the remainder."""
    if first:
        yield first
    try:
        async for delta in rest:
            yield delta
    except Exception as e:
        # Headers are already sent; end the stream
        logger.error(f"{__name__}:_relay - Streaming error: {type(e).__name__}: {e}")


@router.post(
    "/ai-chat",
    response_class=StreamingResponse,
    responses={
        200: {"content": {"text/plain": {}}},
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@handle_helpdesk_errors("Failed to get AI response")
async def admin_chat(
    request: Request,
    chat_service: TicketChatService = Depends(get_ticket_chat_service),
) -> StreamingResponse:
    """Stream the assistant's reply for the admin or client portal.

    The first delta is awaited before responding so that provider errors
    (bad key, quota) still produce a JSON error with a proper status.

    Args:
        request: Raw request ({ticketId, message, history[], userRole})
        chat_service: Injected TicketChatService

    Returns:
        StreamingResponse: text/plain stream of the reply
    """
    body = await parse_body(request, AdminChatRequest)
    if not body.ticket_id or not body.message:
        raise InvalidInputError(MISSING_FIELDS)

    stream = await chat_service.stream_admin_chat(
        ticket_id=body.ticket_id,
        message=body.message,
        history=body.history,
        user_role=body.user_role,
    )

    try:
        first = await anext(stream)
    except StopAsyncIteration:
        first = ""

    return StreamingResponse(
        _relay(first, stream),
        media_type="text/plain",
        headers={"Cache-Control": "no-cache"},
    )
