"""
Test suite for POST /api/v1/admin/ai-chat.

Tests cover:
- Plain-text streaming of reply deltas
- JSON errors for failures and stalls before the first delta
- Quiet termination on mid-stream failures

System role: Verification of the streaming chat HTTP API
"""

from collections.abc import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from helpdesk.api.deps import get_ticket_chat_service
from helpdesk.api.main import create_app
from helpdesk.application.services.ticket_chat_service import TicketChatService
from helpdesk.core.exceptions import CompletionTimeoutError, ProviderError, TicketNotFoundError

URL = "/api/v1/admin/ai-chat"
TICKET_ID = "0b8a4e55-7f5e-4a3c-8d0e-5d1c9e2f3a41"
BODY = {"ticketId": TICKET_ID, "message": "How do I fix this?", "userRole": "client"}


async def _deltas(*pieces: str, error: Exception | None = None) -> AsyncIterator[str]:
    for piece in pieces:
        yield piece
    if error is not None:
        raise error


@pytest.fixture
def chat_service() -> MagicMock:
    service = MagicMock(spec=TicketChatService)
    service.stream_admin_chat = AsyncMock(side_effect=lambda **kwargs: _deltas("Hello", ", ", "world"))
    return service


@pytest.fixture
def client(chat_service: MagicMock) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_ticket_chat_service] = lambda: chat_service
    return TestClient(app)


class TestAdminChatEndpoint:
    """Test suite for the streaming admin chat endpoint."""

    def test_should_stream_plain_text(self, client: TestClient, chat_service: MagicMock) -> None:
        # Act
        response = client.post(URL, json=BODY)

        # Assert
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.headers["cache-control"] == "no-cache"
        assert response.text == "Hello, world"
        assert chat_service.stream_admin_chat.call_args.kwargs["user_role"] == "client"

    def test_empty_reply_should_stream_nothing(
        self,
        client: TestClient,
        chat_service: MagicMock,
    ) -> None:
        chat_service.stream_admin_chat.side_effect = lambda **kwargs: _deltas()

        response = client.post(URL, json=BODY)

        assert response.status_code == 200
        assert response.text == ""

    def test_provider_error_before_first_delta_should_return_json(
        self,
        client: TestClient,
        chat_service: MagicMock,
    ) -> None:
        # Arrange
        quota = ProviderError("quota", code=ProviderError.QUOTA_EXCEEDED)
        chat_service.stream_admin_chat.side_effect = lambda **kwargs: _deltas(error=quota)

        # Act
        response = client.post(URL, json=BODY)

        # Assert
        assert response.status_code == 429
        assert response.json()["error"] == "OpenAI API quota exceeded"

    def test_stalled_stream_should_return_500(
        self,
        client: TestClient,
        chat_service: MagicMock,
    ) -> None:
        stalled = CompletionTimeoutError("Completion stream did not start within 30.0s", timeout=30.0)
        chat_service.stream_admin_chat.side_effect = lambda **kwargs: _deltas(error=stalled)

        response = client.post(URL, json=BODY)

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to get AI response"

    def test_mid_stream_error_should_end_stream(
        self,
        client: TestClient,
        chat_service: MagicMock,
    ) -> None:
        chat_service.stream_admin_chat.side_effect = lambda **kwargs: _deltas(
            "partial", error=ProviderError("connection reset")
        )

        response = client.post(URL, json=BODY)

        assert response.status_code == 200
        assert response.text == "partial"

    def test_unknown_ticket_should_return_404(
        self,
        client: TestClient,
        chat_service: MagicMock,
    ) -> None:
        chat_service.stream_admin_chat.side_effect = TicketNotFoundError(TICKET_ID)

        response = client.post(URL, json=BODY)

        assert response.status_code == 404

    def test_missing_message_should_return_400(self, client: TestClient) -> None:
        response = client.post(URL, json={"ticketId": TICKET_ID})

        assert response.status_code == 400
