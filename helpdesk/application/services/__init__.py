"""
Application services.

Exports:
  - TicketChatService: Ticket assistant chat orchestration
  - MemberService: Project member directory
"""

from helpdesk.application.services.member_service import MemberService
from helpdesk.application.services.ticket_chat_service import TicketChatService

__all__ = ["MemberService", "TicketChatService"]
