"""
Ticket triage heuristics.

Keyword rules producing a suggested priority, category and next steps for
a ticket when an agent asks the assistant for an analysis.

Dependencies: None
System role: Ad hoc ticket assessment attached to chat replies
"""

from typing import Protocol

URGENT_KEYWORDS = ("urgent", "emergency", "critical", "asap")
TRIGGER_WORDS = ("analyze", "assessment")

DEFAULT_PRIORITY = "medium"
DEFAULT_CATEGORY = "general"


class TriageTicket(Protocol):
    description: str | None
    priority: str | None
    category: str | None
    status: str | None
    assigned_to: str | None


def wants_assessment(message: str) -> bool:
    """True when the chat message asks for an analysis of the ticket."""
    lowered = message.lower()
    return any(word in lowered for word in TRIGGER_WORDS)


def suggest_priority(ticket: TriageTicket) -> str:
    description = (ticket.description or "").lower()
    if any(keyword in description for keyword in URGENT_KEYWORDS):
        return "high"
    return ticket.priority or DEFAULT_PRIORITY


def suggest_category(ticket: TriageTicket) -> str:
    return ticket.category or DEFAULT_CATEGORY


def suggest_next_steps(ticket: TriageTicket) -> list[str]:
    steps = []
    if not ticket.assigned_to:
        steps.append("Assign ticket to an agent")
    if ticket.status == "new":
        steps.append("Review and categorize ticket")
        steps.append("Set initial priority")
    return steps
