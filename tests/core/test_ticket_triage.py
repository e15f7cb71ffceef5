"""
Test suite for ticket triage heuristics.

System role: Verification of keyword-based ticket assessment
"""

from types import SimpleNamespace

import pytest

from helpdesk.core.ticket_triage import (
    suggest_category,
    suggest_next_steps,
    suggest_priority,
    wants_assessment,
)


def _ticket(**overrides) -> SimpleNamespace:
    fields = {
        "description": "Printer is offline",
        "priority": "low",
        "category": "hardware",
        "status": "open",
        "assigned_to": "agent-1",
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestWantsAssessment:
    @pytest.mark.parametrize(
        "message, expected",
        [
            ("Please ANALYZE this ticket", True),
            ("Give me an assessment", True),
            ("What should I reply?", False),
        ],
    )
    def test_trigger_words(self, message: str, expected: bool) -> None:
        assert wants_assessment(message) is expected


class TestSuggestions:
    def test_urgent_description_should_raise_priority(self) -> None:
        assert suggest_priority(_ticket(description="URGENT: site down")) == "high"

    def test_priority_should_fall_back_to_ticket_then_medium(self) -> None:
        assert suggest_priority(_ticket()) == "low"
        assert suggest_priority(_ticket(priority=None, description=None)) == "medium"

    def test_category_should_default_to_general(self) -> None:
        assert suggest_category(_ticket()) == "hardware"
        assert suggest_category(_ticket(category=None)) == "general"

    def test_next_steps_for_new_unassigned_ticket(self) -> None:
        steps = suggest_next_steps(_ticket(status="new", assigned_to=None))

        assert steps == [
            "Assign ticket to an agent",
            "Review and categorize ticket",
            "Set initial priority",
        ]

    def test_next_steps_for_assigned_open_ticket(self) -> None:
        assert suggest_next_steps(_ticket()) == []
