"""Completion provider adapter."""

from helpdesk.boundary.llm.completion_client import CompletionClient

__all__ = ["CompletionClient"]
