"""
Analysis prompt templates.

Defines the system and user prompts sent for each analyzed chunk.

Dependencies: langchain_core.prompts
System role: Prompt templates for content analysis
"""

import json
from typing import Any

from langchain_core.prompts import PromptTemplate

SYSTEM_PROMPT = PromptTemplate.from_template(
    """You are an AI assistant analyzing content in the context of a support ticket system.
Your goal is to provide insights and suggestions based on the content.
{context_block}"""
)

USER_PROMPT = PromptTemplate.from_template(
    """Please analyze the following content and provide insights:
{content}"""
)


def build_system_prompt(context: dict[str, Any] | None) -> str:
    """Render the system prompt, embedding serialized context when present."""
    context_block = ""
    if context:
        context_block = f"Additional context: {json.dumps(context, default=str)}"
    return SYSTEM_PROMPT.format(context_block=context_block)


def build_user_prompt(content: str) -> str:
    """Render the user prompt around the chunk text."""
    return USER_PROMPT.format(content=content)
