"""
Ticket assistant prompts.

Chat prompt templates for the agent-facing ticket chat and the
role-aware admin chat.

Dependencies: langchain_core.prompts
System role: Prompt templates for ticket chat
"""

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

TICKET_SYSTEM_PROMPT = """You are a helpful AI assistant analyzing a support ticket with the following details:
Title: {title}
Description: {description}
Priority: {priority}
Status: {status}

Your goal is to help the support agent understand and resolve this ticket effectively.
Provide clear, concise responses and suggest relevant actions when appropriate."""

CLIENT_SYSTEM_PROMPT = """You are a helpful AI support assistant for clients.
You have access to the following ticket context:
Ticket: {ticket_json}

Help the client by:
1. Providing clear explanations
2. Offering troubleshooting guidance
3. Answering questions about their ticket
4. Being empathetic and professional

Keep responses friendly and non-technical unless the client asks for technical details."""

AGENT_SYSTEM_PROMPT = """You are a helpful AI assistant for support ticket agents.
You have access to the following ticket context:
Ticket: {ticket_json}

Help the agent resolve the ticket by:
1. Providing relevant technical information
2. Suggesting troubleshooting steps
3. Offering best practices
4. Helping draft responses to the client

Be concise but thorough in your responses."""


def _chat_prompt(system_prompt: str) -> ChatPromptTemplate:
    return ChatPromptTemplate.from_messages([
        ("system", system_prompt),
        MessagesPlaceholder("history", optional=True),
        ("human", "{message}"),
    ])


TICKET_CHAT_PROMPT = _chat_prompt(TICKET_SYSTEM_PROMPT)
CLIENT_CHAT_PROMPT = _chat_prompt(CLIENT_SYSTEM_PROMPT)
AGENT_CHAT_PROMPT = _chat_prompt(AGENT_SYSTEM_PROMPT)


def get_admin_chat_prompt(user_role: str | None) -> ChatPromptTemplate:
    """Client-facing prompt for the 'client' role, agent prompt otherwise."""
    if user_role == "client":
        return CLIENT_CHAT_PROMPT
    return AGENT_CHAT_PROMPT
