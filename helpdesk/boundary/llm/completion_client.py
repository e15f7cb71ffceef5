"""
Completion provider client.

Wraps a LangChain chat model behind a deadline-bounded completion call and
translates provider SDK errors into the application's exception hierarchy.
Performs no retries; retry policy belongs to the caller.

Dependencies: langchain_core, langchain_openai, openai, helpdesk.configs
System role: Single outbound call to the external text-completion provider
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from typing import Any

import openai
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from helpdesk.configs.llm import LLMSettings
from helpdesk.core.exceptions import (
    CompletionTimeoutError,
    EmptyCompletionError,
    ProviderError,
)

logger = logging.getLogger(__name__)


def _message_text(content: Any) -> str:
    """Flatten string or content-block message payloads into plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


def to_provider_error(exc: openai.OpenAIError) -> ProviderError | CompletionTimeoutError:
    """
    Translate an OpenAI SDK exception.

    The provider's error code (e.g. insufficient_quota, invalid_api_key) is
    carried through unchanged.
    """
    if isinstance(exc, openai.APITimeoutError):
        return CompletionTimeoutError("Completion request timed out")

    code = getattr(exc, "code", None)
    status_code = getattr(exc, "status_code", None)
    if code is None and isinstance(exc, openai.AuthenticationError):
        code = ProviderError.INVALID_API_KEY
    message = getattr(exc, "message", None) or str(exc)
    return ProviderError(message, code=code, status_code=status_code)


class CompletionClient:
    """
    Deadline-bounded chat completion adapter.

    The underlying chat model is created lazily from LLMSettings so that a
    missing API key surfaces as a ProviderError on first use rather than
    at startup. Tests and alternative providers inject any BaseChatModel.
    """

    def __init__(
        self,
        settings: LLMSettings | None = None,
        model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize completion client.

        Args:
            settings: Provider credentials and generation defaults
            model: Optional pre-built chat model (skips ChatOpenAI construction)
        """
        self._settings = settings or LLMSettings()
        self._model = model

    @property
    def settings(self) -> LLMSettings:
        return self._settings

    def _get_model(self) -> BaseChatModel:
        if self._model is None:
            if not self._settings.api_key:
                raise ProviderError(
                    "OpenAI API key is not configured",
                    code=ProviderError.MISSING_API_KEY,
                )
            from langchain_openai import ChatOpenAI

            self._model = ChatOpenAI(
                model=self._settings.model,
                api_key=self._settings.api_key,
                temperature=self._settings.temperature,
                max_tokens=self._settings.max_tokens,
                timeout=self._settings.request_timeout,
                max_retries=0,
            )
            logger.info(f"{__name__}:_get_model - Initialized ChatOpenAI model={self._settings.model}")
        return self._model

    def _bind(self, max_tokens: int | None, temperature: float | None):
        return self._get_model().bind(
            max_tokens=max_tokens if max_tokens is not None else self._settings.max_tokens,
            temperature=temperature if temperature is not None else self._settings.temperature,
        )

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ) -> str:
        """
        Run one system + user completion.

        Args:
            system_prompt: System instructions
            user_prompt: User message
            max_tokens: Completion token budget (settings default if None)
            temperature: Sampling temperature (settings default if None)
            timeout: Deadline in seconds (settings request_timeout if None)

        Returns:
            str: Model reply text

        Raises:
            ProviderError: Provider rejected or failed the request
            EmptyCompletionError: Provider returned no text
            CompletionTimeoutError: No reply before the deadline
        """
        messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]
        return await self.complete_messages(
            messages,
            max_tokens=max_tokens,
            temperature=temperature,
            timeout=timeout,
        )

    async def complete_messages(
        self,
        messages: Sequence[BaseMessage],
        max_tokens: int | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ) -> str:
        """
        Run one completion over a full message list.

        Same contract as complete(). On deadline expiry the in-flight call
        is abandoned; the provider has no server-side cancellation.
        """
        deadline = timeout if timeout is not None else self._settings.request_timeout
        runnable = self._bind(max_tokens, temperature)

        try:
            response = await asyncio.wait_for(runnable.ainvoke(list(messages)), timeout=deadline)
        except asyncio.TimeoutError:
            logger.warning(f"{__name__}:complete_messages - Deadline of {deadline}s exceeded")
            raise CompletionTimeoutError(
                f"Completion did not finish within {deadline}s",
                timeout=deadline,
            )
        except openai.OpenAIError as e:
            logger.warning(f"{__name__}:complete_messages - Provider error: {type(e).__name__}: {e}")
            raise to_provider_error(e) from e

        text = _message_text(response.content)
        if not text.strip():
            raise EmptyCompletionError()
        return text

    async def stream_messages(
        self,
        messages: Sequence[BaseMessage],
        max_tokens: int | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ) -> AsyncIterator[str]:
        """
        Stream completion text deltas as they arrive.

        The provider must start answering within the deadline; once the
        first chunk arrived, the SDK's own request timeout applies. Empty
        deltas are skipped.

        Args:
            messages: Full prompt message list
            max_tokens: Completion token budget (settings default if None)
            temperature: Sampling temperature (settings default if None)
            timeout: Deadline for the first chunk (settings request_timeout if None)

        Yields:
            str: Next piece of the reply

        Raises:
            ProviderError: Provider rejected or failed the request
            CompletionTimeoutError: No first chunk before the deadline
        """
        deadline = timeout if timeout is not None else self._settings.request_timeout
        runnable = self._bind(max_tokens, temperature)
        chunks = aiter(runnable.astream(list(messages)))

        try:
            chunk = await asyncio.wait_for(anext(chunks, None), timeout=deadline)
        except asyncio.TimeoutError:
            logger.warning(f"{__name__}:stream_messages - No first chunk within {deadline}s")
            raise CompletionTimeoutError(
                f"Completion stream did not start within {deadline}s",
                timeout=deadline,
            )
        except openai.OpenAIError as e:
            logger.warning(f"{__name__}:stream_messages - Provider error: {type(e).__name__}: {e}")
            raise to_provider_error(e) from e

        try:
            while chunk is not None:
                text = _message_text(chunk.content)
                if text:
                    yield text
                chunk = await anext(chunks, None)
        except openai.OpenAIError as e:
            logger.warning(f"{__name__}:stream_messages - Provider error: {type(e).__name__}: {e}")
            raise to_provider_error(e) from e
