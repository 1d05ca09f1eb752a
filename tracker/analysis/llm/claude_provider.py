"""
Anthropic Claude LLM provider, via the official anthropic Python SDK.
"""
from __future__ import annotations

import logging
import time

import anthropic

from tracker.errors import LLMError
from . import register_provider
from .base import BaseLLMProvider, LLMResponse, split_system_message
from .config import get_default_model

logger = logging.getLogger(__name__)

DEFAULT_MODEL = get_default_model("claude")


@register_provider
class ClaudeProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    PROVIDER_NAME = "claude"

    def __init__(self, api_key: str = None, timeout: float = None):
        super().__init__(api_key=api_key, timeout=timeout)
        self._client = None

    def _ensure_client(self):
        """Lazily initialize the client if not yet created."""
        if self._client is None:
            if not self.api_key:
                raise LLMError("ANTHROPIC_API_KEY not set")
            self._client = anthropic.Anthropic(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def chat(
        self,
        messages: list,
        model: str = None,
        max_tokens: int = 4096,
        temperature: float = 0,
    ) -> LLMResponse:
        """Send a chat request to Claude.

        A 'system' role message, if present, is passed as the system
        parameter rather than as part of the conversation.
        """
        client = self._ensure_client()
        model = model or DEFAULT_MODEL
        system_message, chat_messages = split_system_message(messages)

        kwargs = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": chat_messages,
            "temperature": temperature,
        }
        if system_message:
            kwargs["system"] = system_message

        start_time = time.time()
        response = client.messages.create(**kwargs)
        latency_ms = int((time.time() - start_time) * 1000)

        content = "".join(
            block.text for block in response.content if hasattr(block, "text")
        )

        return LLMResponse(
            content=content,
            model=model,
            provider=self.PROVIDER_NAME,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            latency_ms=latency_ms,
            finish_reason=response.stop_reason or "",
        )
