"""
OpenAI LLM provider, via the official openai Python SDK.
"""
from __future__ import annotations

import logging
import time

import openai

from tracker.errors import LLMError
from . import register_provider
from .base import BaseLLMProvider, LLMResponse
from .config import get_default_model

logger = logging.getLogger(__name__)

DEFAULT_MODEL = get_default_model("openai")


@register_provider
class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    PROVIDER_NAME = "openai"

    def __init__(self, api_key: str = None, timeout: float = None):
        super().__init__(api_key=api_key, timeout=timeout)
        self._client = None

    def _ensure_client(self):
        """Lazily initialize the client if not yet created."""
        if self._client is None:
            if not self.api_key:
                raise LLMError("OPENAI_API_KEY not set")
            self._client = openai.OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def chat(
        self,
        messages: list,
        model: str = None,
        max_tokens: int = 4096,
        temperature: float = 0,
    ) -> LLMResponse:
        client = self._ensure_client()
        model = model or DEFAULT_MODEL

        start_time = time.time()
        response = client.chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        latency_ms = int((time.time() - start_time) * 1000)

        if not response.choices:
            raise LLMError("No LLM response choices")
        choice = response.choices[0]

        return LLMResponse(
            content=choice.message.content or "",
            model=model,
            provider=self.PROVIDER_NAME,
            input_tokens=response.usage.prompt_tokens if response.usage else 0,
            output_tokens=response.usage.completion_tokens if response.usage else 0,
            latency_ms=latency_ms,
            finish_reason=choice.finish_reason or "",
        )
