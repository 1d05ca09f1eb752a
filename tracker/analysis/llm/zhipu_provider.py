"""
Zhipu AI (GLM) LLM provider, via the zhipuai Python SDK.
"""
from __future__ import annotations

import logging
import time

from zhipuai import ZhipuAI

from tracker.errors import LLMError
from . import register_provider
from .base import BaseLLMProvider, LLMResponse
from .config import get_default_model

logger = logging.getLogger(__name__)

DEFAULT_MODEL = get_default_model("zhipu")


@register_provider
class ZhipuProvider(BaseLLMProvider):
    """Zhipu AI (GLM) LLM provider."""

    PROVIDER_NAME = "zhipu"

    def __init__(self, api_key: str = None, timeout: float = None):
        super().__init__(api_key=api_key, timeout=timeout)
        self._client = None

    def _ensure_client(self):
        """Lazily initialize the client if not yet created."""
        if self._client is None:
            if not self.api_key:
                raise LLMError("ZHIPU_API_KEY not set")
            self._client = ZhipuAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def chat(
        self,
        messages: list,
        model: str = None,
        max_tokens: int = 4096,
        temperature: float = 0,
    ) -> LLMResponse:
        """Send a chat request to GLM.

        Zhipu requires temperature > 0, so 0 is remapped to 0.01. Reasoning
        models sometimes leave ``content`` empty and put the answer in
        ``reasoning_content``; that text is used instead.
        """
        client = self._ensure_client()
        model = model or DEFAULT_MODEL
        if temperature <= 0:
            temperature = 0.01

        start_time = time.time()
        response = client.chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        latency_ms = int((time.time() - start_time) * 1000)

        choice = response.choices[0]
        content = choice.message.content or ""
        if not content:
            reasoning = getattr(choice.message, "reasoning_content", None) or ""
            if reasoning:
                logger.info(f"Zhipu: content empty, using reasoning_content ({len(reasoning)} chars)")
                content = reasoning

        if not content or choice.finish_reason != "stop":
            logger.warning(
                f"Zhipu unexpected response: finish_reason={choice.finish_reason}, "
                f"content_len={len(content)}, model={model}"
            )

        return LLMResponse(
            content=content,
            model=model,
            provider=self.PROVIDER_NAME,
            input_tokens=response.usage.prompt_tokens if response.usage else 0,
            output_tokens=response.usage.completion_tokens if response.usage else 0,
            latency_ms=latency_ms,
            finish_reason=choice.finish_reason or "",
        )
