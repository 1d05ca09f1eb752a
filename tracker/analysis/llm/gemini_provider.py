"""
Google Gemini LLM provider.

Uses the google-generativeai SDK. Gemini takes a single prompt plus an
optional system instruction, so chat messages are flattened.
"""
from __future__ import annotations

import logging
import time

import google.generativeai as genai

from tracker.errors import LLMError
from . import register_provider
from .base import BaseLLMProvider, LLMResponse, split_system_message
from .config import get_default_model

logger = logging.getLogger(__name__)

DEFAULT_MODEL = get_default_model("gemini")


@register_provider
class GeminiProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    PROVIDER_NAME = "gemini"

    def _build_model(self, model: str, system_instruction: str | None):
        if not self.api_key:
            raise LLMError("GEMINI_API_KEY not set")
        genai.configure(api_key=self.api_key)
        return genai.GenerativeModel(model, system_instruction=system_instruction)

    def chat(
        self,
        messages: list,
        model: str = None,
        max_tokens: int = 4096,
        temperature: float = 0,
    ) -> LLMResponse:
        """Send the conversation to Gemini as one prompt.

        Raises:
            LLMError: If no API key is configured or Gemini returns no
                candidates.
        """
        model = model or DEFAULT_MODEL
        system_message, chat_messages = split_system_message(messages)
        prompt = "\n\n".join(msg["content"] for msg in chat_messages)
        gm = self._build_model(model, system_message)

        request_options = {"timeout": self.timeout} if self.timeout else None
        start_time = time.time()
        response = gm.generate_content(
            prompt,
            generation_config=genai.types.GenerationConfig(
                temperature=temperature,
                max_output_tokens=max_tokens,
            ),
            request_options=request_options,
        )
        latency_ms = int((time.time() - start_time) * 1000)

        try:
            content = response.text
        except ValueError as e:
            raise LLMError(f"No LLM response candidates: {e}") from e

        usage = getattr(response, "usage_metadata", None)
        input_tokens = getattr(usage, "prompt_token_count", 0) or 0
        output_tokens = getattr(usage, "candidates_token_count", 0) or 0
        logger.info(
            f"Gemini LLM response: model={model}, content_len={len(content)}, "
            f"latency={latency_ms}ms"
        )

        return LLMResponse(
            content=content,
            model=model,
            provider=self.PROVIDER_NAME,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            latency_ms=latency_ms,
        )
