"""
Base classes for LLM providers.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class LLMResponse:
    """Standardized response from any LLM provider."""

    content: str
    model: str
    provider: str
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0
    finish_reason: str = ""


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    Args:
        api_key: Provider API key. Missing keys fail on the first call.
        timeout: Seconds to wait for the model before giving up.
    """

    PROVIDER_NAME: str = ""

    def __init__(self, api_key: str = None, timeout: float = None):
        self.api_key = api_key
        self.timeout = timeout

    @abstractmethod
    def chat(
        self,
        messages: list,
        model: str = None,
        max_tokens: int = 4096,
        temperature: float = 0,
    ) -> LLMResponse:
        """Send a chat completion request.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
            model: Model identifier. If None, uses provider default.
            max_tokens: Maximum tokens in the response.
            temperature: Sampling temperature (0 = deterministic).

        Returns:
            LLMResponse with the completion result and metadata.
        """
        ...


def split_system_message(messages: list) -> tuple[str | None, list]:
    """Separate a 'system' message from the conversation messages."""
    system_message = None
    chat_messages = []
    for msg in messages:
        if msg.get("role") == "system":
            system_message = msg["content"]
        else:
            chat_messages.append(msg)
    return system_message, chat_messages
