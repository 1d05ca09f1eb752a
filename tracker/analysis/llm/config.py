"""
Per-provider settings: which config key holds the API key and which model
is used when AI_MODEL is empty.
"""
from __future__ import annotations

PROVIDER_CONFIG = {
    "gemini": {
        "api_key_setting": "GEMINI_API_KEY",
        "default_model": "gemini-2.5-flash",
    },
    "openai": {
        "api_key_setting": "OPENAI_API_KEY",
        "default_model": "gpt-4.1-mini",
    },
    "claude": {
        "api_key_setting": "ANTHROPIC_API_KEY",
        "default_model": "claude-haiku-4-5",
    },
    "zhipu": {
        "api_key_setting": "ZHIPU_API_KEY",
        "default_model": "glm-5",
    },
}


def get_api_key_setting(provider: str) -> str | None:
    """Return the config key that stores the API key for *provider*."""
    return PROVIDER_CONFIG.get(provider, {}).get("api_key_setting")


def get_default_model(provider: str) -> str | None:
    return PROVIDER_CONFIG.get(provider, {}).get("default_model")
