"""
LLM provider registry and factory.

Editorials can be generated by several back-ends (Gemini, OpenAI, Claude,
Zhipu). Each provider module registers itself with ``register_provider``.
"""

import logging

logger = logging.getLogger(__name__)

_providers = {}


def register_provider(cls):
    """Decorator to register an LLM provider class."""
    _providers[cls.PROVIDER_NAME] = cls
    return cls


def get_provider(name: str, api_key: str = None, timeout: float = None):
    """Get an instantiated LLM provider by name.

    Args:
        name: Provider name (e.g. 'gemini', 'openai', 'claude', 'zhipu').
        api_key: API key for the provider.
        timeout: Request timeout in seconds for the model call.

    Returns:
        An instance of the requested provider.

    Raises:
        ValueError: If the provider name is not registered.
    """
    cls = _providers.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown LLM provider: {name}. Available: {list(_providers.keys())}"
        )
    return cls(api_key=api_key, timeout=timeout)


def get_available_providers():
    """Return a dict of all registered provider classes."""
    return dict(_providers)


from . import claude_provider, gemini_provider, openai_provider, zhipu_provider  # noqa: E402,F401
