import logging

logger = logging.getLogger(__name__)

_registry = {}


def register_scraper(cls):
    """Decorator to register a judge scraper."""
    _registry[cls.PLATFORM_NAME] = cls
    logger.debug(f"Registered scraper: {cls.PLATFORM_NAME} ({cls.PLATFORM_DISPLAY})")
    return cls


def get_scraper_class(platform_name: str):
    return _registry.get(platform_name)


def get_scraper_instance(platform_name: str, **kwargs):
    cls = _registry.get(platform_name)
    if cls is None:
        raise ValueError(f"Unknown platform: {platform_name}")
    return cls(**kwargs)


from . import infoarena  # noqa: E402,F401
