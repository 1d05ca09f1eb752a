import os


def _optional_float(name, default=None):
    value = os.environ.get(name, '')
    return float(value) if value.strip() else default


class BaseConfig:
    """Base configuration shared across all environments."""

    # Flask core
    SECRET_KEY = os.environ.get('SECRET_KEY', 'fallback-secret-key-change-me')

    # Judge site
    INFOARENA_BASE_URL = os.environ.get('INFOARENA_BASE_URL', 'https://www.infoarena.ro')
    MONITOR_PAGE_SIZE = int(os.environ.get('MONITOR_PAGE_SIZE', '250'))
    SCRAPER_USER_AGENT = os.environ.get('SCRAPER_USER_AGENT', '')
    # No timeout on listing/problem/source pages unless set
    REQUEST_TIMEOUT = _optional_float('REQUEST_TIMEOUT')
    REVEAL_TIMEOUT = float(os.environ.get('REVEAL_TIMEOUT', '30'))

    # Storage
    DATA_DIR = os.environ.get('DATA_DIR', 'data')

    # User whose timeline the server exposes
    TRACKER_USERNAME = os.environ.get('TRACKER_USERNAME', '')

    # AI provider settings
    AI_PROVIDER = os.environ.get('AI_PROVIDER', 'gemini')
    AI_MODEL = os.environ.get('AI_MODEL', '')
    AI_TIMEOUT = float(os.environ.get('AI_TIMEOUT', '60'))
    AI_MAX_TOKENS = int(os.environ.get('AI_MAX_TOKENS', '8192'))
    AI_TEMPERATURE = float(os.environ.get('AI_TEMPERATURE', '0'))
    AI_SYSTEM_PROMPT = os.environ.get('AI_SYSTEM_PROMPT', '')
    EDITORIAL_LANGUAGE = os.environ.get('EDITORIAL_LANGUAGE', 'English')
    EDITORIAL_HINT_COUNT = int(os.environ.get('EDITORIAL_HINT_COUNT', '3'))

    # AI API keys
    GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY', '')
    OPENAI_API_KEY = os.environ.get('OPENAI_API_KEY', '')
    ANTHROPIC_API_KEY = os.environ.get('ANTHROPIC_API_KEY', '')
    ZHIPU_API_KEY = os.environ.get('ZHIPU_API_KEY', '')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    LOG_FILE_MAX_BYTES = int(os.environ.get('LOG_FILE_MAX_BYTES', '0'))
    LOG_FILE_BACKUP_COUNT = int(os.environ.get('LOG_FILE_BACKUP_COUNT', '3'))
    # Defaults to <instance>/logs
    LOG_DIR = os.environ.get('LOG_DIR', '')


class DevelopmentConfig(BaseConfig):
    """Development environment configuration."""

    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(BaseConfig):
    """Production environment configuration."""

    DEBUG = False
    LOG_FILE_MAX_BYTES = int(os.environ.get('LOG_FILE_MAX_BYTES', str(5 * 1024 * 1024)))


class TestingConfig(BaseConfig):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True
    SECRET_KEY = 'test-secret-key'
    INFOARENA_BASE_URL = 'https://www.infoarena.ro'
    MONITOR_PAGE_SIZE = 250
    REQUEST_TIMEOUT = None
    TRACKER_USERNAME = 'testuser'
    AI_PROVIDER = 'gemini'
    AI_MODEL = ''
    GEMINI_API_KEY = 'test-key'
    LOG_FILE_MAX_BYTES = 0


config_map = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
}
