import logging
import os

from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv
from flask import Flask

__version__ = '0.3.0'

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_app(config_name=None):
    """Application factory for the tracker API.

    Args:
        config_name: Configuration name ('development', 'production' or
                     'testing'). Defaults to FLASK_ENV or 'development'.

    Returns:
        Configured Flask application instance.
    """
    _load_env(config_name)

    # Determine final config name after env files are loaded
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Imported late so class attributes see the variables from the .env files
    from tracker.config import config_map

    app = Flask(__name__)
    config_class = config_map.get(config_name, config_map['development'])
    app.config.from_object(config_class)
    app.json.sort_keys = False

    _configure_logging(app)
    _register_blueprints(app)

    app.logger.debug(f'Tracker {__version__} created with {config_name} config')
    return app


def _load_env(config_name):
    """Load .env.{env} and then .env (the latter wins) from the project root."""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    env_file = os.path.join(_PROJECT_ROOT, f'.env.{env}')
    if os.path.exists(env_file):
        load_dotenv(env_file)

    dotenv_path = os.path.join(_PROJECT_ROOT, '.env')
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path, override=True)


def _configure_logging(app):
    """Console logging at LOG_LEVEL, plus a RotatingFileHandler when enabled."""
    root = logging.getLogger()
    fmt = logging.Formatter(app.config.get('LOG_FORMAT'))
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if isinstance(level, int):
        root.setLevel(level)

    if not root.handlers:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        root.addHandler(console)

    max_bytes = app.config.get('LOG_FILE_MAX_BYTES', 0)
    if not max_bytes:
        return

    log_dir = app.config.get('LOG_DIR') or os.path.join(app.instance_path, 'logs')
    os.makedirs(log_dir, exist_ok=True)

    handler = RotatingFileHandler(
        os.path.join(log_dir, 'tracker.log'),
        maxBytes=max_bytes,
        backupCount=app.config.get('LOG_FILE_BACKUP_COUNT', 3),
    )
    handler.setFormatter(fmt)
    handler.setLevel(logging.DEBUG)
    root.addHandler(handler)


def _register_blueprints(app):
    """Register all application blueprints."""
    from tracker.views.problems import problems_bp

    app.register_blueprint(problems_bp)
