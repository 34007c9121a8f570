"""
Flask application factory module.

This module creates and configures the hash benchmark service using
the factory pattern, allowing for different configurations
(development, testing, production).
"""

import logging

from flask import Flask

from config import get_config
from hash_app.metrics import init_metrics
from hash_app.models import TimestampFormat

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _validate_config(app: Flask) -> None:
    """
    Normalise settings that would otherwise fail at request time.

    Raises:
        ValueError: If the timestamp format or source label is invalid.
    """
    raw_format = app.config["TIMESTAMP_FORMAT"]
    try:
        app.config["TIMESTAMP_FORMAT"] = TimestampFormat(raw_format)
    except ValueError:
        valid_formats = [f.value for f in TimestampFormat]
        raise ValueError(
            f"Invalid TIMESTAMP_FORMAT {raw_format!r}. Must be one of: {valid_formats}"
        ) from None

    if not app.config["SOURCE_LABEL"].strip():
        raise ValueError("SOURCE_LABEL must not be empty")


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    _validate_config(app)

    logging.getLogger().setLevel(app.config["LOG_LEVEL"].upper())
    logger.info(
        "Creating app with config: %s (source=%s, timestamp=%s)",
        config_class.__name__,
        app.config["SOURCE_LABEL"],
        app.config["TIMESTAMP_FORMAT"].value,
    )

    init_metrics(app)

    # Register blueprints
    from hash_app.routes.api import api_bp
    from hash_app.routes.metrics import metrics_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(metrics_bp)

    return app
