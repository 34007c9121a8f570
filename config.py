"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults, so the same image
can be deployed as any benchmark variant by changing its environment.
"""

from __future__ import annotations

import os


class Config:
    """Base configuration with default settings."""

    # Constant ``source`` field of every hash response.  The load generator
    # asserts on it, so it must stay fixed for the lifetime of a deployment.
    SOURCE_LABEL: str = os.environ.get("SOURCE_LABEL", "python-flask")

    # "epoch_ms" (integer milliseconds) or "iso8601" (UTC string).
    TIMESTAMP_FORMAT: str = os.environ.get("TIMESTAMP_FORMAT", "epoch_ms")

    # Side port for the Prometheus exposition; 0 disables it.  /metrics is
    # always served on the main application port as well.
    METRICS_PORT: int = int(os.environ.get("METRICS_PORT", "0"))

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "8080"))


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    SOURCE_LABEL: str = os.environ.get("TEST_SOURCE_LABEL", "python-flask-test")
    TIMESTAMP_FORMAT: str = os.environ.get("TEST_TIMESTAMP_FORMAT", "epoch_ms")

    # Never bind extra sockets from the test suite.
    METRICS_PORT: int = 0


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
