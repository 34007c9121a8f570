"""
Shared pytest fixtures for the hash benchmark service test suite.

The service holds no persistent state, so the fixtures are small: an
application instance, a test client, and handles onto the metrics
registry for assertions on exported values.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Application factory with a dedicated testing configuration
- Building an extra app instance for configuration-specific tests
"""

import os

import pytest

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from config import TestingConfig
from hash_app import create_app
from hash_app.metrics import get_metrics

# Reference digest: 100 chained SHA-256 applications over "benchmark-test-data".
REFERENCE_HASH = "146c502b072c2b827b6768c63339cc17baddecca2a02bfc45e48a86067789911"


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The 'session' scope means the same app instance (and metrics
    registry) is reused for all tests, so metric assertions should
    compare before/after values rather than absolute counts.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def metrics(app):
    """Provide the metrics handle attached to the session app."""
    return get_metrics(app)


@pytest.fixture
def app_factory(monkeypatch):
    """
    Factory fixture for apps built from a patched testing configuration.

    Example:
        def test_something(app_factory):
            app = app_factory(TIMESTAMP_FORMAT="iso8601")
    """

    def _create_app(**overrides):
        for name, value in overrides.items():
            monkeypatch.setattr(TestingConfig, name, value)
        return create_app("testing")

    return _create_app


@pytest.fixture
def reference_hash() -> str:
    """Expected hash shared by every conforming server variant."""
    return REFERENCE_HASH


@pytest.fixture
def source_label(app) -> str:
    """Source label the session app was configured with."""
    return app.config["SOURCE_LABEL"]
