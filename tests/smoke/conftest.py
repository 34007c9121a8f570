"""
Smoke-test fixtures for the hash benchmark service.

Provides ``smoke_base_url``: when ``TEST_BASE_URL`` is set the suite runs
against that deployment (for example a port-forwarded cluster service);
otherwise a threaded werkzeug server is started in a background thread
on a free local port and shut down at the end of the session.
"""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Generator

import pytest
import requests
from werkzeug.serving import make_server

from hash_app import create_app


def wait_for_healthy(url: str, timeout: int = 30, interval: float = 0.2) -> None:
    """Poll the health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            response = requests.get(f"{url}/health", timeout=2)
            if response.status_code == 200:
                return
        except requests.RequestException:
            pass
        time.sleep(interval)
    raise RuntimeError(f"Service at {url} not healthy after {timeout}s")


@pytest.fixture(scope="session")
def smoke_base_url() -> Generator[str, None, None]:
    """Yield the base URL of a healthy service instance."""
    provided_base_url = os.getenv("TEST_BASE_URL")
    if provided_base_url:
        wait_for_healthy(provided_base_url)
        yield provided_base_url.rstrip("/")
        return

    application = create_app("testing")
    server = make_server("127.0.0.1", 0, application, threaded=True)
    server_thread = threading.Thread(target=server.serve_forever, daemon=True)
    server_thread.start()

    base_url = f"http://127.0.0.1:{server.server_port}"
    try:
        wait_for_healthy(base_url)
        yield base_url
    finally:
        server.shutdown()
        server_thread.join(timeout=5)


@pytest.fixture(scope="session")
def expected_source() -> str:
    """Source label the service under test should report."""
    return os.getenv("TEST_EXPECTED_SOURCE", "python-flask-test")
