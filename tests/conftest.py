"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import Mock

from config import Settings
from main import create_app


@pytest.fixture
def settings():
    """Settings pointing at a fake upstream."""
    return Settings(
        gatekeeper_url="https://gatekeeper.test/api/gatekeeper/access",
        relay_timeout=2.5,
    )


@pytest.fixture
def client(settings):
    """Flask test client for a freshly built app."""
    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def upstream_ok():
    """Mock upstream response answering 200 with a success body."""
    resp = Mock()
    resp.status_code = 200
    resp.json = Mock(return_value={"status": "success", "message": "Access granted", "data": None})
    return resp
