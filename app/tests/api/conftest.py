"""Fixtures for HTTP route tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from main import server_app


@pytest.fixture(autouse=True)
def reset_rate_limits():
    get_limiter().reset()
    yield
    get_limiter().reset()


@pytest.fixture
def client():
    """Client for the full application without running the lifespan."""
    yield TestClient(server_app)
    server_app.dependency_overrides.clear()
