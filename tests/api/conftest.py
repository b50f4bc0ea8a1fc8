"""Fixtures for API tests."""

from unittest.mock import AsyncMock

import pytest
from falcon.testing import TestClient

from nodeguard.interfaces.api.app import create_app
from nodeguard.interfaces.api.resources.health import HealthResource


@pytest.fixture
def fake_pool() -> AsyncMock:
    """Stand-in for AsyncConnectionPool with awaitable open/close."""
    return AsyncMock()


@pytest.fixture
def client(store) -> TestClient:
    """Test client with health endpoints over the test's store."""
    return TestClient(create_app(HealthResource(store)))
