"""End-to-end tests for the health endpoint."""

import pytest
from fastapi.testclient import TestClient

from shareport.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


class TestHealthEndpoint:
    """End-to-end tests for GET /health."""

    def test_health_check(self, client):
        """Should report the service as healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "0.1.0"
        assert "git_sha" in body

    def test_health_timestamp_comes_from_clock(self, client):
        """The timestamp is read from the injected clock."""
        response = client.get("/health")

        assert response.json()["timestamp"].startswith("2025-01-01T12:00:00")
