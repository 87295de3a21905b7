"""Integration tests for /health and /metrics endpoints."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from tripstate.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Test /health endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Test /health returns ok with the configured home country."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["home_country"]


class TestMetricsEndpoint:
    """Test /metrics endpoint."""

    def test_metrics_returns_prometheus_format(self, client: TestClient) -> None:
        """Test /metrics returns Prometheus text format."""
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
        assert "# HELP" in response.text

    def test_metrics_include_derivations(
        self, client: TestClient, trip_document: dict[str, Any]
    ) -> None:
        """Test that derivation and edit counters appear after requests."""
        client.post("/derive/readiness", json=trip_document)
        client.post(
            "/overrides/readiness",
            json={"trip": trip_document, "edit": {"op": "hide", "itemId": "currency"}},
        )

        text = client.get("/metrics").text

        assert 'derivations_total{view="readiness"}' in text
        assert "derivation_latency_ms_bucket" in text
        assert 'override_edits_total{layer="readiness",op="hide"}' in text

    def test_metrics_can_be_scraped_multiple_times(self, client: TestClient) -> None:
        """Test /metrics endpoint can be called multiple times."""
        response1 = client.get("/metrics")
        response2 = client.get("/metrics")

        assert response1.status_code == 200
        assert response2.status_code == 200


class TestRootEndpoint:
    """Test root endpoint."""

    def test_root_returns_api_info(self, client: TestClient) -> None:
        """Test root endpoint returns API information."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Trip State API"
        assert data["version"] == "0.1.0"
