"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = client.get("/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    data = client.get("/health").json()

    assert data["status"] == "ok"
    assert data["version"] == "1.0.0"
    assert data["environment"] == "test"
    assert data["users"] == 3
    assert data["message"] == "API is healthy"


@pytest.mark.unit
def test_health_check_counts_users(client: TestClient) -> None:
    client.delete("/users/1")

    assert client.get("/health").json()["users"] == 2


@pytest.mark.unit
def test_health_check_response_json() -> None:
    """Test health check response is valid JSON."""
    from users_api.models.health import HealthCheckResponse

    response = HealthCheckResponse(status="ok", version="1.0.0", environment="test")

    response_dict = response.model_dump()
    assert response_dict["status"] == "ok"
    assert response_dict["users"] == 0
