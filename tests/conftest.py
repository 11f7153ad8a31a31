"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from users_api.config import Settings
from users_api.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the local environment."""
    return Settings(_env_file=None, environment="test", seed_users=True)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """Create a FastAPI test client backed by a fresh registry."""
    return TestClient(create_app(settings))


@pytest.fixture
def empty_client(settings: Settings) -> TestClient:
    """Test client whose registry starts empty."""
    return TestClient(create_app(settings.model_copy(update={"seed_users": False})))
