"""Shared fixtures: an explicit settings instance and a client around it."""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        client_id="test-client.apps.googleusercontent.com",
        client_secret="test-secret",
        redirect_uri="http://localhost:3000/auth/google/callback",
        _env_file=None,
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
