"""
pytest configuration and fixtures.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from config import Settings
from main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, environment="test")


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
