"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from taskmind.app import app
from taskmind.config.settings import Settings, get_settings

DEVICE_ID = "63a7f138-2187-4d13-9d72-2f03cec3c662"


@pytest.fixture
def settings():
    """Provide settings with ML enrichment switched off."""
    return Settings(_env_file=None, intent_ml_url=None, db_retry_delay=0.01)


@pytest.fixture
def ml_settings():
    """Provide settings pointing at a fake ML service."""
    return Settings(
        _env_file=None,
        intent_ml_url="http://ml.test/",
        intent_ml_timeout=0.5,
        db_retry_delay=0.01,
    )


@pytest.fixture
def client(settings):
    """Provide a FastAPI test client using the test settings."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ml_client(ml_settings):
    """Provide a FastAPI test client with ML enrichment configured."""
    app.dependency_overrides[get_settings] = lambda: ml_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def device_headers():
    """Headers carrying the device identifier."""
    return {"X-Device-ID": DEVICE_ID}
