"""Shared test fixtures."""

import os

# Settings are cached on first import; configure them before importing the app.
os.environ["ENVIRONMENT"] = "DEV"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_DIR"] = ""
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-with-at-least-32-characters"

import pytest
from fastapi.testclient import TestClient

from gallery_api.main import app
from gallery_api.store import EntityStore, build_store
from gallery_api.utils.security import create_access_token


@pytest.fixture
def store() -> EntityStore:
    """Store loaded with the demo dataset."""
    return build_store(seed=True)


@pytest.fixture
def empty_store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def client(store):
    app.state.store = store
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def photographer_headers() -> dict:
    return {"Authorization": f"Bearer {create_access_token('user-1')}"}


@pytest.fixture
def client_headers() -> dict:
    return {"Authorization": f"Bearer {create_access_token('user-2')}"}
