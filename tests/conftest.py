"""Test configuration and fixtures."""
import asyncio
import os
import tempfile

# Settings are read at import time, so the environment must be ready first
_db_dir = tempfile.mkdtemp(prefix="devconnector-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters"
os.environ["ENVIRONMENT"] = "testing"
os.environ.pop("GITHUB_TOKEN", None)

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.config.database import async_session, create_tables, drop_all_tables
from helpers import auth_headers, register_user


@pytest.fixture(autouse=True)
def reset_database():
    """Give every test empty tables."""
    asyncio.run(drop_all_tables())
    asyncio.run(create_tables())
    yield


@pytest.fixture
def client():
    """Create test client running the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory():
    """Session factory for tests that talk to repositories directly."""
    return async_session


@pytest.fixture
def token(client):
    return register_user(client)


@pytest.fixture
def headers(token):
    return auth_headers(token)


@pytest.fixture
def profile(client, headers):
    """Create a minimal profile for the registered user."""
    response = client.post(
        "/api/profile",
        json={"status": "Developer", "skills": "python, sql"},
        headers=headers
    )
    assert response.status_code == 200, response.text
    return response.json()
