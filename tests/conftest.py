"""
Shared pytest fixtures.

Every test gets its own application backed by a private in-memory
SQLite database, so tests never share state.
"""

import os

# Must be set before library_api reads its settings at import time.
os.environ.setdefault("DATABASE_IN_MEMORY", "true")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from library_api.core.config import Settings
from library_api.infrastructure.database import create_db_engine, create_schema
from library_api.main import create_app

TEST_EMAIL = "test@example.com"
TEST_PASSWORD = "password123"


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated, fast test application."""
    return Settings(
        database_in_memory=True,
        bcrypt_rounds=4,
        rate_limit_enabled=False,
        jwt_secret="test-secret",
        log_level="WARNING",
    )


@pytest.fixture
def client(test_settings: Settings):
    """A TestClient with the application lifespan (schema creation) running."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    """Register a customer, log in and return the bearer header."""
    client.post(
        "/customers",
        json={"name": "Test User", "email": TEST_EMAIL, "password": TEST_PASSWORD},
    )
    response = client.post("/login", json={"email": TEST_EMAIL, "password": TEST_PASSWORD})
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def engine(test_settings: Settings):
    """A fresh in-memory database with the library schema."""
    db_engine = create_db_engine(test_settings)
    create_schema(db_engine)
    yield db_engine
    db_engine.dispose()
