"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Every test runs against an in-memory database and a container built from
test settings, injected into the app through dependency overrides.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Callable, Optional
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container, reset_container
from shared.config import Settings, get_settings
from shared.database import JsonDatabase, reset_database_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: Optional[str] = "test-user-123",
    email: Optional[str] = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test token signed like the ones the app issues.

    Args:
        user_id: userId claim (omitted when None)
        email: email claim (omitted when None)
        expired: If True, creates an expired token
        secret: Signing key

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    iat = now - timedelta(hours=2) if expired else now

    payload = {
        "iat": int(iat.timestamp()),
        "exp": int(exp.timestamp()),
    }
    if user_id is not None:
        payload["userId"] = user_id
    if email is not None:
        payload["email"] = email
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, database and container around each test."""
    get_settings.cache_clear()
    reset_database_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_database_cache()
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known secret, fast hashing and an in-memory store."""
    return Settings(
        environment="test",
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        database_path="",
    )


@pytest.fixture
def database() -> JsonDatabase:
    return JsonDatabase()


@pytest.fixture
def container(test_settings: Settings, database: JsonDatabase) -> ServiceContainer:
    return ServiceContainer(settings=test_settings, database=database)


@pytest.fixture
def app(container: ServiceContainer):
    """Create a fresh app wired to the test container."""
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict]:
    """Register a user through the API and return the response body."""

    def _register(
        email: str = "a@b.com",
        password: str = "password123",
        name: str = "A",
    ) -> dict:
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(register) -> dict[str, str]:
    """Authorization headers for a freshly registered user."""
    return bearer(register()["token"])


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Factory for hand-crafted tokens (expired, wrong key, missing claims)."""
    return create_test_token


@pytest.fixture
def headers_for() -> Callable[[str], dict[str, str]]:
    """Factory turning a token into Authorization headers."""
    return bearer
