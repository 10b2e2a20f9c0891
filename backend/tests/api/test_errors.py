"""
Tests for error mapping: status codes, error bodies and the
generic server error path.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_task_service
from modules.tasks.interfaces import ITaskService
from shared.config import Settings
from shared.exceptions import ConfigurationError


def test_error_body_shape(client):
    response = client.get("/api/tasks")
    assert response.json() == {
        "error": "Authentication Error",
        "code": "MISSING_TOKEN",
        "message": "No authentication token provided",
        "details": None,
    }


def test_expired_token_code(client, make_token, headers_for):
    response = client.get("/api/tasks", headers=headers_for(make_token(expired=True)))
    assert response.status_code == 401
    assert response.json()["code"] == "TOKEN_EXPIRED"
    assert response.json()["message"] == "Invalid or expired token"


@pytest.mark.parametrize("body", ["{not json", "[1, 2, 3]"])
def test_malformed_body(client, auth_headers, body):
    response = client.post(
        "/api/tasks",
        content=body,
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Validation Error"
    assert response.json()["message"] == "Validation failed"


def test_unexpected_failure_is_generic_500(app, client, auth_headers):
    service = MagicMock(spec=ITaskService)
    service.list_tasks = AsyncMock(side_effect=RuntimeError("disk on fire at /var/secret"))
    app.dependency_overrides[get_task_service] = lambda: service

    response = client.get("/api/tasks", headers=auth_headers)

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Server Error"
    assert data["message"] == "An error occurred while fetching tasks"
    assert "secret" not in response.text


def test_startup_refuses_missing_secret_in_production():
    settings = Settings(_env_file=None, environment="production", jwt_secret="")
    with patch("api.app.get_settings", return_value=settings):
        app = create_app()
        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass


def test_startup_with_secret_in_production():
    settings = Settings(
        _env_file=None,
        environment="production",
        jwt_secret="a-real-production-secret",
        database_path="",
    )
    with patch("api.app.get_settings", return_value=settings):
        app = create_app()
        with TestClient(app) as client:
            assert client.get("/api/health").status_code == 200
