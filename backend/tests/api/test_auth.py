"""
Tests for the auth endpoints and the bearer token gate.
"""

import pytest

from api.middleware.auth import authenticate
from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.service import AuthService


class TestRegister:
    def test_register_success(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "a@b.com", "password": "password123", "name": "A"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["token"].count(".") == 2
        assert data["user"]["email"] == "a@b.com"
        assert data["user"]["name"] == "A"
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]

    def test_register_duplicate_email(self, client, register):
        register()
        response = client.post(
            "/api/auth/register",
            json={"email": "a@b.com", "password": "password123", "name": "A"},
        )
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Validation Error"
        assert data["message"] == "Email already registered"
        assert data["details"]["email"]

    def test_register_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "a@b.com"})
        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Validation failed"
        assert data["details"] == {
            "name": ["Name is required"],
            "password": ["Password is required"],
        }

    def test_register_bad_email_and_short_password(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "test@", "password": "1234567", "name": "A"},
        )
        assert response.status_code == 400
        assert response.json()["details"] == {
            "email": ["Invalid email format"],
            "password": ["Password must be at least 8 characters long"],
        }

    def test_register_malformed_body(self, client):
        response = client.post(
            "/api/auth/register",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Validation Error"


class TestLogin:
    def test_login_success(self, client, register):
        registered = register()
        response = client.post(
            "/api/auth/login", json={"email": "a@b.com", "password": "password123"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == registered["user"]["id"]
        assert "password_hash" not in data["user"]
        assert data["token"]

    def test_wrong_password_and_unknown_email_are_identical(self, client, register):
        register()
        wrong_password = client.post(
            "/api/auth/login", json={"email": "a@b.com", "password": "wrong-password"}
        )
        unknown_email = client.post(
            "/api/auth/login", json={"email": "nobody@b.com", "password": "password123"}
        )
        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["message"] == "Invalid credentials"

    def test_login_missing_fields(self, client):
        response = client.post("/api/auth/login", json={})
        assert response.status_code == 400
        assert set(response.json()["details"]) == {"email", "password"}


class TestMe:
    def test_me_with_valid_token(self, client, register, headers_for):
        registered = register()
        response = client.get("/api/auth/me", headers=headers_for(registered["token"]))
        assert response.status_code == 200
        assert response.json()["user"] == registered["user"]

    def test_missing_auth_header(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json()["message"] == "No authentication token provided"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.parametrize("header", ["abc.def.ghi", "bearer abc", "Bearer "])
    def test_header_without_extractable_token(self, client, header):
        response = client.get("/api/auth/me", headers={"Authorization": header})
        assert response.status_code == 401
        assert response.json()["message"] == "No authentication token provided"

    def test_expired_token(self, client, make_token, headers_for):
        response = client.get("/api/auth/me", headers=headers_for(make_token(expired=True)))
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    def test_token_signed_with_wrong_secret(self, client, make_token, headers_for):
        token = make_token(secret="this-is-not-the-real-secret-at-all")
        response = client.get("/api/auth/me", headers=headers_for(token))
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    def test_garbage_token(self, client, headers_for):
        response = client.get("/api/auth/me", headers=headers_for("invalid-token"))
        assert response.status_code == 401

    def test_valid_token_for_deleted_user(self, client, make_token, headers_for):
        token = make_token(user_id="no-such-user", email="ghost@b.com")
        response = client.get("/api/auth/me", headers=headers_for(token))
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"


class TestAuthenticate:
    @pytest.fixture
    def auth(self, container) -> AuthService:
        return container.auth

    @pytest.mark.asyncio
    async def test_resolves_identity(self, auth, container):
        token = container.tokens.issue("user-1", "a@b.com")
        user = await authenticate(f"Bearer {token}", auth)
        assert user.user_id == "user-1"
        assert user.email == "a@b.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [None, "", "Token abc", "Bearer "])
    async def test_no_token(self, auth, header):
        with pytest.raises(MissingTokenError):
            await authenticate(header, auth)

    @pytest.mark.asyncio
    async def test_extra_space_is_part_of_the_token(self, auth, container):
        token = container.tokens.issue("user-1", "a@b.com")
        with pytest.raises(InvalidTokenError):
            await authenticate(f"Bearer  {token}", auth)

    @pytest.mark.asyncio
    async def test_does_not_touch_the_store(self, auth, container, database):
        token = container.tokens.issue("user-1", "a@b.com")
        database.collection("users").clear()
        user = await authenticate(f"Bearer {token}", auth)
        assert user.user_id == "user-1"
