"""Tests for the profile endpoints."""


def test_get_profile(client, register, headers_for):
    registered = register()
    response = client.get("/api/profile", headers=headers_for(registered["token"]))
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["id"] == registered["user"]["id"]
    assert "password_hash" not in user


def test_get_profile_requires_token(client):
    assert client.get("/api/profile").status_code == 401


def test_update_name_and_email(client, register, headers_for):
    headers = headers_for(register()["token"])
    response = client.put(
        "/api/profile", json={"name": "  New Name ", "email": "new@b.com"}, headers=headers
    )
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["name"] == "New Name"
    assert user["email"] == "new@b.com"

    # The old address no longer logs in, the new one does
    assert client.post(
        "/api/auth/login", json={"email": "a@b.com", "password": "password123"}
    ).status_code == 401
    assert client.post(
        "/api/auth/login", json={"email": "new@b.com", "password": "password123"}
    ).status_code == 200


def test_update_keeps_own_email(client, register, headers_for):
    headers = headers_for(register()["token"])
    response = client.put("/api/profile", json={"email": "a@b.com"}, headers=headers)
    assert response.status_code == 200


def test_update_email_taken_by_other_user(client, register, headers_for):
    register(email="taken@b.com")
    headers = headers_for(register()["token"])
    response = client.put("/api/profile", json={"email": "taken@b.com"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Email already in use"


def test_update_invalid_email(client, register, headers_for):
    headers = headers_for(register()["token"])
    response = client.put("/api/profile", json={"email": "not-an-email"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["details"] == {"email": ["Invalid email format"]}


def test_update_blank_name(client, register, headers_for):
    headers = headers_for(register()["token"])
    response = client.put("/api/profile", json={"name": "  "}, headers=headers)
    assert response.status_code == 400
    assert response.json()["details"] == {"name": ["Name cannot be empty"]}


def test_update_unknown_user(client, make_token, headers_for):
    response = client.put(
        "/api/profile", json={"name": "x"}, headers=headers_for(make_token(user_id="ghost"))
    )
    assert response.status_code == 404
