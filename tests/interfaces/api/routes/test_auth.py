"""Tests for the authentication endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

REGISTRATION = {"name": "Ada", "email": "ada@example.com", "password": "Secret123"}


def _register_and_login(client: TestClient, payload: dict = REGISTRATION) -> tuple[dict, str]:
    registered = client.post("/auth/register", json=payload)
    assert registered.status_code == 201
    login = client.post(
        "/auth/login", json={"email": payload["email"], "password": payload["password"]}
    )
    assert login.status_code == 200
    return registered.json()["user"], login.json()["token"]


def test_register_returns_public_user(client: TestClient) -> None:
    response = client.post("/auth/register", json=REGISTRATION)

    assert response.status_code == 201
    user = response.json()["user"]
    assert user["name"] == "Ada"
    assert user["email"] == "ada@example.com"
    assert "password" not in user
    assert user["id"]
    assert "createdAt" in user


def test_register_twice_is_conflict(client: TestClient) -> None:
    client.post("/auth/register", json=REGISTRATION)

    response = client.post("/auth/register", json=REGISTRATION)

    assert response.status_code == 409
    assert response.json()["detail"] == "User already exists"


def test_register_with_missing_fields_is_bad_request(client: TestClient) -> None:
    response = client.post("/auth/register", json={"email": "ada@example.com"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Required fields are missing"


def test_login_with_wrong_password_is_unauthorized(client: TestClient) -> None:
    client.post("/auth/register", json=REGISTRATION)

    response = client.post(
        "/auth/login", json={"email": "ada@example.com", "password": "nope"}
    )

    assert response.status_code == 401


def test_read_own_profile(client: TestClient) -> None:
    user, token = _register_and_login(client)

    response = client.get(f"/auth/{user['id']}", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["user"] == user


def test_read_other_profile_is_not_found(client: TestClient) -> None:
    _, token = _register_and_login(client)
    other, _ = _register_and_login(
        client, {"name": "Bob", "email": "bob@example.com", "password": "Secret123"}
    )

    response = client.get(f"/auth/{other['id']}", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404


def test_missing_or_malformed_header_is_bad_request(client: TestClient) -> None:
    user, token = _register_and_login(client)

    missing = client.get(f"/auth/{user['id']}")
    wrong_scheme = client.get(f"/auth/{user['id']}", headers={"Authorization": f"Token {token}"})

    assert missing.status_code == 400
    assert wrong_scheme.status_code == 400
    assert missing.json()["detail"] == "Token not present"


def test_invalid_token_is_unauthorized(client: TestClient) -> None:
    user, _ = _register_and_login(client)

    response = client.get(f"/auth/{user['id']}", headers={"Authorization": "Bearer forged"})

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_register_with_blank_name_is_bad_request(client: TestClient) -> None:
    response = client.post(
        "/auth/register",
        json={"name": "   ", "email": "ada@example.com", "password": "Secret123"},
    )

    assert response.status_code == 400


def test_register_with_malformed_email_is_bad_request(client: TestClient) -> None:
    response = client.post(
        "/auth/register",
        json={"name": "Ada", "email": "foo@.com", "password": "Secret123"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Email address is not valid"
