"""Tests for the notification endpoints and websocket channel."""

from __future__ import annotations

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient


def _account(client: TestClient, name: str) -> tuple[dict, dict[str, str]]:
    email = f"{name.lower()}@example.com"
    registered = client.post(
        "/auth/register", json={"name": name, "email": email, "password": "Secret123"}
    )
    assert registered.status_code == 201
    token = client.post("/auth/login", json={"email": email, "password": "Secret123"}).json()[
        "token"
    ]
    return registered.json()["user"], {"Authorization": f"Bearer {token}"}


def _notify(client: TestClient, headers: dict[str, str], user_id: str, **payload) -> dict:
    response = client.post(
        "/notification",
        json={"type": "like", "userId": user_id, "payload": payload},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["notification"]


def test_like_scenario(client: TestClient) -> None:
    owner, owner_headers = _account(client, "Owner")
    actor, actor_headers = _account(client, "Actor")

    notification = _notify(client, actor_headers, owner["id"], actor={"id": "A1"})
    assert notification["read"] is False
    assert notification["userId"] == owner["id"]
    assert notification["payload"]["actor"]["id"] == actor["id"]

    unread = client.get("/notification", headers=owner_headers).json()
    assert unread["length"] == 1
    assert unread["unreadNotifications"][0]["id"] == notification["id"]

    marked = client.patch("/notification/all-notification", headers=owner_headers)
    assert marked.status_code == 200
    assert marked.json() == {"updatedCount": 1}

    assert client.get("/notification", headers=owner_headers).json()["length"] == 0


def test_create_with_missing_fields_is_bad_request(client: TestClient) -> None:
    _, headers = _account(client, "Owner")

    response = client.post("/notification", json={"type": "like"}, headers=headers)

    assert response.status_code == 400


def test_create_for_unknown_user_is_not_found(client: TestClient) -> None:
    _, headers = _account(client, "Owner")

    response = client.post(
        "/notification",
        json={"type": "like", "userId": "missing", "payload": {}},
        headers=headers,
    )

    assert response.status_code == 404


def test_mark_read_twice_succeeds(client: TestClient) -> None:
    owner, headers = _account(client, "Owner")
    notification = _notify(client, headers, owner["id"])

    for _ in range(2):
        response = client.patch(
            "/notification", json={"notificationId": notification["id"]}, headers=headers
        )
        assert response.status_code == 200
        assert response.json()["notification"]["read"] is True


def test_mark_read_of_someone_elses_notification_is_not_found(client: TestClient) -> None:
    owner, owner_headers = _account(client, "Owner")
    _, intruder_headers = _account(client, "Intruder")
    notification = _notify(client, owner_headers, owner["id"])

    response = client.patch(
        "/notification", json={"notificationId": notification["id"]}, headers=intruder_headers
    )

    assert response.status_code == 404
    assert client.get("/notification", headers=owner_headers).json()["length"] == 1


def test_mark_read_without_id_is_bad_request(client: TestClient) -> None:
    _, headers = _account(client, "Owner")

    response = client.patch("/notification", json={}, headers=headers)

    assert response.status_code == 400


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/notification"),
        ("post", "/notification"),
        ("patch", "/notification"),
        ("patch", "/notification/all-notification"),
    ],
)
def test_endpoints_require_bearer_token(client: TestClient, method: str, path: str) -> None:
    missing = client.request(method, path, json={})
    invalid = client.request(method, path, json={}, headers={"Authorization": "Bearer nope"})

    assert missing.status_code == 400
    assert invalid.status_code == 401


def test_websocket_rejects_missing_and_invalid_tokens(client: TestClient) -> None:
    for url in ("/notification/ws", "/notification/ws?token=forged"):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect(url) as websocket:
                websocket.receive_json()
        assert exc_info.value.code == 1008


def test_websocket_receives_pushed_notification(client: TestClient) -> None:
    owner, owner_headers = _account(client, "Owner")
    _, actor_headers = _account(client, "Actor")
    token = owner_headers["Authorization"].split(" ", 1)[1]

    with client.websocket_connect(f"/notification/ws?token={token}") as websocket:
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        notification = _notify(client, actor_headers, owner["id"])

        message = websocket.receive_json()
        assert message["type"] == "notification"
        assert message["data"]["id"] == notification["id"]
        assert message["data"]["read"] is False


def test_websocket_sends_pending_on_join_and_accepts_acks(client: TestClient) -> None:
    owner, headers = _account(client, "Owner")
    notification = _notify(client, headers, owner["id"])

    with client.websocket_connect(
        "/notification/ws", headers={"Authorization": headers["Authorization"]}
    ) as websocket:
        init = websocket.receive_json()
        assert init["type"] == "init"
        assert [n["id"] for n in init["data"]] == [notification["id"]]

        websocket.send_json({"type": "ack", "ids": [notification["id"]]})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    assert client.get("/notification", headers=headers).json()["length"] == 0


def test_websocket_ignores_binary_frames(client: TestClient) -> None:
    _, headers = _account(client, "Owner")
    token = headers["Authorization"].split(" ", 1)[1]

    with client.websocket_connect(f"/notification/ws?token={token}") as websocket:
        websocket.send_bytes(b"\x00\x01")
        websocket.send_text("not json")
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}
