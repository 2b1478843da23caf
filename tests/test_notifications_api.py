"""Integration tests for the notification HTTP endpoints and websocket."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from app.domain.entities import Notification
from app.infrastructure import database
from app.infrastructure.repositories import NotificationRepository


def _store(**values) -> Notification:
    db = database.SessionLocal()
    try:
        return NotificationRepository(db).create(Notification(id=None, **values))
    finally:
        db.close()


def test_list_and_count_notifications(client: TestClient) -> None:
    welcome = _store(type="welcome", message="Welcome!", target_user_id="U1")
    _store(type="new_user", message="New signup", target_roles=["admin"])

    response = client.get("/notifications/", params={"user_id": "U1"})
    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body] == [welcome.id]
    assert body[0]["targetUserId"] == "U1"
    assert body[0]["targetRoles"] == []
    assert body[0]["read"] is False

    count = client.get("/notifications/unread-count", params={"role": "admin"})
    assert count.json() == {"count": 1}


def test_listing_requires_an_identity(client: TestClient) -> None:
    response = client.get("/notifications/")
    assert response.status_code == 400
    assert response.json()["detail"] == "Either role or user_id must be provided"

    assert client.get("/notifications/", params={"role": "guest"}).status_code == 400
    assert client.get("/notifications/", params={"role": "admin", "skip": -1}).status_code == 422


def test_mark_read_endpoint(client: TestClient) -> None:
    notification = _store(type="new_vendor", message="New vendor", target_roles=["admin"])

    forbidden = client.patch(f"/notifications/{notification.id}/read", params={"role": "user"})
    assert forbidden.status_code == 404

    for _ in range(2):
        response = client.patch(f"/notifications/{notification.id}/read", params={"role": "admin"})
        assert response.status_code == 200
        assert response.json()["read"] is True

    assert client.get("/notifications/unread-count", params={"role": "admin"}).json() == {
        "count": 0
    }


def test_websocket_authenticate_receives_catch_up(client: TestClient) -> None:
    welcome = _store(type="welcome", message="Welcome!", target_user_id="U1")

    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        websocket.send_json({"type": "authenticate", "userId": "U1", "role": "user"})
        user_update = websocket.receive_json()
        role_update = websocket.receive_json()

    assert user_update["type"] == "userNotificationsUpdate"
    assert [item["id"] for item in user_update["data"]["notifications"]] == [welcome.id]
    assert user_update["data"]["unreadCount"] == 1
    assert role_update["type"] == "roleNotificationsUpdate"
    assert role_update["data"]["notifications"] == []


def test_websocket_authenticate_without_role_is_closed(client: TestClient) -> None:
    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "authenticate", "userId": "U1"})
        with pytest.raises(WebSocketDisconnect) as exc_info:
            websocket.receive_json()

    assert exc_info.value.code == 1008


def test_mark_read_pushes_unread_count(client: TestClient) -> None:
    notification = _store(type="new_vendor", message="New vendor", target_roles=["admin"])

    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "authenticate", "role": "admin"})
        assert websocket.receive_json()["type"] == "roleNotificationsUpdate"

        client.patch(f"/notifications/{notification.id}/read", params={"role": "admin"})

        assert websocket.receive_json() == {
            "type": "unreadCountUpdate",
            "data": {"role": "admin", "count": 0},
        }


def test_health_reports_connections(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok", "realtime_connections": 0}


def test_websocket_ignores_unreadable_frames(client: TestClient) -> None:
    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_text("not json")
        websocket.send_bytes(b"\x00\x01")
        websocket.send_json(["not", "an", "object"])
        websocket.send_json({"type": "ping"})

        assert websocket.receive_json() == {"type": "pong"}
