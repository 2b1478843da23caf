"""Integration tests for vendor and festival routes and their realtime events."""

from __future__ import annotations

from fastapi.testclient import TestClient

VENDOR_PAYLOAD = {
    "name": "Ana Torres",
    "email": "ana@example.com",
    "phone": "5551234567",
    "stall_name": "Ana's Tacos",
    "stall_type": "Food",
}

FESTIVAL_PAYLOAD = {
    "name": "Spring Lights",
    "organizer": "City Council",
    "date": "2026-04-12",
    "status": "Upcoming",
    "address": "1 Main Street",
    "category": "Cultural",
}


def _receive(websocket, count: int) -> dict[str, dict]:
    messages = [websocket.receive_json() for _ in range(count)]
    return {message["type"]: message["data"] for message in messages}


def test_vendor_registration_notifies_admins(client: TestClient) -> None:
    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "authenticate", "role": "admin"})
        assert websocket.receive_json()["type"] == "roleNotificationsUpdate"

        response = client.post("/vendors/", json=VENDOR_PAYLOAD)
        assert response.status_code == 201
        vendor = response.json()

        events = _receive(websocket, 3)

    assert set(events) == {"adminNotification", "vendorsUpdate", "vendorStatusCounts"}
    assert events["adminNotification"]["type"] == "new_vendor"
    assert events["adminNotification"]["entityId"] == str(vendor["id"])
    assert events["adminNotification"]["metadata"] == {
        "name": "Ana Torres",
        "registrationStatus": "Pending",
    }
    assert [item["id"] for item in events["vendorsUpdate"]] == [vendor["id"]]
    assert events["vendorStatusCounts"]["registration"]["Pending"] == 1

    listed = client.get("/notifications/", params={"role": "admin"}).json()
    assert [item["type"] for item in listed] == ["new_vendor"]


def test_duplicate_vendor_email_is_rejected(client: TestClient) -> None:
    assert client.post("/vendors/", json=VENDOR_PAYLOAD).status_code == 201

    response = client.post("/vendors/", json=VENDOR_PAYLOAD)

    assert response.status_code == 400
    listed = client.get("/notifications/", params={"role": "admin"}).json()
    assert [item["type"] for item in listed] == ["new_vendor"]


def test_payment_review_notifies_the_vendor(client: TestClient) -> None:
    vendor = client.post("/vendors/", json=VENDOR_PAYLOAD).json()

    attached = client.patch(
        f"/vendors/{vendor['id']}/payment-attachment", json={"file_name": "receipt.pdf"}
    )
    assert attached.status_code == 200
    assert attached.json()["payment_status"] == "Pending"

    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "authenticate", "role": "vendor", "userId": str(vendor["id"])})
        assert websocket.receive_json()["type"] == "userNotificationsUpdate"
        assert websocket.receive_json()["type"] == "roleNotificationsUpdate"

        response = client.patch(
            f"/vendors/{vendor['id']}/payment-status", json={"status": "Approved"}
        )
        assert response.status_code == 200

        events = _receive(websocket, 4)

    assert set(events) == {
        "userNotification",
        "vendorNotification",
        "vendorsUpdate",
        "vendorStatusCounts",
    }
    assert events["userNotification"]["metadata"] == {"status": "Approved", "name": "Ana Torres"}
    assert events["vendorStatusCounts"]["payment"]["Approved"] == 1

    personal = client.get("/notifications/", params={"user_id": str(vendor["id"])}).json()
    assert [item["message"] for item in personal] == ["Your payment has been approved"]

    admin_view = client.get("/notifications/", params={"role": "admin"}).json()
    assert [item["type"] for item in admin_view] == ["payment_attachment", "new_vendor"]


def test_unknown_vendor_returns_404(client: TestClient) -> None:
    response = client.patch("/vendors/999/registration-status", json={"status": "Approved"})
    assert response.status_code == 404


def test_festival_changes_refresh_every_client(client: TestClient) -> None:
    with client.websocket_connect("/notifications/ws") as websocket:
        created = client.post("/festivals/", json=FESTIVAL_PAYLOAD)
        assert created.status_code == 201
        festival = created.json()

        snapshot = websocket.receive_json()
        assert snapshot["type"] == "festivalsUpdate"
        assert [item["name"] for item in snapshot["data"]] == ["Spring Lights"]

        updated = client.put(f"/festivals/{festival['id']}", json={"status": "Active"})
        assert updated.status_code == 200
        assert websocket.receive_json()["data"][0]["status"] == "Active"

        assert client.delete(f"/festivals/{festival['id']}").status_code == 204
        assert websocket.receive_json() == {"type": "festivalsUpdate", "data": []}

    assert client.get(f"/festivals/{festival['id']}").status_code == 404


def test_festival_date_can_be_changed_alone(client: TestClient) -> None:
    festival = client.post("/festivals/", json=FESTIVAL_PAYLOAD).json()

    response = client.put(f"/festivals/{festival['id']}", json={"date": "2026-05-01"})

    assert response.status_code == 200
    assert response.json()["date"] == "2026-05-01"
    assert response.json()["status"] == "Upcoming"
    assert client.put(f"/festivals/{festival['id']}", json={"date": "soon"}).status_code == 422
