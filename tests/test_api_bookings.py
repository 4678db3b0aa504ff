"""API tests for bookings."""

from fastapi.testclient import TestClient


def test_create_booking(client: TestClient, create_event):
    event = create_event()

    response = client.post("/api/bookings", json={"event_id": event["id"], "email": "Ada@Example.com"})

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Booking created successfully"
    assert data["booking"]["event_id"] == event["id"]
    assert data["booking"]["email"] == "ada@example.com"


def test_booking_unknown_event(client: TestClient):
    response = client.post("/api/bookings", json={"event_id": 999, "email": "ada@example.com"})

    assert response.status_code == 404
    assert response.json()["error"] == "EVENT_NOT_FOUND"


def test_booking_invalid_email(client: TestClient, create_event):
    event = create_event()

    response = client.post("/api/bookings", json={"event_id": event["id"], "email": "not-an-email"})

    assert response.status_code == 400
    assert response.json()["message"] == "Please provide a valid email address"


def test_booking_missing_fields(client: TestClient):
    response = client.post("/api/bookings", json={"email": "ada@example.com"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"][0]["field"] == "body.event_id"
