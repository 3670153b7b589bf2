import copy

import pytest

from booking_gateway.config import Settings

EVENT_PAYLOAD = {
    "data": {
        "event": {
            "id": "evt_123",
            "name": "Yoga Class",
            "location": {"name": "Downtown Studio"},
            "startAt": "2026-01-15T10:00:00Z",
            "endAt": "2026-01-15T11:00:00Z",
            "timezone": "Europe/Berlin",
        },
        "booking": {"id": "book_456", "status": "confirmed"},
        "customer": {
            "firstName": "Jane",
            "lastName": "Smith",
            "email": "jane@example.com",
            "phone": "+1234567890",
        },
        "payment": {"amount": 50, "currency": "EUR", "status": "paid"},
    }
}

SERVICE_PAYLOAD = {
    "data": {
        "appointment": {
            "service": {"id": "svc_789", "name": "Haircut"},
            "employee": {"name": "John Barber"},
            "location": {"name": "Main Salon"},
            "startAt": "2026-02-20T14:00:00Z",
            "endAt": "2026-02-20T15:00:00Z",
            "timezone": "America/New_York",
        },
        "booking": {"id": "book_789", "status": "pending"},
        "customer": {
            "firstName": "Bob",
            "lastName": "Johnson",
            "email": "bob@example.com",
        },
        "payment": {"amount": "75.50", "currency": "USD", "status": "pending"},
    }
}


@pytest.fixture
def event_payload():
    return copy.deepcopy(EVENT_PAYLOAD)


@pytest.fixture
def service_payload():
    return copy.deepcopy(SERVICE_PAYLOAD)


@pytest.fixture
def settings():
    return Settings(qr_secret="test-secret", checkin_base_url="https://checkin.test/c?token=")
