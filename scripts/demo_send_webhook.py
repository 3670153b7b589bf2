import json
import os

import httpx

GATEWAY = os.getenv("GATEWAY_URL", "http://127.0.0.1:8080")
SECRET = os.getenv("BOOKING_WEBHOOK_SECRET", "")

payload = {
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
        "customer": {"firstName": "Bob", "lastName": "Johnson", "email": "bob@example.com"},
        "payment": {"amount": "75.50", "currency": "USD", "status": "pending"},
    }
}

headers = {"X-Webhook-Secret": SECRET} if SECRET else {}
with httpx.Client(timeout=10.0) as client:
    r = client.post(f"{GATEWAY}/v1/bookings/webhook", json=payload, headers=headers)
    print("Status:", r.status_code)
    print("Headers:", {k:v for k,v in r.headers.items() if k.lower().startswith(("x-record", "x-idempotency"))})
    print(json.dumps(r.json(), indent=2, ensure_ascii=False))
