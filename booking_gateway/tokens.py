"""Check-in token derivation and inbound secret comparison.

The check-in token is deterministic: the same (booking id, email) pair always
maps to the same token, so QR codes can be regenerated without storage and a
re-delivered webhook yields an identical record.
"""
from __future__ import annotations

import hmac
from typing import Any

from .utils import sha256_b64u

TOKEN_LENGTH = 43  # base64url of a 256-bit digest, unpadded


def qr_token(secret: str, booking_id: str, customer_email: str) -> str:
    return sha256_b64u(f"{secret}|{booking_id}|{customer_email}")


def checkin_url(base_url: str, token: str) -> str:
    return f"{base_url}{token}"


def idempotency_key(booking_id: str) -> str:
    return f"booking:{booking_id}"


def verify_webhook_secret(received: Any, expected: Any) -> bool:
    """Compare an inbound webhook secret against the configured one.

    No configured secret accepts everything. Otherwise the comparison is
    constant time, exact (no trimming, case sensitive) and a missing
    received value is rejected.
    """
    if expected is None or str(expected) == "":
        return True
    if received is None:
        return False
    return hmac.compare_digest(
        str(received).encode("utf-8"),
        str(expected).encode("utf-8"),
    )
