from __future__ import annotations

import hashlib
import os
from typing import Any

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .utils import b64u, b64u_decode


class RecordSigner:
    """Ed25519 signer for booking records using a 32-byte seed (base64url, no padding)."""
    def __init__(self, priv_seed_b64u: str, kid: str):
        self.kid = kid
        seed = b64u_decode(priv_seed_b64u)
        if len(seed) != 32:
            raise ValueError("BOOKING_SIGNER_PRIVATE_KEY_B64 must be a 32-byte base64url seed")
        self._priv = Ed25519PrivateKey.from_private_bytes(seed)
        self._pub = self._priv.public_key()

    def sign_record(self, record_cid: str, idempotency_key: str) -> str:
        return b64u(self._priv.sign(f"{record_cid}|{idempotency_key}".encode()))

    def verify_record(self, record_cid: str, idempotency_key: str, signature: str) -> bool:
        try:
            self._pub.verify(b64u_decode(signature), f"{record_cid}|{idempotency_key}".encode())
        except Exception:
            return False
        return True

    def public_jwk(self) -> dict[str, Any]:
        pub_raw = self._pub.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return {"kty": "OKP", "crv": "Ed25519", "x": b64u(pub_raw), "kid": self.kid, "use": "sig"}

def generate_signer_env() -> dict[str, str]:
    """Create a new signing seed and its key id, keyed by env var name."""
    priv = Ed25519PrivateKey.generate()
    seed = priv.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )
    pub_raw = priv.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return {
        "BOOKING_SIGNER_PRIVATE_KEY_B64": b64u(seed),
        "BOOKING_SIGNER_KID": f"booking-ed25519-{hashlib.sha256(pub_raw).hexdigest()[:16]}",
    }

def load_signer_from_env() -> RecordSigner | None:
    priv = os.getenv("BOOKING_SIGNER_PRIVATE_KEY_B64")
    kid = os.getenv("BOOKING_SIGNER_KID", "booking-default")
    if not priv:
        return None
    return RecordSigner(priv, kid)
