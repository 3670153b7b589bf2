#!/usr/bin/env python
"""Print a fresh Ed25519 record-signing identity as BOOKING_SIGNER_* env lines.

Usage:
  python scripts/gen_keys.py >> .env
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from booking_gateway.crypto import generate_signer_env  # noqa: E402

for name, value in generate_signer_env().items():
    print(f"{name}={value}")
