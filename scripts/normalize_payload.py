#!/usr/bin/env python
"""Normalize a booking webhook payload file and print the resulting record.

Usage:
  python scripts/normalize_payload.py --payload-file payload.json [--secret S] [--tz ZONE]

Configuration not given on the command line is read from BOOKING_* env vars.
Exit status 2 on an invalid payload (message on stderr).
"""
import argparse, json, sys
from pathlib import Path

# Local imports assuming run from repo root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from booking_gateway.config import Settings  # noqa: E402
from booking_gateway.pipeline import BookingNormalizer  # noqa: E402
from booking_gateway.shapes import BookingPayloadError  # noqa: E402

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--payload-file', required=True)
    p.add_argument('--secret', help='Check-in token secret (overrides BOOKING_QR_SECRET)')
    p.add_argument('--tz', help='Default IANA timezone (overrides BOOKING_DEFAULT_TZ)')
    args = p.parse_args()

    settings = Settings.from_env()
    overrides = {}
    if args.secret:
        overrides['qr_secret'] = args.secret
    if args.tz:
        overrides['default_timezone'] = args.tz
    if overrides:
        settings = settings.model_copy(update=overrides)

    raw = json.loads(Path(args.payload_file).read_text(encoding='utf-8'))
    try:
        record = BookingNormalizer(settings).normalize(raw)
    except BookingPayloadError as e:
        print(str(e), file=sys.stderr)
        return 2
    print(json.dumps(record, indent=2, ensure_ascii=False))
    return 0

if __name__ == '__main__':
    sys.exit(main())
