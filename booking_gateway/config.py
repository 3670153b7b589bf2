"""Process-wide configuration for the booking normalizer.

Values are read from the environment once (``Settings.from_env``) and the
resulting object is frozen; pipeline components receive it explicitly.

Environment:
  BOOKING_QR_SECRET              salt for check-in tokens (rotate out-of-band)
  BOOKING_CHECKIN_BASE_URL       prefix the token is appended to
  BOOKING_DEFAULT_TZ             IANA zone used when the payload has none
  BOOKING_DATE_LOCALE            locale for the human readable start date
  BOOKING_WEBHOOK_SECRET         expected inbound secret (unset = accept all)
  BOOKING_WEBHOOK_SECRET_HEADER  header carrying the inbound secret
"""
from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

DEV_QR_SECRET = "MAMAPLUS_SUPER_SECRETO_2026"
DEFAULT_CHECKIN_BASE_URL = "https://TU_DOMINIO/checkin?token="
DEFAULT_TIMEZONE = "Europe/Berlin"
DEFAULT_DATE_LOCALE = "es_ES"
DEFAULT_SECRET_HEADER = "x-webhook-secret"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    qr_secret: str = DEV_QR_SECRET
    checkin_base_url: str = DEFAULT_CHECKIN_BASE_URL
    default_timezone: str = DEFAULT_TIMEZONE
    date_locale: str = DEFAULT_DATE_LOCALE
    webhook_secret: str | None = None
    webhook_secret_header: str = DEFAULT_SECRET_HEADER

    @property
    def uses_dev_secret(self) -> bool:
        return self.qr_secret == DEV_QR_SECRET

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            qr_secret=_env("BOOKING_QR_SECRET") or DEV_QR_SECRET,
            checkin_base_url=_env("BOOKING_CHECKIN_BASE_URL") or DEFAULT_CHECKIN_BASE_URL,
            default_timezone=_env("BOOKING_DEFAULT_TZ") or DEFAULT_TIMEZONE,
            date_locale=_env("BOOKING_DATE_LOCALE") or DEFAULT_DATE_LOCALE,
            webhook_secret=_env("BOOKING_WEBHOOK_SECRET"),
            webhook_secret_header=(
                _env("BOOKING_WEBHOOK_SECRET_HEADER") or DEFAULT_SECRET_HEADER
            ).lower(),
        )


def _env(name: str) -> str | None:
    # blank counts as unset
    val = os.getenv(name)
    if val is None or not val.strip():
        return None
    return val.strip()
