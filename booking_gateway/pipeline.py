"""Booking webhook normalization pipeline.

Flow for one payload (pure computation, no I/O):
  extract_booking -> qr_token / checkin_url / idempotency_key
  -> format_fecha_bonita -> assemble_record (contract check)

``headers`` are accepted for transport parity; secret verification happens at
the HTTP boundary (see ``main``), never here.
"""
from __future__ import annotations

import functools
from typing import Any, Mapping

from . import tokens
from .assembler import assemble_record
from .config import Settings
from .dates import BabelDateFormatter, DateFormatter, format_fecha_bonita
from .logging_config import booking_context, get_logger
from .paths import get_path
from .shapes import extract_booking

_log = get_logger("booking.pipeline", level_env="BOOKING_LOG_LEVEL")


class BookingNormalizer:
    def __init__(self, settings: Settings, formatter: DateFormatter | None = None):
        self.settings = settings
        self.formatter = formatter or BabelDateFormatter()
        if settings.uses_dev_secret:
            _log.warning("BOOKING_QR_SECRET not set; using the development check-in secret")

    def normalize(self, payload: Any, headers: Mapping[str, str] | None = None) -> dict[str, Any]:
        s = self.settings
        fields = extract_booking(payload, s.default_timezone)
        booking_id = fields["bookingId"]
        ctx = booking_context(booking_id, fields["type"])
        _log.debug(f"detected type={fields['type']} booking_id={booking_id}", extra=ctx)

        token = tokens.qr_token(s.qr_secret, booking_id, fields["customerEmail"])
        fecha = format_fecha_bonita(
            fields["startAt"],
            fields["timezone"],
            formatter=self.formatter,
            locale=s.date_locale,
            default_tz=s.default_timezone,
        )
        if fields["totalAmount"] is None and _amount_given(payload):
            _log.warning(f"non-numeric payment.amount booking_id={booking_id}", extra=ctx)

        record = assemble_record(
            fields,
            fecha_bonita=fecha,
            qr_token=token,
            checkin_url=tokens.checkin_url(s.checkin_base_url, token),
            idempotency_key=tokens.idempotency_key(booking_id),
            default_tz=s.default_timezone,
        )
        _log.info(
            f"normalized booking_id={booking_id} type={record['type']} "
            f"idempotency_key={record['idempotencyKey']}",
            extra=booking_context(booking_id, record["type"], record["idempotencyKey"]),
        )
        return record


def _amount_given(payload: Any) -> bool:
    return get_path(payload, "data.payment.amount") is not None


def normalize_booking(
    payload: Any,
    headers: Mapping[str, str] | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """One-shot helper: normalize with ``settings`` or the environment's."""
    return normalizer_for(settings or Settings.from_env()).normalize(payload, headers)


@functools.lru_cache(maxsize=8)
def normalizer_for(settings: Settings) -> BookingNormalizer:
    """Shared normalizer per settings value (Settings is frozen and hashable)."""
    return BookingNormalizer(settings)
