from __future__ import annotations

from typing import Any, Mapping

REQUIRED_KEYS: tuple[str, ...] = (
    "bookingId",
    "bookingStatus",
    "paymentStatus",
    "customerFullName",
    "customerEmail",
    "customerPhone",
    "type",
    "itemId",
    "itemName",
    "employeeName",
    "locationName",
    "startAt",
    "endAt",
    "timezone",
    "fechaBonita",
    "totalAmount",
    "currency",
    "qrToken",
    "checkinUrl",
    "idempotencyKey",
)


class OutputContractError(RuntimeError):
    """Assembled booking record is missing one of REQUIRED_KEYS."""


def ensure_output_contract(record: Mapping[str, Any]) -> None:
    # presence check only; None values are valid
    missing = [k for k in REQUIRED_KEYS if k not in record]
    if missing:
        raise OutputContractError(f"Broken output contract, missing keys: {', '.join(missing)}")


def assemble_record(
    fields: Mapping[str, Any],
    *,
    fecha_bonita: str | None,
    qr_token: str,
    checkin_url: str,
    idempotency_key: str,
    default_tz: str,
) -> dict[str, Any]:
    """Merge extracted and derived fields into the fixed-shape booking record."""
    merged = dict(fields)
    merged.update(
        fechaBonita=fecha_bonita,
        qrToken=qr_token,
        checkinUrl=checkin_url,
        idempotencyKey=idempotency_key,
    )
    merged["timezone"] = merged.get("timezone") or default_tz
    record = {k: merged[k] for k in REQUIRED_KEYS if k in merged}
    ensure_output_contract(record)
    return record
