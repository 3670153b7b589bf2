from __future__ import annotations

from typing import Any

from .coerce import coerce_amount, full_name, string_or_none
from .paths import get_path

"""Booking webhook shape detection and field extraction.

Two inbound shapes are understood, both wrapped in a top-level ``data`` object:
  data.event        -> type "event"   (calendar/group booking, no staff member)
  data.appointment  -> type "service" (one-to-one staffed appointment)

``event`` wins when both are present. Booking, customer and payment blocks are
shared by both shapes.
"""

EVENT = "event"
SERVICE = "service"

# output field -> dotted path below data.<root>
_ITEM_PATHS: dict[str, dict[str, str | None]] = {
    EVENT: {
        "itemId": "event.id",
        "itemName": "event.name",
        "employeeName": None,
        "locationName": "event.location.name",
        "startAt": "event.startAt",
        "endAt": "event.endAt",
        "timezone": "event.timezone",
    },
    SERVICE: {
        "itemId": "appointment.service.id",
        "itemName": "appointment.service.name",
        "employeeName": "appointment.employee.name",
        "locationName": "appointment.location.name",
        "startAt": "appointment.startAt",
        "endAt": "appointment.endAt",
        "timezone": "appointment.timezone",
    },
}


class BookingPayloadError(ValueError):
    """Inbound payload violates the minimal input contract."""


def _present(value: Any) -> bool:
    # empty strings, zero and empty containers do not count as a shape marker
    if value is None or value is False:
        return False
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return bool(value)
    return True


def get_data(payload: Any) -> Any:
    data = get_path(payload, "data")
    if not _present(data):
        raise BookingPayloadError("Invalid payload: missing 'data'")
    return data


def detect_booking_type(data: Any) -> str:
    if _present(get_path(data, "event")):
        return EVENT
    if _present(get_path(data, "appointment")):
        return SERVICE
    raise BookingPayloadError(
        "Invalid payload: neither data.event nor data.appointment found"
    )


def _required(data: Any, path: str, note: str = "") -> str:
    value = string_or_none(get_path(data, path))
    if value is None:
        raise BookingPayloadError(f"Invalid payload: missing data.{path}{note}")
    return value


def extract_item_fields(data: Any, booking_type: str, default_tz: str) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for name, path in _ITEM_PATHS[booking_type].items():
        fields[name] = string_or_none(get_path(data, path)) if path else None
    fields["timezone"] = fields["timezone"] or default_tz
    return fields


def extract_booking(payload: Any, default_tz: str) -> dict[str, Any]:
    """Validate ``payload`` and return its flat booking fields.

    Derived fields (token, links, pretty date) are added later by the
    assembler; this only reads what the payload carries.
    """
    data = get_data(payload)
    booking_type = detect_booking_type(data)
    booking_id = _required(data, "booking.id")
    customer_email = _required(data, "customer.email", " (needed for qrToken)")

    out: dict[str, Any] = {
        "bookingId": booking_id,
        "bookingStatus": string_or_none(get_path(data, "booking.status")),
        "paymentStatus": string_or_none(get_path(data, "payment.status")),
        "customerFullName": full_name(
            get_path(data, "customer.firstName"),
            get_path(data, "customer.lastName"),
        ),
        "customerEmail": customer_email,
        "customerPhone": string_or_none(get_path(data, "customer.phone")),
        "type": booking_type,
    }
    out.update(extract_item_fields(data, booking_type, default_tz))
    out["totalAmount"] = coerce_amount(get_path(data, "payment.amount"))
    out["currency"] = string_or_none(get_path(data, "payment.currency"))
    return out
