"""Scalar normalization helpers shared by the booking extractors.

Text and number handling follows JSON/JavaScript conventions, since payloads
come from JS webhook producers: ``50.0`` prints as ``50``, ``1e21`` as
``1e+21`` and ``"0x10"`` parses as 16.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .utils import canonical_json

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY_RE = re.compile(r"[+-]?Infinity")


def js_number_text(v: float) -> str:
    """Render a float the way JavaScript ``String(number)`` does."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == 0:
        return "0"
    sign = "-" if v < 0 else ""
    # repr gives the shortest round-tripping digits
    _, digit_tuple, exponent = Decimal(repr(abs(v))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = exponent + k
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def _as_text(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float):
        return js_number_text(v)
    if isinstance(v, (Mapping, list, tuple)):
        return canonical_json(v).decode("utf-8")
    return str(v)


def string_or_none(v: Any) -> str | None:
    """Stringify and trim ``v``; None or blank yields None."""
    if v is None:
        return None
    text = _as_text(v).strip()
    return text or None


def full_name(first: Any, last: Any) -> str | None:
    name = f"{string_or_none(first) or ''} {string_or_none(last) or ''}".strip()
    return name or None


def parse_number(text: str) -> int | float | None:
    """Parse numeric text with JavaScript ``Number()`` rules, None if rejected.

    Decimal and exponent forms give floats; ``0x``/``0o``/``0b`` literals
    (unsigned) give ints. Digit separators and non-ASCII digits are rejected.
    """
    text = text.strip()
    if _RADIX_RE.fullmatch(text):
        return int(text, 0)
    if _DECIMAL_RE.fullmatch(text) or _INFINITY_RE.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    return None


def coerce_amount(raw: Any) -> int | float | None:
    """Return a finite number for a payment amount, else None.

    Real numbers pass through, numeric strings go through ``parse_number``.
    Booleans and any other type are not amounts.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value: int | float | None = raw
    else:
        if not isinstance(raw, str):
            return None
        text = string_or_none(raw)
        if text is None:
            return None
        value = parse_number(text)
    if value is None:
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
