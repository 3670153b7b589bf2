"""Human readable ("fecha bonita") rendering of booking start times.

  format_fecha_bonita("2026-01-10T09:00:00Z", "Europe/Madrid")
      -> "sábado, 10 de enero · 10:00"

Formatting never raises: missing, unparseable or unrenderable input yields None.
"""
from __future__ import annotations

import datetime
import functools
import re
from typing import Protocol
from zoneinfo import ZoneInfo

from babel import Locale
from babel.dates import format_datetime, match_skeleton

from .config import DEFAULT_DATE_LOCALE, DEFAULT_TIMEZONE
from .logging_config import get_logger

SEPARATOR = " · "
DATE_SKELETON = "MMMMEd"
FALLBACK_DATE_PATTERN = "EEEE, d MMMM"
TIME_PATTERN = "HH:mm"

_log = get_logger("booking.dates", level_env="BOOKING_LOG_LEVEL")


@functools.lru_cache(maxsize=32)
def date_pattern(locale: str) -> str:
    """Locale pattern for weekday, day and month, with full-width weekday names.

    CLDR only ships an abbreviated-weekday skeleton (es: "E, d 'de' MMMM"),
    so weekday and text-month fields outside quoted literals are widened to
    their long form.
    """
    loc = Locale.parse(locale)
    skeletons = loc.datetime_skeletons
    key = DATE_SKELETON if DATE_SKELETON in skeletons else match_skeleton(DATE_SKELETON, skeletons)
    if not key:
        return FALLBACK_DATE_PATTERN
    parts = skeletons[key].pattern.split("'")
    # even chunks are pattern text, odd chunks are quoted literals
    for i in range(0, len(parts), 2):
        chunk = re.sub(r"E+", "EEEE", parts[i])
        chunk = re.sub(r"c+", "cccc", chunk)
        parts[i] = re.sub(r"([ML])\1{2,}", r"\1\1\1\1", chunk)
    return "'".join(parts)


class DateFormatter(Protocol):
    def format_date(self, instant: datetime.datetime, zone: str, locale: str) -> str: ...


class BabelDateFormatter:
    """CLDR-backed formatter: long weekday, day, long month, then 24h time."""

    def format_date(self, instant: datetime.datetime, zone: str, locale: str) -> str:
        local = instant.astimezone(ZoneInfo(zone))
        date_part = format_datetime(local, date_pattern(locale), locale=locale)
        time_part = format_datetime(local, TIME_PATTERN, locale=locale)
        return f"{date_part}{SEPARATOR}{time_part}"


_default_formatter = BabelDateFormatter()


def parse_instant(value: str, zone: str) -> datetime.datetime | None:
    """Parse an ISO-8601 timestamp.

    Date-only values are UTC midnight. Naive date-times are read in ``zone``.
    """
    text = value.strip()
    try:
        day = datetime.date.fromisoformat(text)
    except ValueError:
        pass
    else:
        return datetime.datetime(day.year, day.month, day.day, tzinfo=datetime.UTC)
    try:
        parsed = datetime.datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=ZoneInfo(zone))
    return parsed


def format_fecha_bonita(
    iso_string: str | None,
    time_zone: str | None = None,
    *,
    formatter: DateFormatter | None = None,
    locale: str = DEFAULT_DATE_LOCALE,
    default_tz: str = DEFAULT_TIMEZONE,
) -> str | None:
    if not iso_string:
        return None
    zone = time_zone or default_tz
    try:
        instant = parse_instant(iso_string, zone)
        if instant is None:
            _log.warning(f"unparseable startAt={iso_string!r}")
            return None
        return (formatter or _default_formatter).format_date(instant, zone, locale)
    except Exception as e:
        _log.warning(f"fecha_bonita failed tz={zone} locale={locale} error={e}")
        return None
