"""Central logging configuration utilities.

Loggers print one line per record, either as text or as compact JSON when
BOOKING_LOG_JSON is truthy. Booking context passed through ``extra=`` (see
``booking_context``) is appended to JSON lines as top-level fields, so log
pipelines can filter on booking id without parsing the message.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any

_JSON_ENV_VALUES = {"1", "true", "yes", "on"}
CONTEXT_FIELDS = ("booking_id", "booking_type", "idempotency_key")


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                base[field] = value
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, separators=(",", ":"), ensure_ascii=False)


def booking_context(booking_id: str | None = None, booking_type: str | None = None,
                    idempotency_key: str | None = None) -> dict[str, Any]:
    """Build an ``extra=`` mapping for booking-scoped log lines."""
    return {
        "booking_id": booking_id,
        "booking_type": booking_type,
        "idempotency_key": idempotency_key,
    }


def get_logger(name: str, level_env: str | None = None, default_level: str = "INFO") -> logging.Logger:
    """Return a logger configured once.

    Parameters:
      name: logger name
      level_env: optional env var name containing a logging level
      default_level: fallback level if env unset or invalid
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        if os.getenv("BOOKING_LOG_JSON", "false").lower() in _JSON_ENV_VALUES:
            handler.setFormatter(_JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        logger.addHandler(handler)
    if level_env:
        lvl_str = os.getenv(level_env, default_level).upper()
    else:
        lvl_str = default_level.upper()
    logger.setLevel(getattr(logging, lvl_str, logging.INFO))
    return logger
