from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

"""Safe dotted-path lookup into decoded JSON payloads.

  get_path({"data": {"booking": {"id": "b1"}}}, "data.booking.id")  -> "b1"
  get_path({"data": {}}, "data.booking.id", "n/a")                  -> "n/a"

Lists are walked with numeric segments ("items.0.name"). A key that is
present but holds None resolves to the fallback, same as an absent key.
"""

_MISSING = object()


def _step(cur: Any, segment: str) -> Any:
    if isinstance(cur, Mapping):
        return cur[segment] if segment in cur else _MISSING
    if isinstance(cur, Sequence) and not isinstance(cur, (str, bytes, bytearray)):
        if segment.isdigit() and int(segment) < len(cur):
            return cur[int(segment)]
    return _MISSING


def get_path(obj: Any, path: str, fallback: Any = None) -> Any:
    """Resolve ``path`` inside ``obj``; never raises."""
    cur = obj
    for segment in path.split("."):
        cur = _step(cur, segment)
        if cur is _MISSING:
            return fallback
    return fallback if cur is None else cur
