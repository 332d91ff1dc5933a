"""Normalization helpers for raw decoded packet fields.

Centralizes tolerant reading of ctypes packet structures so the decoder
can stay a flat field-to-field mapping.
"""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Any


def field(obj: Any, name: str, default: Any = None) -> Any:
    """Read attribute *name* from a raw packet structure, with a default."""
    return getattr(obj, name, default)


def safe_int(value: Any, default: int = 0) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_float(value: Any, default: float = 0.0) -> float:
    if value is None:
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result):
        return default
    return result


def decode_name(value: Any) -> str:
    """Decode a NUL-padded UTF-8 name field."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.split("\x00", 1)[0].strip()
    raw = bytes(value).split(b"\x00", 1)[0]
    return raw.decode("utf-8", errors="replace").strip()


def decode_event_code(value: Any) -> str:
    """Decode the four-character event string code (e.g. ``"SPTP"``)."""
    if isinstance(value, str):
        return value[:4]
    try:
        raw = bytes(value)
    except TypeError:
        return ""
    return raw[:4].decode("ascii", errors="replace")


def seconds(value: Any) -> timedelta:
    """Lap times are sent as float seconds."""
    return timedelta(seconds=max(safe_float(value), 0.0))


def milliseconds(value: Any) -> timedelta:
    """Sector times are sent as integer milliseconds."""
    return timedelta(milliseconds=max(safe_int(value), 0))
