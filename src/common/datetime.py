"""Datetime utilities."""

from datetime import datetime, timezone
from typing import Any

# Epoch values above this are treated as milliseconds.
_EPOCH_MS_THRESHOLD = 100_000_000_000


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_datetime(value: Any) -> datetime:
    """Normalize a stored timestamp to an aware UTC datetime.

    Accepts datetimes (naive ones are assumed UTC), ISO strings (with or
    without a ``Z`` suffix), epoch seconds or milliseconds, and timestamp
    objects exposing ``to_datetime()``. ``None`` maps to the current time.
    """
    if value is None:
        return utcnow()
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert {value!r} to datetime")
    if isinstance(value, (int, float)):
        seconds = value / 1000 if value > _EPOCH_MS_THRESHOLD else value
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    if isinstance(value, str):
        return parse_datetime(datetime.fromisoformat(value.replace("Z", "+00:00")))
    to_datetime = getattr(value, "to_datetime", None)
    if callable(to_datetime):
        return parse_datetime(to_datetime())
    raise TypeError(f"Cannot convert {value!r} to datetime")


def parse_optional_datetime(value: Any) -> datetime | None:
    """Like parse_datetime, but keeps ``None`` as ``None``."""
    if value is None:
        return None
    return parse_datetime(value)
