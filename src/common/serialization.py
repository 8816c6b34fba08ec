"""Serialization utilities."""

from dataclasses import asdict, fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any


def _convert(value: Any, datetimes_to_iso: bool) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat() if datetimes_to_iso else value
    if isinstance(value, dict):
        return {k: _convert(v, datetimes_to_iso) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_convert(v, datetimes_to_iso) for v in value]
    return value


def serialize_dataclass(obj) -> dict:
    """Serialize a dataclass to dict, converting datetimes to ISO strings."""
    return {k: _convert(v, True) for k, v in asdict(obj).items()}


def to_document(obj, exclude: tuple[str, ...] = ("id",)) -> dict:
    """Convert a dataclass record into a document body.

    Enums become their values and datetimes are kept as datetimes, which
    every document store backend knows how to persist.
    """
    if not is_dataclass(obj):
        raise TypeError(f"Expected a dataclass instance, got {type(obj).__name__}")
    return {
        f.name: _convert(getattr(obj, f.name), False)
        for f in fields(obj)
        if f.name not in exclude
    }
