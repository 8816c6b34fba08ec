"""Conversion between stored documents and content records."""

import logging
from dataclasses import MISSING, fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional, TypeVar, Union, get_args, get_origin, get_type_hints

from common.datetime import parse_datetime, parse_optional_datetime
from document_store.store import Document

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _unwrap_optional(hint: Any) -> tuple[Any, bool]:
    if get_origin(hint) is Union:
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0], True
    return hint, False


def _coerce(hint: Any, value: Any) -> Any:
    target, optional = _unwrap_optional(hint)
    if value is None and optional:
        return None
    if target is datetime:
        return parse_optional_datetime(value) if optional else parse_datetime(value)
    if isinstance(target, type) and issubclass(target, Enum):
        return target(value)
    if get_origin(target) is list:
        item_type = (get_args(target) or (Any,))[0]
        if is_dataclass(item_type):
            return [
                item if isinstance(item, item_type) else _from_dict(item_type, item)
                for item in value or []
            ]
        return list(value or [])
    if target in (int, float) and isinstance(value, (int, float)) and not isinstance(value, bool):
        return target(value)
    return value


def _empty(hint: Any) -> Any:
    """Placeholder for a required field missing from a stored document."""
    target, _ = _unwrap_optional(hint)
    if target is datetime:
        return parse_datetime(None)
    if isinstance(target, type) and issubclass(target, Enum):
        return next(iter(target))
    if target is int:
        return 0
    return ""


def _from_dict(cls: type[R], data: dict, extra: Optional[dict] = None) -> R:
    hints = get_type_hints(cls)
    kwargs: dict[str, Any] = dict(extra or {})
    for f in fields(cls):
        if f.name in kwargs:
            continue
        required = f.default is MISSING and f.default_factory is MISSING
        value = data.get(f.name)
        if value is None:
            if required:
                kwargs[f.name] = _empty(hints[f.name])
            continue
        try:
            kwargs[f.name] = _coerce(hints[f.name], value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid %s.%s value: %r", cls.__name__, f.name, value)
            if required:
                kwargs[f.name] = _empty(hints[f.name])
    return cls(**kwargs)


def document_to_record(cls: type[R], doc: Document) -> R:
    """Build a record of type ``cls`` from a stored document.

    Unknown keys are ignored, missing keys take the record's defaults and
    timestamp fields are normalized to aware UTC datetimes.
    """
    if any(f.name == "id" for f in fields(cls)):
        return _from_dict(cls, doc.data, extra={"id": doc.id})
    return _from_dict(cls, doc.data)

