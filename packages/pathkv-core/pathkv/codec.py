"""
Value codec - how values become strings in a string-only store.

Structured values (mappings, sequences, pydantic models) are stored as compact
JSON. Primitives are stored as their literal text, so a plain string is kept
untouched and reads back as itself unless it happens to be valid JSON
(``"123"`` reads back as ``123``).
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .errors import UnsupportedValueError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant: {name}")


def is_structured(value: Any) -> bool:
    """True for values that are stored as JSON documents."""
    return isinstance(value, (Mapping, list, tuple, BaseModel))


def encode_value(value: Any) -> str:
    """
    Convert a value to the string written to the store.

    Raises:
        UnsupportedValueError: for functions and values with no JSON form
    """
    if callable(value):
        raise UnsupportedValueError("Invalid value type, cannot store a function.")

    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")

    if is_structured(value):
        if isinstance(value, Mapping):
            value = dict(value)
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise UnsupportedValueError(f"Cannot encode structured value: {e}") from e

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    # Builtin text forms, so str/int Enum mixins store their value, not "Color.RED".
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return float.__repr__(value)

    raise UnsupportedValueError(f"Unsupported value type: {type(value).__name__}")


def loads(raw: str) -> Any:
    """Strict JSON decode. Raises ValueError on invalid text."""
    return json.loads(raw, parse_constant=_reject_constant)


def decode_value(raw: str) -> Any:
    """Decode a stored string, falling back to the raw string when it is not JSON."""
    try:
        return loads(raw)
    except ValueError:
        return raw
