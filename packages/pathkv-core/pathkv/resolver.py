"""
Path resolver - walks a dotted key into a decoded value.

    "user.addresses.0.city"  ->  root "user", segments ["addresses", "0", "city"]

Digit-only segments are indices into sequences; anything else is a field name.
By default a member that is missing *or* falsy (0, "", False, None) ends the
walk with None. ``strict_presence=True`` switches to explicit membership and
bounds checks so falsy members are returned as stored.
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional, Tuple

PATH_SEPARATOR = "."

_INDEX_RE = re.compile(r"[0-9]+")

_MISSING = object()


def split_path(key: str) -> Tuple[str, List[str]]:
    """Split a key into its root key and the remaining path segments."""
    root, *segments = key.split(PATH_SEPARATOR)
    return root, segments


def is_index(segment: str) -> bool:
    """True if the segment addresses a sequence element."""
    return _INDEX_RE.fullmatch(segment) is not None


def _is_falsy(value: Any) -> bool:
    # Empty containers count as present.
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False


def lookup(current: Any, segment: str) -> Any:
    """Return the member named by ``segment`` or the _MISSING sentinel."""
    if is_index(segment):
        index = int(segment)
        if isinstance(current, Sequence) and not isinstance(current, str):
            return current[index] if index < len(current) else _MISSING
        if isinstance(current, Mapping):
            # Mapping keys are text; "01" addresses the same member as "1".
            return current.get(str(index), _MISSING)
        return _MISSING

    if isinstance(current, Mapping):
        return current.get(segment, _MISSING)
    return _MISSING


def resolve_path(value: Any, segments: List[str], strict_presence: bool = False) -> Optional[Any]:
    """
    Walk ``segments`` into ``value``.

    Args:
        value: Decoded root value
        segments: Path segments after the root key
        strict_presence: Treat falsy members as present

    Returns:
        The nested value, or None when the path does not resolve
    """
    current = value
    for segment in segments:
        member = lookup(current, segment)
        if member is _MISSING or (not strict_presence and _is_falsy(member)):
            return None
        current = member
    return current
