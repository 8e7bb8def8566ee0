"""
PathResolvingStore - structured values over a flat string map.

    store = PathResolvingStore(FileStringStore())
    store.set("user", {"addresses": [{"city": "Lisbon"}]})
    store.get("user.addresses.0.city")   # -> "Lisbon"

Only ``get`` interprets dots. ``set``, ``remove`` and ``clear`` treat the key
as an opaque root key.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .codec import decode_value, encode_value, loads
from .persistence.interfaces import StringStore
from .resolver import PATH_SEPARATOR, resolve_path, split_path

logger = logging.getLogger(__name__)


class PathResolvingStore:
    """
    Accessor over a StringStore with dotted-path reads.

    Args:
        backend: The underlying string map
        strict_presence: When True, falsy members (0, "", False, None) found
            along a path are returned instead of collapsing to None
    """

    def __init__(self, backend: StringStore, strict_presence: bool = False):
        self.backend = backend
        self.strict_presence = strict_presence

    def set(self, key: str, value: Any) -> None:
        """
        Store a value under key.

        Raises:
            UnsupportedValueError: if value is a function or cannot be encoded
        """
        raw = encode_value(value)
        self.backend.set_item(key, raw)
        logger.debug(f"set '{key}' ({len(raw)} chars)")

    def get(self, key: str) -> Optional[Any]:
        """
        Return the value at key, or None.

        A dotted key (``root.field.0``) reads the value stored at ``root`` and
        walks into it.
        """
        if PATH_SEPARATOR in key:
            return self._get_nested(key)

        raw = self.backend.get_item(key)
        if raw is None:
            return None
        return decode_value(raw)

    def _get_nested(self, key: str) -> Optional[Any]:
        root, segments = split_path(key)
        if not root:
            return None

        raw = self.backend.get_item(root)
        if raw is None:
            return None

        try:
            value = loads(raw)
        except ValueError:
            logger.debug(f"'{root}' does not hold a structured value, cannot resolve '{key}'")
            return None

        return resolve_path(value, segments, strict_presence=self.strict_presence)

    def remove(self, key: str) -> None:
        """Delete the entry at key. No-op if absent."""
        self.backend.remove_item(key)
        logger.debug(f"removed '{key}'")

    def clear(self) -> None:
        """Delete every entry in the underlying store."""
        self.backend.clear()
        logger.debug("cleared store")
