"""In-memory StringStore, for tests and throwaway sessions."""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from .interfaces import StringStore


class InMemoryStringStore(StringStore):
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> List[str]:
        return sorted(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def snapshot(self) -> Dict[str, str]:
        """Copy of the raw stored strings."""
        return dict(self._data)
