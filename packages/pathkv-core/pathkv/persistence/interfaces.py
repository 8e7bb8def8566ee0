"""
pathkv Persistence Interfaces.

Abstract base class for the flat string-to-string map that PathResolvingStore
wraps.
"""
from abc import ABC, abstractmethod
from typing import List, Optional


class StringStore(ABC):
    """Interface for a persistent string-keyed map of string values."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Get the raw string at key, or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Write a string under key, overwriting any existing entry."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete the entry at key. No-op if absent."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Delete every entry."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """List all keys (sorted)."""
        pass
