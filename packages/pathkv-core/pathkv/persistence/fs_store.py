"""
pathkv Filesystem Storage.

The whole map is a single JSON object file, rewritten atomically on every
mutation.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import StoreError
from .interfaces import StringStore

logger = logging.getLogger(__name__)


def get_pathkv_home() -> Path:
    """
    Get pathkv home directory.

    Uses PATHKV_HOME env var or defaults to ~/.pathkv
    """
    home = os.environ.get("PATHKV_HOME")
    if home:
        return Path(home).expanduser()
    return Path.home() / ".pathkv"


class FileStringStore(StringStore):
    """
    Filesystem-based string store.

    Stores all entries in {path} (default: PATHKV_HOME/store.json) as one JSON
    object of string values.
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            path: JSON file path (default: PATHKV_HOME/store.json)
        """
        if path is None:
            path = get_pathkv_home() / "store.json"
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except ValueError as e:
            raise StoreError(f"Corrupt store file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Store file {self.path} root is not an object")
        for key, value in data.items():
            if not isinstance(value, str):
                raise StoreError(f"Store file {self.path} has non-string value at '{key}'")
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)
        os.replace(tmp, self.path)
        logger.debug(f"Wrote {len(data)} entries to {self.path}")

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        if self.path.exists():
            self._write({})

    def keys(self) -> List[str]:
        return sorted(self._read())
