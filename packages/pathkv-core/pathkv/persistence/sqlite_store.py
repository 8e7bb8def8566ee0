"""
SQLite StringStore.

One row per key in a single table. SQLite is stdlib and the database file
survives restarts like the JSON file store does.
"""
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional

from .fs_store import get_pathkv_home
from .interfaces import StringStore

logger = logging.getLogger(__name__)

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS kv_entries (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class SQLiteStringStore(StringStore):
    """
    SQLite-backed string store.

    The connection is opened on first use; call ``close()`` (or use the store
    as a context manager) when done.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Args:
            db_path: Path to SQLite database file.
                     Defaults to PATHKV_HOME/store.db
        """
        if db_path is None:
            db_path = get_pathkv_home() / "store.db"
        self.db_path = Path(db_path).expanduser()
        self._conn: Optional[sqlite3.Connection] = None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.execute(_CREATE_TABLE)
            self._conn.commit()
            logger.info("SQLite store connected to %s", self.db_path)
        return self._conn

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "SQLiteStringStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_item(self, key: str) -> Optional[str]:
        cur = self._connection().execute("SELECT value FROM kv_entries WHERE key=?", (key,))
        row = cur.fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        conn = self._connection()
        conn.execute("INSERT OR REPLACE INTO kv_entries (key, value) VALUES (?, ?)", (key, value))
        conn.commit()

    def remove_item(self, key: str) -> None:
        conn = self._connection()
        conn.execute("DELETE FROM kv_entries WHERE key=?", (key,))
        conn.commit()

    def clear(self) -> None:
        conn = self._connection()
        conn.execute("DELETE FROM kv_entries")
        conn.commit()

    def keys(self) -> List[str]:
        cur = self._connection().execute("SELECT key FROM kv_entries ORDER BY key")
        return [row[0] for row in cur.fetchall()]
