"""
pathkv Persistence - the string-only map interface and its implementations.

Pure Python, no external dependencies.
"""
from .interfaces import StringStore
from .memory_store import InMemoryStringStore
from .fs_store import FileStringStore, get_pathkv_home
from .sqlite_store import SQLiteStringStore

__all__ = [
    # Interfaces
    "StringStore",
    # Implementations
    "InMemoryStringStore",
    "FileStringStore",
    "SQLiteStringStore",
    # Utils
    "get_pathkv_home",
]
