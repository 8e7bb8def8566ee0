"""
pathkv - structured values and dotted-path reads over a string key-value store.
"""
from .errors import ConfigError, PathKVError, StoreError, UnsupportedValueError
from .persistence import (
    FileStringStore,
    InMemoryStringStore,
    SQLiteStringStore,
    StringStore,
)
from .store import PathResolvingStore

__version__ = "0.1.0"

__all__ = [
    "PathResolvingStore",
    "StringStore",
    "InMemoryStringStore",
    "FileStringStore",
    "SQLiteStringStore",
    "PathKVError",
    "UnsupportedValueError",
    "StoreError",
    "ConfigError",
]
