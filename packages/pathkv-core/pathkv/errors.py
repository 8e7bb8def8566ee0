"""
pathkv Errors.

All exceptions raised by pathkv derive from PathKVError.
"""


class PathKVError(Exception):
    """Base class for pathkv errors."""
    pass


class UnsupportedValueError(PathKVError, TypeError):
    """Raised by ``set`` when a value cannot be stored (e.g. a function)."""
    pass


class StoreError(PathKVError):
    """A backend could not read or parse its persisted data."""
    pass


class ConfigError(PathKVError, ValueError):
    """Invalid pathkv configuration."""
    pass
