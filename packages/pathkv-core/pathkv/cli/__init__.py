"""
pathkv CLI - command-line access to a configured store.

- pathkv get <key> - Print a value (dotted paths allowed)
- pathkv set <key> <value> [--json] - Store a value
- pathkv remove <key> - Delete a key
- pathkv clear - Delete every key
- pathkv keys - List stored keys
"""

from .main import cli

__all__ = ["cli"]
