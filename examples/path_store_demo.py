"""
PathResolvingStore Demo — structured values and dotted-path reads.

Usage (in-memory, nothing persisted):
    python examples/path_store_demo.py

Usage (JSON file store in a throwaway directory):
    python examples/path_store_demo.py --file
"""
from __future__ import annotations

import sys
import tempfile
from pathlib import Path

from pathkv import FileStringStore, InMemoryStringStore, PathResolvingStore, StringStore


def run_demo(backend: StringStore):
    store = PathResolvingStore(backend)

    print("\n--- Storing values ---")
    store.set("user", {
        "name": "Ada",
        "addresses": [{"city": "London"}, {"city": "Paris"}],
        "visits": 0,
    })
    store.set("theme", "dark")
    for key in backend.keys():
        print(f"  {key} = {backend.get_item(key)}")

    print("\n--- Reading paths ---")
    for key in ("user.name", "user.addresses.1.city", "user.addresses.5.city", "user.visits", "theme"):
        print(f"  {key:<24} -> {store.get(key)!r}")

    strict = PathResolvingStore(backend, strict_presence=True)
    print(f"  {'user.visits (strict)':<24} -> {strict.get('user.visits')!r}")

    store.clear()
    print(f"\nCleared. Remaining keys: {backend.keys()}")


def main(use_file: bool = False):
    if not use_file:
        print("Using InMemoryStringStore (in-process, no persistence)")
        run_demo(InMemoryStringStore())
        return

    # Never touch the user's PATHKV_HOME store.
    with tempfile.TemporaryDirectory() as tmp:
        backend = FileStringStore(Path(tmp) / "store.json")
        print(f"Using FileStringStore ({backend.path})")
        run_demo(backend)


if __name__ == "__main__":
    main(use_file="--file" in sys.argv)
