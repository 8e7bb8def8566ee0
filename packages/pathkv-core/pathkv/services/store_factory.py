"""Build stores from settings."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..persistence import FileStringStore, InMemoryStringStore, SQLiteStringStore, StringStore
from ..store import PathResolvingStore
from .config_service import PathKVSettings, StoreSettings, load_settings

logger = logging.getLogger(__name__)


def create_backend(settings: StoreSettings) -> StringStore:
    """Instantiate the StringStore named by ``settings.backend``."""
    path = Path(settings.path) if settings.path else None
    if settings.backend == "memory":
        return InMemoryStringStore()
    if settings.backend == "sqlite":
        return SQLiteStringStore(path)
    return FileStringStore(path)


def open_store(
    settings: Optional[PathKVSettings] = None,
    config_path: Optional[str] = None,
) -> PathResolvingStore:
    """
    Create a PathResolvingStore.

    Args:
        settings: Explicit settings. Loaded from config when omitted.
        config_path: Config file to load settings from
    """
    if settings is None:
        settings = load_settings(config_path)
    backend = create_backend(settings.store)
    logger.info(f"Opened {settings.store.backend} store")
    return PathResolvingStore(backend, strict_presence=settings.resolver.strict_presence)
