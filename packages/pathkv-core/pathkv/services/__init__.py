from .config_service import (
    PathKVSettings,
    ResolverSettings,
    StoreSettings,
    clear_config_cache,
    load_config,
    load_settings,
)
from .store_factory import create_backend, open_store

__all__ = [
    "PathKVSettings",
    "ResolverSettings",
    "StoreSettings",
    "clear_config_cache",
    "load_config",
    "load_settings",
    "create_backend",
    "open_store",
]
