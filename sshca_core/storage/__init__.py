# sshca_core/storage/__init__.py

from __future__ import annotations
from typing import Callable, Dict, Optional

from sshca_core.config import Settings, get_settings

from .models import StorageEntry, SigningBundle, storage_entry_json
from .provider import StorageProvider
from .providers.memory_provider import InMemoryStorage
from .providers.sqlite_provider import SQLiteStorage


def _sqlite(settings: Settings) -> StorageProvider:
    return SQLiteStorage(settings.SSHCA_DB_PATH)


def _memory(settings: Settings) -> StorageProvider:
    return InMemoryStorage()


PROVIDERS: Dict[str, Callable[[Settings], StorageProvider]] = {
    "sqlite": _sqlite,
    "memory": _memory,
}


def load_storage_provider(settings: Optional[Settings] = None) -> StorageProvider:
    """Build the provider named by settings.SSHCA_STORAGE_PROVIDER."""
    settings = settings or get_settings()
    name = settings.SSHCA_STORAGE_PROVIDER.strip().lower()
    try:
        build = PROVIDERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown storage provider: {name!r} (expected one of {', '.join(sorted(PROVIDERS))})"
        ) from None
    return build(settings)


__all__ = [
    "StorageEntry",
    "SigningBundle",
    "storage_entry_json",
    "StorageProvider",
    "InMemoryStorage",
    "SQLiteStorage",
    "PROVIDERS",
    "load_storage_provider",
]
