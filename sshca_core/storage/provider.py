# sshca_core/storage/provider.py
from __future__ import annotations
from typing import List, Optional
from sshca_core.storage.models import StorageEntry


class StorageProvider:
    # Interface
    def put(self, entry: StorageEntry) -> None: ...
    def get(self, key: str) -> Optional[StorageEntry]: ...
    def delete(self, key: str) -> None: ...
    def list(self, prefix: str = "") -> List[str]: ...
