from typing import List, Optional
from sshca_core.storage.models import StorageEntry
from sshca_core.storage.provider import StorageProvider


class InMemoryStorage(StorageProvider):
    def __init__(self):
        self.entries = {}

    def put(self, entry: StorageEntry):
        self.entries[entry.key] = bytes(entry.value)

    def get(self, key: str) -> Optional[StorageEntry]:
        value = self.entries.get(key)
        if value is None:
            return None
        return StorageEntry(key=key, value=value)

    def delete(self, key: str):
        self.entries.pop(key, None)

    def list(self, prefix: str = "") -> List[str]:
        return sorted(k for k in self.entries if k.startswith(prefix))
