from __future__ import annotations
from typing import List, Optional
import os, sqlite3, threading
from sshca_core.errors import StorageError
from sshca_core.storage.provider import StorageProvider
from sshca_core.storage.models import StorageEntry


class SQLiteStorage(StorageProvider):
    def __init__(self, path="db/sshca_state.db"):
        # If no directory, default to current working directory
        dir_path = os.path.dirname(path) or "."
        os.makedirs(dir_path, exist_ok=True)
        self.db = sqlite3.connect(path, check_same_thread=False)
        # one connection shared by every request thread
        self._lock = threading.Lock()

        self._init()

    def _init(self) -> None:
        with self._lock:
            self.db.execute("""CREATE TABLE IF NOT EXISTS entries(
                key TEXT PRIMARY KEY,
                value BLOB NOT NULL
            )""")
            self.db.commit()

    def put(self, entry: StorageEntry) -> None:
        try:
            with self._lock:
                self.db.execute(
                    "INSERT INTO entries(key,value) VALUES(?,?) "
                    "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
                    (entry.key, sqlite3.Binary(entry.value))
                )
                self.db.commit()
        except sqlite3.Error as e:
            raise StorageError(f"failed to put {entry.key!r}: {e}") from e

    def get(self, key: str) -> Optional[StorageEntry]:
        try:
            with self._lock:
                row = self.db.execute("SELECT value FROM entries WHERE key=?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"failed to get {key!r}: {e}") from e
        if not row: return None
        return StorageEntry(key=key, value=bytes(row[0]))

    def delete(self, key: str) -> None:
        try:
            with self._lock:
                self.db.execute("DELETE FROM entries WHERE key=?", (key,))
                self.db.commit()
        except sqlite3.Error as e:
            raise StorageError(f"failed to delete {key!r}: {e}") from e

    def list(self, prefix: str = "") -> List[str]:
        try:
            with self._lock:
                cur = self.db.execute(
                    "SELECT key FROM entries WHERE substr(key, 1, ?) = ? ORDER BY key",
                    (len(prefix), prefix)
                )
                return [r[0] for r in cur.fetchall()]
        except sqlite3.Error as e:
            raise StorageError(f"failed to list {prefix!r}: {e}") from e

    def close(self):
        self.db.close()
