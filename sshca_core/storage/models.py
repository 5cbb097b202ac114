# sshca_core/storage/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict
import json


@dataclass
class StorageEntry:
    """
    A single opaque key/value record.

    Providers never look inside value; structured records are JSON
    encoded by storage_entry_json() and read back with decode_json().
    """
    key: str
    value: bytes = b""

    def decode_json(self) -> Any:
        return json.loads(self.value.decode("utf-8"))


def storage_entry_json(key: str, obj: Any) -> StorageEntry:
    if hasattr(obj, "to_dict"):
        obj = obj.to_dict()
    return StorageEntry(key=key, value=json.dumps(obj).encode("utf-8"))


@dataclass
class SigningBundle:
    """
    Persisted CA bundle. The field is named Certificate on disk for
    compatibility with existing stores; it holds the CA private key PEM.
    """
    certificate: str

    def to_dict(self) -> Dict[str, Any]:
        return {"Certificate": self.certificate}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SigningBundle":
        return cls(certificate=data.get("Certificate", ""))

    def __repr__(self) -> str:
        return "SigningBundle(certificate=<redacted>)"
