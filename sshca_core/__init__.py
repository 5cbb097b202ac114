"""
sshca_core
==========
CA configuration for an SSH certificate-signing backend.

Provides:
- config/ca path: accept or generate the CA signing key pair
- RSA generation and SSH key parsing on top of `cryptography`
- Pluggable key/value storage (SQLite default, in-memory for tests)
"""

from .backend import SSHBackend
from .framework import Operation, Request, Response

__all__ = ["SSHBackend", "Operation", "Request", "Response"]
