# sshca_core/errors.py
"""
sshca_core.errors
-----------------
Error kinds raised by the CA configuration path.

ValidationError is user-facing and is turned into an error response by the
path handler. Everything else is internal and propagates to the caller.
"""


class SSHCAError(Exception):
    pass


class ValidationError(SSHCAError):
    """Contradictory or unparseable input. Storage is never touched."""


class GenerationError(SSHCAError):
    """RSA generation or public key derivation failed."""


class StorageError(SSHCAError):
    """A storage provider failed to read or write an entry."""


class InvariantError(SSHCAError):
    """Resolution produced an empty half of the key pair."""
