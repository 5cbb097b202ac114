# sshca_core/path_config_ca.py
"""
config/ca: establishes the CA signing key pair.

UPDATE only. The private key is write-only; there is no read callback.
On success two entries are written, in order:

  public_key        raw authorized-keys line
  config/ca_bundle  {"Certificate": "<private key PEM>"}

The writes are not atomic. A failure on the second put leaves the new
public key next to the previous bundle.
"""

from __future__ import annotations
from functools import partial
from typing import Callable, Optional, Tuple

from . import constants as C
from .crypto import generate_ssh_keypair, ssh_fingerprint
from .errors import ValidationError
from .framework import Operation, Path, Request, Response, error_response
from .logger import get_logger
from .resolver import Outcome, ResolvedKeyPair, materialize, resolve
from .schemas import ConfigCARequest
from .storage import SigningBundle, StorageEntry, StorageProvider, storage_entry_json

log = get_logger("sshca.config_ca")

KeyPairGenerator = Callable[[], Tuple[str, str]]


def path_config_ca(generator: KeyPairGenerator = generate_ssh_keypair) -> Path:
    return Path(
        pattern="config/ca",
        schema=ConfigCARequest,
        callbacks={
            Operation.UPDATE: partial(path_ca_write, generator=generator),
        },
        help_synopsis=C.CONFIG_CA_SYNOPSIS,
        help_description=C.CONFIG_CA_DESCRIPTION,
    )


def persist_key_pair(storage: StorageProvider, pair: ResolvedKeyPair) -> None:
    """Public key first, then the bundle. Storage errors propagate as-is."""
    log.debug(f"[CONFIG CA] put {C.PUBLIC_KEY_STORAGE_KEY}")
    storage.put(StorageEntry(key=C.PUBLIC_KEY_STORAGE_KEY, value=pair.public_key.encode("utf-8")))

    entry = storage_entry_json(C.CA_BUNDLE_STORAGE_KEY, SigningBundle(certificate=pair.private_key))
    log.debug(f"[CONFIG CA] put {C.CA_BUNDLE_STORAGE_KEY}")
    storage.put(entry)


def path_ca_write(
    req: Request,
    body: ConfigCARequest,
    generator: KeyPairGenerator = generate_ssh_keypair,
) -> Optional[Response]:
    try:
        resolution = resolve(
            body.public_key,
            body.private_key,
            body.flag_set(C.FIELD_GENERATE_SIGNING_KEY),
        )
    except ValidationError as e:
        log.info(f"[CONFIG CA] rejected: {e}")
        return error_response(str(e))

    if resolution.outcome is Outcome.GENERATE:
        log.info(f"[CONFIG CA] generating {C.RSA_KEY_BITS}-bit RSA signing key")

    pair = materialize(resolution, generator)
    persist_key_pair(req.storage, pair)

    log.info(
        f"[CONFIG CA] signing key stored source={resolution.outcome.value} "
        f"fingerprint={ssh_fingerprint(pair.public_key)}"
    )
    return None
