"""
sshca_core.resolver
-------------------
Maps the three config/ca inputs (public_key, private_key,
generate_signing_key) onto a single outcome:

- GENERATE: no key material supplied, create an RSA pair internally
- ACCEPT_EXTERNAL: both halves supplied and parseable
- rejection: raised as ValidationError, nothing is written

Rows are evaluated top to bottom, first match wins:

  A  flag set true       -> generate, unless either key is non-empty
  B  flag set false, or  -> both keys required and must parse
     flag unset and both keys non-empty
  C  flag unset, no keys -> generate
  D  flag unset, one key -> reject
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple

from . import constants as C
from .crypto import KeyParseError, generate_ssh_keypair, parse_ssh_private_key, parse_ssh_public_key
from .errors import InvariantError, ValidationError


class Outcome(str, Enum):
    GENERATE = "generate"
    ACCEPT_EXTERNAL = "accept_external"


@dataclass
class Resolution:
    outcome: Outcome
    public_key: str = ""
    private_key: str = field(default="", repr=False)


@dataclass(frozen=True)
class ResolvedKeyPair:
    public_key: str   # authorized-keys line
    private_key: str = field(repr=False)  # PEM block


def validate_external(public_key: str, private_key: str) -> None:
    """Both halves must parse. They are not checked against each other."""
    try:
        parse_ssh_private_key(private_key)
    except KeyParseError as exc:
        raise ValidationError(C.MSG_BAD_PRIVATE_KEY.format(exc)) from exc

    try:
        parse_ssh_public_key(public_key)
    except KeyParseError as exc:
        raise ValidationError(C.MSG_BAD_PUBLIC_KEY.format(exc)) from exc


def resolve(public_key: str, private_key: str, generate: Optional[bool]) -> Resolution:
    """
    generate is None when the caller did not supply generate_signing_key;
    a schema default must not be passed here.
    """
    public_key = public_key or ""
    private_key = private_key or ""

    # A: explicitly true
    if generate is True:
        if public_key or private_key:
            raise ValidationError(C.MSG_GENERATE_CONFLICT)
        return Resolution(Outcome.GENERATE)

    # B: explicitly false, or unset with both halves present
    if generate is False or (public_key and private_key):
        if not public_key:
            raise ValidationError(C.MSG_MISSING_PUBLIC_KEY)
        if not private_key:
            raise ValidationError(C.MSG_MISSING_PRIVATE_KEY)
        validate_external(public_key, private_key)
        return Resolution(Outcome.ACCEPT_EXTERNAL, public_key, private_key)

    # C: unset, nothing supplied
    if not public_key and not private_key:
        return Resolution(Outcome.GENERATE)

    # D: unset, exactly one half supplied
    raise ValidationError(C.MSG_HALF_SET)


def materialize(
    resolution: Resolution,
    generator: Callable[[], Tuple[str, str]] = generate_ssh_keypair,
) -> ResolvedKeyPair:
    """Run the generator for GENERATE outcomes and enforce a complete pair."""
    if resolution.outcome is Outcome.GENERATE:
        public_key, private_key = generator()
    else:
        public_key, private_key = resolution.public_key, resolution.private_key

    if not public_key or not private_key:
        raise InvariantError(C.MSG_EMPTY_KEYS)
    return ResolvedKeyPair(public_key, private_key)
