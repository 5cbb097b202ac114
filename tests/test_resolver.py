import pytest

from sshca_core import constants as C
from sshca_core.errors import InvariantError, ValidationError
from sshca_core.resolver import Outcome, Resolution, materialize, resolve


# --- Row A: flag explicitly true ---

def test_explicit_true_without_keys_generates():
    assert resolve("", "", True).outcome is Outcome.GENERATE


@pytest.mark.parametrize("pub,priv", [("pub", ""), ("", "priv"), ("pub", "priv")])
def test_explicit_true_with_any_key_is_rejected(pub, priv):
    with pytest.raises(ValidationError) as exc:
        resolve(pub, priv, True)
    assert str(exc.value) == C.MSG_GENERATE_CONFLICT
    assert "must not be set when generate_signing_key is set to true" in str(exc.value)


# --- Row B: flag explicitly false, or unset with both halves ---

@pytest.mark.parametrize("generate", [False, None])
def test_valid_pair_is_accepted(rsa_pair, generate):
    pub, priv = rsa_pair
    res = resolve(pub, priv, generate)
    assert res == Resolution(Outcome.ACCEPT_EXTERNAL, pub, priv)


def test_explicit_false_missing_public_key(rsa_pair):
    with pytest.raises(ValidationError, match="^missing public_key$"):
        resolve("", rsa_pair[1], False)


def test_explicit_false_missing_private_key(rsa_pair):
    with pytest.raises(ValidationError, match="^missing private_key$"):
        resolve(rsa_pair[0], "", False)


def test_explicit_false_with_nothing_reports_missing_public_key():
    with pytest.raises(ValidationError, match="^missing public_key$"):
        resolve("", "", False)


@pytest.mark.parametrize("generate", [False, None])
def test_bad_private_key(rsa_pair, generate):
    with pytest.raises(ValidationError) as exc:
        resolve(rsa_pair[0], "not a key", generate)
    assert str(exc.value).startswith("Unable to parse private_key as an SSH private key:")


def test_bad_public_key(rsa_pair):
    with pytest.raises(ValidationError) as exc:
        resolve("ssh-rsa !!!", rsa_pair[1], None)
    assert str(exc.value).startswith("Unable to parse public_key as an SSH public key:")


def test_private_key_is_checked_before_public_key():
    with pytest.raises(ValidationError, match="private_key"):
        resolve("garbage", "garbage", False)


def test_halves_are_not_cross_checked(rsa_pair, ed25519_pair):
    res = resolve(ed25519_pair[0], rsa_pair[1], None)
    assert res.outcome is Outcome.ACCEPT_EXTERNAL


# --- Row C: unset, nothing supplied ---

def test_unset_without_keys_generates():
    assert resolve("", "", None).outcome is Outcome.GENERATE


# --- Row D: unset, exactly one half ---

@pytest.mark.parametrize("pub,priv", [("ssh-rsa AAAA user@host", ""), ("", "priv")])
def test_half_supplied_is_rejected(pub, priv):
    with pytest.raises(ValidationError) as exc:
        resolve(pub, priv, None)
    assert str(exc.value) == C.MSG_HALF_SET


# --- materialize ---

def test_materialize_generates(rsa_pair, fake_generator):
    pair = materialize(Resolution(Outcome.GENERATE), fake_generator)
    assert (pair.public_key, pair.private_key) == rsa_pair
    assert len(fake_generator.calls) == 1


def test_materialize_external_skips_generator(rsa_pair, fake_generator):
    pair = materialize(Resolution(Outcome.ACCEPT_EXTERNAL, *rsa_pair), fake_generator)
    assert pair.public_key == rsa_pair[0]
    assert fake_generator.calls == []


@pytest.mark.parametrize("keys", [("", "priv"), ("pub", ""), ("", "")])
def test_materialize_rejects_empty_half(keys):
    with pytest.raises(InvariantError, match="failed to generate or parse the keys"):
        materialize(Resolution(Outcome.GENERATE), lambda: keys)


def test_resolved_pair_repr_hides_private_key(rsa_pair):
    pair = materialize(Resolution(Outcome.ACCEPT_EXTERNAL, *rsa_pair))
    assert "PRIVATE KEY" not in repr(pair)


def test_resolution_repr_hides_private_key(rsa_pair):
    res = resolve(rsa_pair[0], rsa_pair[1], None)
    assert "PRIVATE KEY" not in repr(res)
    assert "accept_external" in repr(res)
