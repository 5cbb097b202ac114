import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa

from sshca_core.backend import SSHBackend
from sshca_core.crypto import generate_ssh_keypair
from sshca_core.path_config_ca import path_config_ca
from sshca_core.storage import InMemoryStorage


def _authorized_line(public_key, comment="user@host"):
    line = public_key.public_bytes(
        encoding=serialization.Encoding.OpenSSH,
        format=serialization.PublicFormat.OpenSSH,
    ).decode("ascii")
    return f"{line} {comment}\n"


@pytest.fixture(scope="session")
def rsa_pair():
    """(public authorized line, PKCS#1 PEM) for a 2048-bit RSA key."""
    sk = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = sk.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
    return _authorized_line(sk.public_key()), private_pem


@pytest.fixture(scope="session")
def ed25519_pair():
    """(public authorized line, OpenSSH-format private key)."""
    sk = ed25519.Ed25519PrivateKey.generate()
    private_openssh = sk.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.OpenSSH,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
    return _authorized_line(sk.public_key(), "ca@example"), private_openssh


@pytest.fixture(scope="session")
def generated_pair():
    """One real 4096-bit pair from the production generator."""
    return generate_ssh_keypair()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def fake_generator(rsa_pair):
    calls = []

    def generator():
        calls.append(1)
        return rsa_pair

    generator.calls = calls
    return generator


@pytest.fixture
def backend(storage, fake_generator):
    """Backend whose config/ca path generates with the fake generator."""
    return SSHBackend(storage=storage, paths=[path_config_ca(generator=fake_generator)])
