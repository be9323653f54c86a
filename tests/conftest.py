import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from jwt.utils import base64url_decode

# Private scalar of the P-256 example key in RFC 7515, Appendix A.3.
RFC7515_P256_D = "jpsQnnGQmL-YBIffH1136cspYG6-0iY7X1fCE9-E9LI"


def _to_pem(key) -> bytes:
    return key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


@pytest.fixture
def to_pem():
    return _to_pem


@pytest.fixture
def p256_key():
    d = int.from_bytes(base64url_decode(RFC7515_P256_D), "big")
    return ec.derive_private_key(d, ec.SECP256R1())


@pytest.fixture
def p256_pem(p256_key):
    return _to_pem(p256_key)


@pytest.fixture
def p521_key():
    return ec.generate_private_key(ec.SECP521R1())


@pytest.fixture
def p521_pem(p521_key):
    return _to_pem(p521_key)


@pytest.fixture
def rsa_pem():
    return _to_pem(rsa.generate_private_key(public_exponent=65537, key_size=2048))
