"""Key loading and curve/algorithm pairing for JWS signing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import load_pem_private_key

from ..errors import InvalidKey, KeyFileUnreadable

logger = logging.getLogger(__name__)

# JWS algorithm for each supported curve, with its digest (RFC 7518, 3.4).
CURVE_ALGORITHMS: dict[str, tuple[str, type[hashes.HashAlgorithm]]] = {
    "secp256r1": ("ES256", hashes.SHA256),
    "secp384r1": ("ES384", hashes.SHA384),
    "secp521r1": ("ES512", hashes.SHA512),
}


def load_private_key(pem: Union[bytes, str]) -> ec.EllipticCurvePrivateKey:
    """Parse an unencrypted PEM private key and check it is usable for ES*.

    Raises:
        InvalidKey: if the PEM is malformed, is not an EC key, or uses a
            curve with no JWS algorithm.
    """
    if isinstance(pem, str):
        pem = pem.encode("utf-8")
    if not pem.strip():
        raise InvalidKey("Failed to parse the private key as PEM: input is empty.")

    try:
        key = load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidKey(f"Failed to parse the private key as PEM: {exc}") from exc

    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise InvalidKey("The private key must be an Elliptic Curve key.")
    if key.curve.name not in CURVE_ALGORITHMS:
        raise InvalidKey(f"Unsupported elliptic curve for JWS signing: {key.curve.name}")
    return key


def algorithm_for_key(key: ec.EllipticCurvePrivateKey) -> str:
    """Return the JWS ``alg`` implied by ``key``'s curve."""
    try:
        return CURVE_ALGORITHMS[key.curve.name][0]
    except KeyError:
        raise InvalidKey(f"Unsupported elliptic curve for JWS signing: {key.curve.name}") from None


def hash_for_key(key: ec.EllipticCurvePrivateKey) -> hashes.HashAlgorithm:
    return CURVE_ALGORITHMS[key.curve.name][1]()


def read_key_file(path: Union[str, Path]) -> bytes:
    """Read PEM bytes from ``path``.

    Raises:
        KeyFileUnreadable: if the file is missing or cannot be read.
    """
    key_path = Path(path).expanduser()
    logger.debug("Reading private key from %s", key_path)
    try:
        return key_path.read_bytes()
    except FileNotFoundError as exc:
        raise KeyFileUnreadable(f"Private key file not found: {key_path}") from exc
    except OSError as exc:
        raise KeyFileUnreadable(
            f"Failed to read the private key file {key_path}: {exc.strerror or exc}"
        ) from exc
