"""Compact JWS signing for payout request bodies.

A request is signed by placing ``{"alg", "kid"}`` in a protected header,
base64url encoding header and body, and signing ``header.body`` with ECDSA.
The signature uses the JWS form (fixed length ``r || s``, RFC 7515
Appendix A.3/A.4), not ASN.1 DER.

Nonces come from the ``cryptography`` default, so two signatures over the
same input differ while both verifying.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import ec
from jwt.utils import base64url_encode, der_to_raw_signature

from ..errors import InvalidArguments, InvalidKey, SigningFailure
from .context import CompactJws, ProtectedHeader
from .keys import algorithm_for_key, hash_for_key, load_private_key

logger = logging.getLogger(__name__)


def build_jws(
    private_key_pem: Union[bytes, str],
    key_id: str,
    payload: Union[bytes, str],
    algorithm: Optional[str] = None,
) -> str:
    """Sign ``payload`` and return ``header.payload.signature``.

    Args:
        private_key_pem: PEM encoded EC private key on P-256, P-384 or P-521.
        key_id: Value of the ``kid`` header, placed verbatim.
        payload: Bytes to sign; ``str`` is UTF-8 encoded. Not validated.
        algorithm: Expected ``alg``. Must agree with the key's curve when set.

    Raises:
        InvalidArguments: if ``key_id`` is empty.
        InvalidKey: if the key cannot be parsed or does not fit ``algorithm``.
        SigningFailure: if the ECDSA primitive fails.
    """
    if not isinstance(key_id, str) or not key_id:
        raise InvalidArguments("The key id (kid) must be a non-empty string.")
    if isinstance(payload, str):
        payload = payload.encode("utf-8")

    key = load_private_key(private_key_pem)
    alg = algorithm_for_key(key)
    if algorithm is not None and algorithm.upper() != alg:
        raise InvalidKey(
            f"The private key is on {key.curve.name}, which signs {alg}, not {algorithm.upper()}."
        )

    header_b64 = ProtectedHeader(alg=alg, kid=key_id).encode()
    payload_b64 = base64url_encode(payload).decode("ascii")
    signature = sign_ecdsa(f"{header_b64}.{payload_b64}".encode("ascii"), key)
    logger.debug("Signed %d payload bytes with %s (kid=%s)", len(payload), alg, key_id)
    return CompactJws(
        header=header_b64, payload=payload_b64, signature=signature
    ).serialize()


def sign_ecdsa(signing_input: bytes, key: ec.EllipticCurvePrivateKey) -> str:
    """Return the base64url JWS signature of ``signing_input``."""
    try:
        der_signature = key.sign(signing_input, ec.ECDSA(hash_for_key(key)))
        raw_signature = der_to_raw_signature(der_signature, key.curve)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise SigningFailure(str(exc) or exc.__class__.__name__) from exc
    return base64url_encode(raw_signature).decode("ascii")


def detach_payload(token: str) -> str:
    """Return ``token`` with its payload segment removed (``header..signature``)."""
    return CompactJws.parse(token).detached().serialize()
