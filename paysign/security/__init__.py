"""JWS signing primitives."""

from .context import CompactJws, ProtectedHeader
from .jws import build_jws, detach_payload, sign_ecdsa
from .keys import algorithm_for_key, load_private_key, read_key_file

__all__ = [
    "CompactJws",
    "ProtectedHeader",
    "algorithm_for_key",
    "build_jws",
    "detach_payload",
    "load_private_key",
    "read_key_file",
    "sign_ecdsa",
]
