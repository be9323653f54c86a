"""Paysign: JWS request signing for payouts APIs."""

from .errors import (
    InvalidArguments,
    InvalidKey,
    KeyFileUnreadable,
    PaysignError,
    SigningFailure,
)
from .security import build_jws, detach_payload

__version__ = "0.1.0"
__all__ = [
    "InvalidArguments",
    "InvalidKey",
    "KeyFileUnreadable",
    "PaysignError",
    "SigningFailure",
    "build_jws",
    "detach_payload",
]
