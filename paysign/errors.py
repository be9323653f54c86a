"""Exceptions raised while signing requests."""

from __future__ import annotations


class PaysignError(Exception):
    """Base class for all paysign failures."""


class InvalidKey(PaysignError):
    """The private key is malformed, not an EC key, or on the wrong curve."""


class SigningFailure(PaysignError):
    """The signing primitive rejected the input."""


class KeyFileUnreadable(PaysignError):
    """The key file could not be found or read."""


class InvalidArguments(PaysignError):
    """Caller supplied arguments that cannot produce a JWS."""
