"""JWS header and token models."""

from __future__ import annotations

import json

from jwt.utils import base64url_encode
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import InvalidArguments


class ProtectedHeader(BaseModel):
    """Protected header carried in the first segment of a JWS."""

    model_config = ConfigDict(frozen=True)

    alg: str = Field(..., description="JWS algorithm")
    kid: str = Field(..., description="Key identifier used for signing")

    @field_validator("kid")
    @classmethod
    def _kid_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("kid must be a non-empty string")
        return value

    def to_json(self) -> bytes:
        """Return the compact JSON encoding with ``alg`` before ``kid``."""
        return json.dumps(
            {"alg": self.alg, "kid": self.kid}, separators=(",", ":")
        ).encode("utf-8")

    def encode(self) -> str:
        return base64url_encode(self.to_json()).decode("ascii")


class CompactJws(BaseModel):
    """A JWS in compact serialization: ``header.payload.signature``.

    An empty ``payload`` segment denotes detached content (RFC 7515,
    Appendix F).
    """

    model_config = ConfigDict(frozen=True)

    header: str
    payload: str = ""
    signature: str

    @classmethod
    def parse(cls, token: str) -> "CompactJws":
        parts = token.split(".")
        if len(parts) != 3 or not parts[0] or not parts[2]:
            raise InvalidArguments("Not a compact JWS: expected header.payload.signature")
        return cls(header=parts[0], payload=parts[1], signature=parts[2])

    @property
    def signing_input(self) -> bytes:
        return f"{self.header}.{self.payload}".encode("ascii")

    def serialize(self) -> str:
        return f"{self.header}.{self.payload}.{self.signature}"

    def detached(self) -> "CompactJws":
        """Return a copy with the payload segment omitted."""
        return self.model_copy(update={"payload": ""})
