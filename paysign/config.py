"""Signing defaults read from ``paysign.yaml`` and the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_CONFIG_FILE = "paysign.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SigningConfig(BaseModel):
    """Defaults for the signing command.

    ``PAYSIGN_KEY`` and ``PAYSIGN_KID`` take precedence over values from the
    file.
    """

    key_path: Optional[Path] = None
    kid: Optional[str] = None
    algorithm: Optional[Literal["ES256", "ES384", "ES512"]] = None
    detached: bool = False

    @model_validator(mode="after")
    def _apply_env(self) -> "SigningConfig":
        env_key = os.getenv("PAYSIGN_KEY")
        if env_key:
            self.key_path = Path(env_key)
        env_kid = os.getenv("PAYSIGN_KID")
        if env_kid:
            self.kid = env_kid
        return self


class PaysignConfig(BaseModel):
    """Top-level configuration model."""

    signing: SigningConfig = Field(default_factory=SigningConfig)
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def load_config(path: Optional[str] = None) -> PaysignConfig:
    """Load configuration, falling back to defaults when no file exists.

    The file is ``path``, else ``$PAYSIGN_CONFIG``, else ``paysign.yaml`` in
    the working directory.

    Raises:
        yaml.YAMLError: if the file is not valid YAML.
        pydantic.ValidationError: if the document is not a valid config
            mapping.
    """
    config_file = Path(path or os.getenv("PAYSIGN_CONFIG", DEFAULT_CONFIG_FILE))
    data = {}
    if config_file.is_file():
        data = yaml.safe_load(config_file.read_text()) or {}
    return PaysignConfig.model_validate(data)
