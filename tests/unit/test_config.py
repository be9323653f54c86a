"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from paysign.config import load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ("PAYSIGN_CONFIG", "PAYSIGN_KEY", "PAYSIGN_KID"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults_without_config_file():
    config = load_config()
    assert config.signing.key_path is None
    assert config.signing.kid is None
    assert config.signing.detached is False
    assert config.log_level == "WARNING"


def test_load_config_from_env(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
signing:
  key_path: keys/ec512-private.pem
  kid: 3f0c1b2e-cert
  algorithm: ES512
  detached: true
log_level: debug
"""
    )
    monkeypatch.setenv("PAYSIGN_CONFIG", str(config_path))

    config = load_config()
    assert config.signing.key_path == Path("keys/ec512-private.pem")
    assert config.signing.kid == "3f0c1b2e-cert"
    assert config.signing.algorithm == "ES512"
    assert config.signing.detached is True
    assert config.log_level == "DEBUG"


def test_env_overrides_key_and_kid(tmp_path, monkeypatch):
    config_path = tmp_path / "paysign.yaml"
    config_path.write_text("signing:\n  kid: from-file\n")
    monkeypatch.setenv("PAYSIGN_KID", "from-env")
    monkeypatch.setenv("PAYSIGN_KEY", "/etc/paysign/key.pem")

    config = load_config()
    assert config.signing.kid == "from-env"
    assert config.signing.key_path == Path("/etc/paysign/key.pem")


def test_empty_config_file_gives_defaults(tmp_path):
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("")

    assert load_config(str(config_path)).signing.detached is False


def test_unknown_algorithm_is_rejected(tmp_path):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("signing:\n  algorithm: RS256\n")

    with pytest.raises(ValidationError):
        load_config(str(config_path))


def test_env_applies_without_config_file(monkeypatch):
    monkeypatch.setenv("PAYSIGN_KID", "env-only")

    assert load_config().signing.kid == "env-only"


def test_unknown_log_level_is_rejected(tmp_path):
    config_path = tmp_path / "loud.yaml"
    config_path.write_text("log_level: LOUD\n")

    with pytest.raises(ValidationError):
        load_config(str(config_path))


def test_non_mapping_document_is_rejected(tmp_path):
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- a\n- b\n")

    with pytest.raises(ValidationError):
        load_config(str(config_path))


def test_malformed_yaml_raises_yaml_error(tmp_path):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("signing: [unclosed\n")

    with pytest.raises(yaml.YAMLError):
        load_config(str(config_path))
