#!/usr/bin/env python3
"""Tests for configuration loading and validation."""
import json
from pathlib import Path

import pytest

from relayclip.config import (
    DEFAULT_CONFIG,
    RelayConfig,
    config_from_dict,
    load_config,
    parse_hotkeys,
)
from relayclip.errors import ConfigError


def write_config(path: Path, **overrides: object) -> Path:
    """Write DEFAULT_CONFIG with overrides to path."""
    data = {**DEFAULT_CONFIG, **overrides}
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_is_created_with_defaults(tmp_path: Path) -> None:
    """Test load_config writes the default file and returns its values."""
    path = tmp_path / "config.json"

    config = load_config(path)

    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert config == RelayConfig(
        client_name="Windows",
        url_base="ntfy.sh",
        url_topic="hello",
        token="",
        hotkeys=("ctrl", "shift", "x"),
    )


def test_created_defaults_load_back(tmp_path: Path) -> None:
    """Test a second load reads the file created by the first."""
    path = tmp_path / "config.json"
    first = load_config(path)
    assert load_config(path) == first


def test_load_existing_file(tmp_path: Path) -> None:
    """Test all fields are read from an existing file."""
    path = write_config(
        tmp_path / "config.json",
        client_name="Laptop",
        url_base="relay.example:8443",
        url_topic="/clips/",
        token="tk_123",
        hotkeys="Ctrl, Alt ,V",
        secure=False,
    )

    config = load_config(path)

    assert config.client_name == "Laptop"
    assert config.url_base == "relay.example:8443"
    assert config.url_topic == "clips"
    assert config.token == "tk_123"
    assert config.hotkeys == ("ctrl", "alt", "v")
    assert config.secure is False


def test_secure_defaults_to_true(tmp_path: Path) -> None:
    """Test files without a secure key use wss/https."""
    config = load_config(write_config(tmp_path / "config.json"))
    assert config.secure is True


def test_invalid_json_raises_config_error(tmp_path: Path) -> None:
    """Test malformed JSON raises ConfigError."""
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(path)


def test_non_object_raises_config_error(tmp_path: Path) -> None:
    """Test a JSON array raises ConfigError."""
    path = tmp_path / "config.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigError, match="JSON object"):
        load_config(path)


@pytest.mark.parametrize("field", ["url_base", "url_topic"])
def test_empty_address_fields_rejected(field: str) -> None:
    """Test empty url_base or url_topic raises ConfigError."""
    with pytest.raises(ConfigError, match=field):
        config_from_dict({**DEFAULT_CONFIG, field: "  "})


def test_empty_hotkeys_rejected() -> None:
    """Test a hotkey list without keys raises ConfigError."""
    with pytest.raises(ConfigError, match="hotkeys"):
        config_from_dict({**DEFAULT_CONFIG, "hotkeys": " , "})


def test_wrong_type_rejected() -> None:
    """Test a non-string token raises ConfigError."""
    with pytest.raises(ConfigError, match="token must be a string"):
        config_from_dict({**DEFAULT_CONFIG, "token": 42})


def test_non_bool_secure_rejected() -> None:
    """Test secure must be a JSON boolean."""
    with pytest.raises(ConfigError, match="secure"):
        config_from_dict({**DEFAULT_CONFIG, "secure": "no"})


def test_non_ascii_client_name_accepted() -> None:
    """Test client names outside ASCII load unchanged."""
    config = config_from_dict({**DEFAULT_CONFIG, "client_name": "笔记本"})
    assert config.client_name == "笔记本"


def test_invalid_url_base_rejected() -> None:
    """Test a url_base that cannot form a URL raises ConfigError."""
    with pytest.raises(ConfigError, match="url_base"):
        config_from_dict({**DEFAULT_CONFIG, "url_base": "ntfy.sh:abc"})


def test_config_is_frozen(relay_config: RelayConfig) -> None:
    """Test the configuration cannot be changed after creation."""
    with pytest.raises(AttributeError):
        relay_config.url_topic = "other"  # type: ignore[misc]


def test_parse_hotkeys_strips_and_lowercases() -> None:
    """Test parse_hotkeys splits on commas and drops blanks."""
    assert parse_hotkeys("CTRL, shift,,x ") == ("ctrl", "shift", "x")
