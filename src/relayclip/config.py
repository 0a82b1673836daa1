#!/usr/bin/env python3
"""Configuration file handling for relayclip.

The configuration is a small JSON document:

    {
      "client_name": "Windows",
      "url_base": "ntfy.sh",
      "url_topic": "hello",
      "token": "",
      "hotkeys": "ctrl,shift,x"
    }

A missing file is created with these defaults. The optional "secure" key
(default true) selects wss/https; set it to false for a relay reachable
over plain ws/http such as a local ntfy instance.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from relayclip.errors import ConfigError

logger = logging.getLogger(__name__)

# Default configuration file name, resolved against the working directory.
CONFIG_FILE_NAME: str = "config.json"

DEFAULT_CONFIG: dict[str, object] = {
    "client_name": "Windows",
    "url_base": "ntfy.sh",
    "url_topic": "hello",
    "token": "",
    "hotkeys": "ctrl,shift,x",
}


@dataclass(frozen=True)
class RelayConfig:
    """Settings for one relayclip instance.

    Created once at startup and never mutated afterwards.

    Attributes:
        client_name: Identity attached to our publishes, used to drop echoes.
        url_base: Relay host (optionally with port), e.g. "ntfy.sh".
        url_topic: Topic to publish to and subscribe on.
        token: Bearer token for the relay, empty for anonymous access.
        hotkeys: Key symbols that must be held together to publish.
        secure: Use wss/https when True, ws/http when False.
    """

    client_name: str
    url_base: str
    url_topic: str
    token: str = ""
    hotkeys: tuple[str, ...] = ("ctrl", "shift", "x")
    secure: bool = True

    def __post_init__(self) -> None:
        if not self.url_base.strip():
            raise ConfigError("url_base must not be empty")
        try:
            httpx.URL(f"https://{self.url_base}/")
        except httpx.InvalidURL as e:
            raise ConfigError(f"url_base {self.url_base!r} is not a valid host: {e}") from e
        if not self.url_topic.strip():
            raise ConfigError("url_topic must not be empty")
        if not self.hotkeys or not all(key.strip() for key in self.hotkeys):
            raise ConfigError("hotkeys must name at least one key")


def parse_hotkeys(value: str) -> tuple[str, ...]:
    """Split a comma-separated key list such as "ctrl,shift,x"."""
    return tuple(key.strip().lower() for key in value.split(",") if key.strip())


def _require_str(data: dict, key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    return value


def config_from_dict(data: dict) -> RelayConfig:
    """Build a validated RelayConfig from decoded JSON.

    Args:
        data: Mapping with the configuration file keys.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If a field has the wrong type or an invariant fails.
    """
    secure = data.get("secure", True)
    if not isinstance(secure, bool):
        raise ConfigError("secure must be true or false")
    return RelayConfig(
        client_name=_require_str(data, "client_name"),
        url_base=_require_str(data, "url_base").strip(),
        url_topic=_require_str(data, "url_topic").strip().strip("/"),
        token=_require_str(data, "token"),
        hotkeys=parse_hotkeys(_require_str(data, "hotkeys")),
        secure=secure,
    )


def save_default_config(path: Path) -> None:
    """Write the default configuration to path.

    Raises:
        ConfigError: If the file cannot be written.
    """
    try:
        path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write default config to {path}: {e}") from e
    logger.info("Created default configuration at %s", path)


def load_config(path: Path) -> RelayConfig:
    """Load the configuration file, creating it with defaults if missing.

    Args:
        path: Location of the JSON configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file cannot be read, is not a JSON object,
            or fails validation.
    """
    if not path.exists():
        logger.warning("Configuration file %s not found, creating defaults", path)
        save_default_config(path)
        return config_from_dict(DEFAULT_CONFIG)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")

    config = config_from_dict(data)
    logger.info("Loaded configuration from %s", path)
    return config
