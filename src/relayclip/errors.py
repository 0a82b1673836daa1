#!/usr/bin/env python3
"""Exception hierarchy for relayclip.

Every failure the sync engine can hit maps to one class here so callers
can decide per class whether to retry, skip or give up:
- ConnectError, ReadError: transport problems, recovered by reconnecting
- DecodeError, SinkError: per-message problems, the message is skipped
- SourceError, PublishError: abort a single publish attempt
- ConfigError: bad configuration, fatal at startup
"""


class RelayClipError(Exception):
    """Base class for all relayclip errors."""


class ConfigError(RelayClipError):
    """Configuration file is missing fields, malformed or invalid."""


class ConnectError(RelayClipError, ConnectionError):
    """Opening the subscription connection failed (network, TLS, handshake)."""


class ReadError(RelayClipError, ConnectionError):
    """The subscription connection dropped while waiting for a frame."""


class DecodeError(RelayClipError):
    """An inbound frame is not a valid relay message."""


class SinkError(RelayClipError):
    """Writing text into the local clipboard failed."""


class SourceError(RelayClipError):
    """Reading text from the local clipboard failed."""


class PublishError(RelayClipError):
    """The publish request failed or the relay answered with an error status."""


class HotkeyError(RelayClipError):
    """The global hotkey listener cannot be started."""
