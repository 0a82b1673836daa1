#!/usr/bin/env python3
"""
Relay wire format and endpoint addressing.

The relay speaks the ntfy JSON protocol. Every frame on the subscription
WebSocket is a JSON object with an "event" field. Only "message" events
carry clipboard text:

    {"event": "message", "title": "Laptop", "message": "copied text", ...}

Other events ("open", "keepalive", "poll_request") are control frames and
carry nothing to apply. The publisher name travels in "title" and the
clipboard text in "message".

This module provides:
- InboundMessage: the decoded origin label and body
- decode_message(): strict frame decoding raising DecodeError
- subscribe_url() / publish_url(): endpoint addresses for a config
- auth_headers(): the optional bearer token header
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

from relayclip.errors import DecodeError

if TYPE_CHECKING:
    from relayclip.config import RelayConfig

# Event type of frames that carry a published message.
MESSAGE_EVENT: str = "message"

# Path suffix of the relay's WebSocket subscribe endpoint.
SUBSCRIBE_SUFFIX: str = "/ws"


@dataclass(frozen=True)
class InboundMessage:
    """
    A message received from the relay.

    Attributes:
        origin_label: Name of the publishing client (the "title" field).
        body: Published clipboard text, possibly empty.
    """

    origin_label: str
    body: str


def decode_message(frame: str | bytes) -> InboundMessage | None:
    """
    Decode one subscription frame.

    Args:
        frame: Raw text or binary WebSocket frame.

    Returns:
        The decoded message, or None for control frames that carry no
        message (open, keepalive, poll_request).

    Raises:
        DecodeError: If the frame is not UTF-8 JSON, not an object, or a
            message event lacks a string "message" field.
    """
    try:
        data = json.loads(frame)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Frame is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Frame is not a JSON object: {type(data).__name__}")

    event = data.get("event", MESSAGE_EVENT)
    if event != MESSAGE_EVENT:
        return None

    body = data.get("message")
    if not isinstance(body, str):
        raise DecodeError("Message frame has no string 'message' field")
    # The relay omits "title" when the publisher did not set one
    title = data.get("title", "")
    if not isinstance(title, str):
        raise DecodeError("Message frame has a non-string 'title' field")
    return InboundMessage(origin_label=title, body=body)


def auth_headers(token: str) -> dict[str, str]:
    """
    Build the authorization header for a relay token.

    Args:
        token: Bearer token, or empty string for anonymous access.

    Returns:
        {"Authorization": "Bearer <token>"} when token is set, else {}.
    """
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def subscribe_url(config: RelayConfig) -> str:
    """Return the WebSocket URL of the topic's subscribe endpoint."""
    scheme = "wss" if config.secure else "ws"
    return f"{scheme}://{config.url_base}/{config.url_topic}{SUBSCRIBE_SUFFIX}"


def publish_url(config: RelayConfig) -> str:
    """Return the HTTP URL that publishes to the topic."""
    scheme = "https" if config.secure else "http"
    return f"{scheme}://{config.url_base}/{config.url_topic}"
