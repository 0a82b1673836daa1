#!/usr/bin/env python3
"""Publishing the local clipboard to the relay.

publish_clipboard() runs once per hotkey press: it reads the clipboard and,
if there is any text, PUTs it to the topic with our client name in the
Title header so our own subscription can recognise the echo.

Delivery is best effort. A failed publish is logged and dropped; pressing
the hotkey again sends the current clipboard.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import TYPE_CHECKING

import httpx

from relayclip.errors import PublishError, SourceError
from relayclip.protocol import auth_headers, publish_url

if TYPE_CHECKING:
    from relayclip.clipboard import ClipboardSource
    from relayclip.config import RelayConfig

logger = logging.getLogger(__name__)


def encode_header_value(value: str) -> str:
    """Make value safe for an HTTP header.

    ASCII values pass through. Anything else is sent as an RFC 2047
    encoded word (=?UTF-8?B?...?=), which the relay decodes before it
    echoes the value back as the message title.
    """
    if value.isascii():
        return value
    encoded = base64.b64encode(value.encode("utf-8")).decode("ascii")
    return f"=?UTF-8?B?{encoded}?="


def publish_headers(config: RelayConfig) -> dict[str, str]:
    """Build the headers of a publish request.

    Args:
        config: The relay configuration.

    Returns:
        Authorization (only when a token is set) and Title headers.
    """
    headers = auth_headers(config.token)
    headers["Title"] = encode_header_value(config.client_name)
    return headers


async def send_clipboard(
    config: RelayConfig, client: httpx.AsyncClient, text: str
) -> None:
    """Publish text to the configured topic with a single PUT.

    The response body is not interpreted.

    Args:
        config: The relay configuration.
        client: HTTP client used for the request.
        text: Clipboard text to publish.

    Raises:
        PublishError: On network failure or a non-success status.
    """
    url = publish_url(config)
    try:
        response = await client.put(
            url, content=text.encode("utf-8"), headers=publish_headers(config)
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise PublishError(
            f"Relay rejected publish to {url}: HTTP {e.response.status_code}"
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise PublishError(f"Publish to {url} failed: {e}") from e


async def publish_clipboard(
    config: RelayConfig, source: ClipboardSource, client: httpx.AsyncClient
) -> bool:
    """Read the clipboard and publish it.

    Called once per hotkey activation. Does nothing when the clipboard is
    empty. Never raises for clipboard or network failures.

    Args:
        config: The relay configuration.
        source: Clipboard to read the text from.
        client: HTTP client used for the request.

    Returns:
        True if the text was published.
    """
    try:
        text = await asyncio.to_thread(source.read_text)
    except SourceError as e:
        logger.error("Cannot publish: %s", e)
        return False
    if not text:
        logger.debug("Clipboard is empty, nothing to publish")
        return False

    try:
        await send_clipboard(config, client, text)
    except PublishError as e:
        logger.error("%s", e)
        return False
    logger.info("Published %d characters to %s", len(text), config.url_topic)
    return True
