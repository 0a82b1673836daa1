#!/usr/bin/env python3
"""Subscription connection and retry logic for relayclip.

This module opens the WebSocket subscription to the relay and retries
failed attempts forever using tenacity. The wait between attempts is a
tenacity wait strategy supplied by the caller, a fixed five seconds by
default, so tests can substitute wait_none() or a recording sleep.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_never,
    wait_fixed,
)
from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import InvalidHandshake, InvalidURI

from relayclip.errors import ConnectError
from relayclip.protocol import auth_headers, subscribe_url
from relayclip.relay_constants import (
    BACKOFF_SECONDS,
    MAX_FRAME_SIZE,
    OPEN_TIMEOUT,
    PING_INTERVAL,
    PING_TIMEOUT,
)

if TYPE_CHECKING:
    from tenacity.wait import wait_base

    from relayclip.config import RelayConfig

logger = logging.getLogger(__name__)

DEFAULT_BACKOFF: wait_base = wait_fixed(BACKOFF_SECONDS)


async def connect_to_relay(config: RelayConfig) -> ClientConnection:
    """Open the WebSocket subscription for the configured topic.

    Args:
        config: The relay configuration.

    Returns:
        The open WebSocket connection.

    Raises:
        ConnectError: If the connection, TLS setup or handshake fails or
            times out.
    """
    url = subscribe_url(config)
    logger.debug("Connecting to %s", url)
    try:
        return await connect(
            url,
            additional_headers=auth_headers(config.token),
            open_timeout=OPEN_TIMEOUT,
            ping_interval=PING_INTERVAL,
            ping_timeout=PING_TIMEOUT,
            max_size=MAX_FRAME_SIZE,
        )
    except (OSError, InvalidHandshake, InvalidURI, asyncio.TimeoutError) as e:
        logger.warning("Connection to %s failed: %s", url, e)
        raise ConnectError(f"Failed to connect to {url}: {e}") from e


async def connect_with_retry(
    config: RelayConfig,
    backoff: wait_base = DEFAULT_BACKOFF,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> ClientConnection:
    """Connect to the relay, retrying ConnectError without limit.

    Args:
        config: The relay configuration.
        backoff: tenacity wait strategy giving the delay before each retry.
        sleep: Coroutine function used to wait between attempts.

    Returns:
        The open WebSocket connection from the first successful attempt.

    Note:
        This function only returns on success. It is cancellable during
        both the connect attempt and the wait.
    """
    retrying = AsyncRetrying(
        wait=backoff,
        retry=retry_if_exception_type(ConnectError),
        stop=stop_never,
        sleep=sleep,
        before_sleep=before_sleep_log(logger, logging.INFO),
    )
    async for attempt in retrying:
        with attempt:
            session = await connect_to_relay(config)
    return session
