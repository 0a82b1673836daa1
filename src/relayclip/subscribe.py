#!/usr/bin/env python3
"""Subscription loop: relay messages into the local clipboard.

SubscriptionLoop keeps one WebSocket subscription to the relay alive for
as long as the process runs. Each frame is decoded, passed through the
DedupFilter and, when accepted, written to the clipboard sink.

Failures are recovered at the narrowest level possible:
- connect failures are retried with the injected backoff
- a dropped connection leads straight to a new connect
- an undecodable frame or a failed clipboard write skips that message
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from websockets.exceptions import ConnectionClosed, WebSocketException

from relayclip.errors import DecodeError, ReadError, SinkError
from relayclip.protocol import decode_message, subscribe_url
from relayclip.session import SessionState
from relayclip.subscribe_retry import DEFAULT_BACKOFF, connect_with_retry

if TYPE_CHECKING:
    from tenacity.wait import wait_base
    from websockets.asyncio.client import ClientConnection

    from relayclip.clipboard import ClipboardSink
    from relayclip.config import RelayConfig
    from relayclip.dedup import DedupFilter

logger = logging.getLogger(__name__)


class SubscriptionLoop:
    """Long-lived subscription to the configured topic.

    Attributes:
        config: The relay configuration.
        dedup_filter: Policy deciding which messages reach the clipboard.
        sink: Clipboard the accepted bodies are written to.
        backoff: tenacity wait strategy between failed connect attempts.
        sleep: Coroutine function used for the backoff wait.
        state: Current SessionState.
    """

    def __init__(
        self,
        config: RelayConfig,
        dedup_filter: DedupFilter,
        sink: ClipboardSink,
        backoff: wait_base = DEFAULT_BACKOFF,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.config = config
        self.dedup_filter = dedup_filter
        self.sink = sink
        self.backoff = backoff
        self.sleep = sleep
        self.state = SessionState.DISCONNECTED
        self._session: ClientConnection | None = None

    async def run(self) -> None:
        """Keep the subscription running until the task is cancelled.

        The live session, if any, is closed on the way out.
        """
        try:
            while True:
                await self.run_once()
        finally:
            await self.close()

    async def run_once(self) -> None:
        """Connect (retrying as needed) and read frames until the connection drops."""
        await self.close()
        self.state = SessionState.CONNECTING
        session = await connect_with_retry(self.config, self.backoff, self.sleep)
        self._session = session
        self.state = SessionState.CONNECTED
        logger.info("Connected to %s, listening for messages", subscribe_url(self.config))
        try:
            await self._read_frames(session)
        except ReadError as e:
            logger.warning("Connection lost: %s, reconnecting", e)
        finally:
            await self.close()

    async def _read_frames(self, session: ClientConnection) -> None:
        """Read and handle frames one at a time.

        Raises:
            ReadError: When the connection closes, cleanly or not.
        """
        while True:
            try:
                frame = await session.recv()
            except ConnectionClosed as e:
                raise ReadError(f"Connection closed: {e}") from e
            await self.handle_frame(frame)

    async def handle_frame(self, frame: str | bytes) -> bool:
        """Apply one frame to the clipboard if the filter accepts it.

        Args:
            frame: Raw frame received on the subscription.

        Returns:
            True if the frame's body was written to the clipboard.
        """
        try:
            message = decode_message(frame)
        except DecodeError as e:
            logger.warning("Discarding frame: %s", e)
            return False
        if message is None:
            logger.debug("Skipping control frame")
            return False
        if not self.dedup_filter.accept(message):
            return False

        try:
            await asyncio.to_thread(self.sink.write_text, message.body)
        except SinkError as e:
            logger.error("Failed to update clipboard: %s", e)
            return False
        except Exception:
            logger.exception("Clipboard sink raised unexpectedly, skipping message")
            return False
        logger.info(
            "Received %d characters from %s", len(message.body), message.origin_label
        )
        return True

    async def close(self) -> None:
        """Close the live session, if any.

        Safe to call repeatedly; the session is detached before closing so
        it is closed at most once. Close errors are logged, not raised.
        """
        session, self._session = self._session, None
        self.state = SessionState.DISCONNECTED
        if session is None:
            return
        try:
            await session.close()
        except (OSError, WebSocketException) as e:
            logger.warning("Error closing relay connection: %s", e)
        else:
            logger.debug("Relay connection closed")
