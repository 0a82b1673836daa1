#!/usr/bin/env python3
"""Application wiring for relayclip.

This module builds the sync engine from a configuration and runs it until
SIGINT or SIGTERM: the subscription runs as a background task, and each
hotkey press schedules one publish on the event loop. The two flows only
meet through the relay and the shared DedupState.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import signal
from contextlib import suppress
from typing import TYPE_CHECKING

import httpx

from relayclip.clipboard import PyperclipClipboard
from relayclip.dedup import DedupFilter
from relayclip.dedup_state import DedupState
from relayclip.errors import HotkeyError
from relayclip.hotkeys import start_hotkey_listener
from relayclip.publish import publish_clipboard
from relayclip.relay_constants import PUBLISH_TIMEOUT
from relayclip.subscribe import SubscriptionLoop

if TYPE_CHECKING:
    from relayclip.config import RelayConfig

logger = logging.getLogger(__name__)


def log_publish_failure(future: concurrent.futures.Future) -> None:
    """Log an exception that escaped a scheduled publish."""
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error("Publish failed unexpectedly", exc_info=error)


async def run_app(config: RelayConfig) -> None:
    """Run clipboard synchronization until a shutdown signal arrives.

    Args:
        config: The validated relay configuration.
    """
    clipboard = PyperclipClipboard()
    state = DedupState()
    subscription = SubscriptionLoop(
        config, DedupFilter(config.client_name, state), clipboard
    )

    # Register signal handlers for clean shutdown
    shutdown_requested = asyncio.Event()
    loop = asyncio.get_running_loop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        # Not supported by the Windows event loop; Ctrl+C still cancels run_app
        with suppress(NotImplementedError):
            loop.add_signal_handler(signum, shutdown_requested.set)

    async with httpx.AsyncClient(timeout=PUBLISH_TIMEOUT) as client:

        def on_hotkey() -> None:
            """Schedule a publish from the hotkey listener thread."""
            future = asyncio.run_coroutine_threadsafe(
                publish_clipboard(config, clipboard, client), loop
            )
            future.add_done_callback(log_publish_failure)

        try:
            listener = start_hotkey_listener(config.hotkeys, on_hotkey)
        except HotkeyError as e:
            logger.error("%s; only receiving clipboard updates", e)
            listener = None

        subscription_task = asyncio.create_task(subscription.run())
        shutdown_task = asyncio.create_task(shutdown_requested.wait())
        try:
            done, _ = await asyncio.wait(
                {subscription_task, shutdown_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
            # The subscription only ends on its own by failing
            if subscription_task in done:
                subscription_task.result()
            logger.info("Shutting down")
        finally:
            if listener is not None:
                listener.stop()
            for task in (shutdown_task, subscription_task):
                if not task.done():
                    task.cancel()
                    with suppress(asyncio.CancelledError):
                        await task
