#!/usr/bin/env python3
"""Inbound message filtering.

Decides whether a message received on the subscription should be written
to the local clipboard. Three kinds of message are dropped:
- echoes of our own publishes (origin label equals our client name)
- empty bodies
- bodies identical to the last one applied
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relayclip.dedup_state import DedupState
    from relayclip.protocol import InboundMessage

logger = logging.getLogger(__name__)


class DedupFilter:
    """Accept/reject policy bound to a client name and a shared DedupState."""

    def __init__(self, client_name: str, state: DedupState) -> None:
        self.client_name = client_name
        self.state = state

    def accept(self, message: InboundMessage) -> bool:
        """Decide whether message should be applied to the clipboard.

        On accept the state records message.body before returning, so the
        caller applies a body that is already marked as the latest one.

        Args:
            message: The decoded inbound message.

        Returns:
            True if the caller should write message.body to the clipboard.
        """
        if message.origin_label == self.client_name:
            logger.debug("Skipping echo of our own publish")
            return False
        if not message.body:
            logger.debug("Skipping empty message from %s", message.origin_label)
            return False
        if not self.state.apply_if_new(message.body):
            logger.debug("Skipping duplicate message from %s", message.origin_label)
            return False
        return True
