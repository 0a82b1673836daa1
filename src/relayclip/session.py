#!/usr/bin/env python3
"""Subscription session states.

A subscription moves DISCONNECTED -> CONNECTING -> CONNECTED and back to
DISCONNECTED when the connection drops or is closed. At most one session
is live at a time; the previous one is closed before CONNECTING starts.
"""

import enum


class SessionState(enum.Enum):
    """Lifecycle state of the subscription connection."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
