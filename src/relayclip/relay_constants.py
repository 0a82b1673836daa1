#!/usr/bin/env python3
"""Constants for relay connections.

These constants control reconnection pacing for the subscription and the
timeouts of subscribe and publish requests.
"""

# Fixed delay in seconds between failed subscription connect attempts.
BACKOFF_SECONDS: float = 5.0

# Seconds allowed for the WebSocket opening handshake.
OPEN_TIMEOUT: float = 10.0

# Seconds between WebSocket pings; a missing pong within PING_TIMEOUT
# drops the connection so the subscription reconnects.
PING_INTERVAL: float = 20.0
PING_TIMEOUT: float = 20.0

# Largest inbound frame accepted, in bytes (ntfy caps messages at 4 KiB,
# attachments are not synced).
MAX_FRAME_SIZE: int = 1048576

# Seconds allowed for one publish request, connect included.
PUBLISH_TIMEOUT: float = 10.0
