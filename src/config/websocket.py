"""WebSocket protocol configuration and constants."""

from __future__ import annotations

from .env import get_int, get_str, get_float

WS_ENDPOINT_PATH: str = get_str("WS_ENDPOINT_PATH", "/")

# Envelope keys
WS_KEY_TYPE = "type"
WS_KEY_DATA = "data"
WS_KEY_TIMESTAMP = "timestamp"

# Server-originated envelope types
WS_TYPE_ERROR = "error"

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_IDLE_CODE = 4000
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_MAX_DURATION_CODE = 4003

WS_CLOSE_IDLE_REASON = "idle timeout"
WS_CLOSE_MAX_DURATION_REASON = "max connection duration reached"

# Largest inbound frame the relay will decode (matches the 1 MiB payload cap
# the dashboard deployment has always used). 0 disables the check.
WS_MAX_FRAME_BYTES: int = max(0, get_int("WS_MAX_FRAME_BYTES", 1024 * 1024))

# Idle watchdog. Both limits are off by default; idle reaping is normally left
# to the proxy in front of the relay.
WS_IDLE_TIMEOUT_S: float = max(0.0, get_float("WS_IDLE_TIMEOUT_S", 0.0))
WS_WATCHDOG_TICK_S: float = get_float("WS_WATCHDOG_TICK_S", 5.0)
if WS_WATCHDOG_TICK_S <= 0:
    WS_WATCHDOG_TICK_S = 5.0
WS_MAX_CONNECTION_DURATION_S: float = max(0.0, get_float("WS_MAX_CONNECTION_DURATION_S", 0.0))

# Errors (data.code values)
WS_ERROR_MALFORMED_FRAME = "malformed_frame"
WS_ERROR_OVERSIZED_FRAME = "oversized_frame"
WS_ERROR_RATE_LIMITED = "rate_limited"
WS_ERROR_SERVER_AT_CAPACITY = "server_at_capacity"

__all__ = [
    "WS_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_DATA",
    "WS_KEY_TIMESTAMP",
    "WS_TYPE_ERROR",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_MAX_DURATION_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_MAX_DURATION_REASON",
    "WS_MAX_FRAME_BYTES",
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "WS_MAX_CONNECTION_DURATION_S",
    "WS_ERROR_MALFORMED_FRAME",
    "WS_ERROR_OVERSIZED_FRAME",
    "WS_ERROR_RATE_LIMITED",
    "WS_ERROR_SERVER_AT_CAPACITY",
]
