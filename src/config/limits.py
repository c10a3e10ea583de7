"""Admission control and rate limit configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_int, get_float

# 0 keeps the registry unbounded.
MAX_CONCURRENT_CONNECTIONS: int = max(0, get_int("MAX_CONCURRENT_CONNECTIONS", 0))

WS_MESSAGE_WINDOW_SECONDS: float = get_float("WS_MESSAGE_WINDOW_SECONDS", 60.0)
if WS_MESSAGE_WINDOW_SECONDS <= 0:
    WS_MESSAGE_WINDOW_SECONDS = 60.0

# Audio producers stream metrics every few hundred ms; leave generous headroom.
# 0 disables per-connection rate limiting.
WS_MAX_MESSAGES_PER_WINDOW: int = max(0, get_int("WS_MAX_MESSAGES_PER_WINDOW", 5000))

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "WS_MAX_MESSAGES_PER_WINDOW",
    "WS_MESSAGE_WINDOW_SECONDS",
]
