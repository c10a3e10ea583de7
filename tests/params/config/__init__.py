"""Shared developer client configuration."""

from __future__ import annotations

from .defaults import DEFAULT_COUNT, DEFAULT_TIMEOUT_S, DEFAULT_INTERVAL_S
from .websocket import WS_ENDPOINT_PATH, WS_PING_TIMEOUT_S, WS_PING_INTERVAL_S

__all__ = [
    "DEFAULT_COUNT",
    "DEFAULT_INTERVAL_S",
    "DEFAULT_TIMEOUT_S",
    "WS_ENDPOINT_PATH",
    "WS_PING_INTERVAL_S",
    "WS_PING_TIMEOUT_S",
]
