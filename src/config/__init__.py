"""Configuration module exports (env-resolved constants only)."""

from .server import HOST, PORT, CORS_ORIGINS
from .websocket import WS_ENDPOINT_PATH
from .limits import MAX_CONCURRENT_CONNECTIONS

__all__ = [
    "CORS_ORIGINS",
    "HOST",
    "MAX_CONCURRENT_CONNECTIONS",
    "PORT",
    "WS_ENDPOINT_PATH",
]
