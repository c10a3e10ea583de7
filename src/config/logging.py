"""Logging configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_str, get_bool

LOG_LEVEL: str = get_str("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

SHOW_ACCESS_LOGS: bool = get_bool("SHOW_ACCESS_LOGS", False)

__all__ = ["LOG_FORMAT", "LOG_LEVEL", "SHOW_ACCESS_LOGS"]
