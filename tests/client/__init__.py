"""WebSocket client used by the runnable scripts under tests/e2e/."""

from __future__ import annotations

from .relay import RelayClient

__all__ = ["RelayClient"]
