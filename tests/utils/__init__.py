"""Test helpers.

Focused modules:
- fakes.py: in-memory stand-in for a Starlette WebSocket
- settings.py: AppSettings builder with fast test defaults
- network.py: ws url building for the developer clients
"""

from __future__ import annotations

from .network import ws_url
from .settings import make_settings
from .fakes import FakeWebSocket, wait_until

__all__ = ["FakeWebSocket", "make_settings", "wait_until", "ws_url"]
