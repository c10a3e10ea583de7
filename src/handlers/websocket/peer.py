"""Handle for one accepted WebSocket peer."""

from __future__ import annotations

import time
import uuid
import asyncio
import logging
from typing import Any

from src.errors import TransportError
from src.state.connection import ConnectionState

logger = logging.getLogger(__name__)


def _new_connection_id() -> str:
    return uuid.uuid4().hex[:12]


class PeerConnection:
    """Identity, open/closed state and serialized writes for one peer.

    Writes are serialized with a per-peer lock so concurrent fan-outs never
    interleave frames on the same socket. A failed write flips the peer to
    ``CLOSED``; every later write fails fast with :class:`TransportError`.
    """

    def __init__(self, ws: Any, *, connection_id: str | None = None) -> None:
        self.ws = ws
        self.connection_id = connection_id or _new_connection_id()
        self.connected_at = time.time()
        self.state = ConnectionState.OPEN
        self.close_reason: str | None = None
        # Last `configuration` payload; peer-local, never broadcast.
        self.configuration: dict[str, Any] | None = None
        self._send_lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"PeerConnection(id={self.connection_id!r}, state={self.state.value})"

    @property
    def is_open(self) -> bool:
        return self.state is ConnectionState.OPEN

    def mark_closed(self, reason: str) -> bool:
        """Enter ``CLOSED``. Returns False if the peer was already closed."""
        if self.state is ConnectionState.CLOSED:
            return False
        self.state = ConnectionState.CLOSED
        self.close_reason = reason
        return True

    async def send_text(self, text: str) -> None:
        if not self.is_open:
            raise TransportError(self.connection_id, "connection closed")
        async with self._send_lock:
            if not self.is_open:
                raise TransportError(self.connection_id, "connection closed")
            try:
                await self.ws.send_text(text)
            except Exception as exc:
                self.mark_closed("send_failed")
                raise TransportError(self.connection_id, f"send failed: {exc!r}") from exc


__all__ = ["PeerConnection"]
