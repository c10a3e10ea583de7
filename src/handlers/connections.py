"""Registry of open WebSocket peers and the fan-out primitive."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from collections.abc import Callable, Awaitable

if TYPE_CHECKING:
    from src.handlers.websocket.peer import PeerConnection

logger = logging.getLogger(__name__)

PeerFn = Callable[["PeerConnection"], Awaitable[Any]]


class ConnectionRegistry:
    """Set of open peers keyed by connection id.

    Only ever touched from the event loop thread, so there is no lock.
    Fan-out walks a snapshot, which keeps removals that happen while sends
    are in flight from disturbing the iteration.
    """

    def __init__(self, *, max_connections: int = 0) -> None:
        self._max = max(0, int(max_connections))
        self._peers: dict[str, PeerConnection] = {}
        # Sockets admitted but not yet registered, keyed by id(ws).
        self._reserved: set[int] = set()

    def __len__(self) -> int:
        return len(self._peers)

    def __contains__(self, peer: object) -> bool:
        connection_id = getattr(peer, "connection_id", None)
        return connection_id is not None and self._peers.get(connection_id) is peer

    @property
    def max_connections(self) -> int:
        return self._max

    def at_capacity(self) -> bool:
        return self._max > 0 and len(self._peers) + len(self._reserved) >= self._max

    def get_connection_count(self) -> int:
        return len(self._peers)

    def try_reserve(self, ws: Any) -> bool:
        """Claim a slot for a socket before its handshake is accepted.

        Checking and claiming happen in one step with no await between them,
        so handshakes that arrive together cannot overshoot the cap.
        """
        key = id(ws)
        if key in self._reserved:
            return True
        if self.at_capacity():
            return False
        self._reserved.add(key)
        return True

    def release(self, ws: Any) -> None:
        self._reserved.discard(id(ws))

    def add(self, peer: PeerConnection) -> bool:
        self._reserved.discard(id(peer.ws))
        if peer.connection_id in self._peers:
            return False
        self._peers[peer.connection_id] = peer
        return True

    def remove(self, peer: PeerConnection) -> bool:
        if self._peers.get(peer.connection_id) is not peer:
            return False
        del self._peers[peer.connection_id]
        return True

    def snapshot(self, excluding: PeerConnection | None = None) -> list[PeerConnection]:
        return [peer for peer in self._peers.values() if peer is not excluding]

    async def for_each_other(self, excluding: PeerConnection | None, fn: PeerFn) -> list[PeerConnection]:
        """Apply ``fn`` to every registered peer except ``excluding``.

        ``excluding=None`` targets every peer. A peer whose ``fn`` raises is
        closed and removed; the rest still run. Returns the failed peers.
        """
        targets = self.snapshot(excluding)
        if not targets:
            return []

        results = await asyncio.gather(*(fn(peer) for peer in targets), return_exceptions=True)

        failed: list[PeerConnection] = []
        for peer, result in zip(targets, results):
            if not isinstance(result, BaseException):
                continue
            failed.append(peer)
            peer.mark_closed("send_failed")
            if self.remove(peer):
                logger.warning(
                    "Fan-out to connection %s failed; removed. Active: %s (%s)",
                    peer.connection_id,
                    len(self._peers),
                    result,
                )
        return failed


__all__ = ["ConnectionRegistry", "PeerFn"]
