"""Route decoded envelopes: stamp and fan out broadcast kinds, keep the rest local."""

from __future__ import annotations

import logging
from dataclasses import field, dataclass
from typing import TYPE_CHECKING

from .clock import ServerClock
from .kinds import EnvelopeKind
from .codec import encode_envelope
from .envelope import Envelope

if TYPE_CHECKING:
    from src.handlers.connections import ConnectionRegistry
    from src.handlers.websocket.peer import PeerConnection

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchResult:
    kind: EnvelopeKind
    broadcast: bool = False
    recipients: int = 0
    failed: tuple[str, ...] = field(default_factory=tuple)
    timestamp: int | None = None


class BroadcastDispatcher:
    """Fans broadcast kinds out through the registry.

    ``include_sender`` decides whether the originating connection gets its own
    broadcast back. Server-originated broadcasts (no source) always reach
    every registered connection.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        *,
        include_sender: bool = True,
        clock: ServerClock | None = None,
    ) -> None:
        self._registry = registry
        self._include_sender = bool(include_sender)
        self.clock = clock or ServerClock()

    @property
    def include_sender(self) -> bool:
        return self._include_sender

    async def dispatch(self, source: PeerConnection | None, envelope: Envelope) -> DispatchResult:
        kind = envelope.kind
        if kind.is_broadcast:
            excluding = None if (self._include_sender or source is None) else source
            return await self._fan_out(envelope, excluding=excluding)

        source_id = source.connection_id if source is not None else None
        if kind is EnvelopeKind.CONFIGURATION:
            if source is not None:
                source.configuration = dict(envelope.data)
            # Values can hold credentials (apiKey); only the keys are logged.
            logger.info("Configuration received connection=%s keys=%s", source_id, sorted(envelope.data))
        elif kind is EnvelopeKind.AUDIO_DATA:
            logger.debug("Audio data received connection=%s (not relayed)", source_id)
        else:
            logger.debug("Envelope %s received connection=%s (not relayed)", kind.value, source_id)
        return DispatchResult(kind=kind)

    async def broadcast(self, envelope: Envelope) -> DispatchResult:
        return await self.dispatch(None, envelope)

    async def _fan_out(self, envelope: Envelope, *, excluding: PeerConnection | None) -> DispatchResult:
        stamped = envelope.stamped(self.clock.now_ms())
        frame = encode_envelope(stamped)
        targets = len(self._registry.snapshot(excluding))

        async def _send(peer: PeerConnection) -> None:
            await peer.send_text(frame)

        failed = await self._registry.for_each_other(excluding, _send)
        logger.debug(
            "Broadcast %s to %s connection(s), %s failed",
            stamped.kind.value,
            targets,
            len(failed),
        )
        return DispatchResult(
            kind=stamped.kind,
            broadcast=True,
            recipients=targets - len(failed),
            failed=tuple(peer.connection_id for peer in failed),
            timestamp=stamped.timestamp,
        )


__all__ = ["BroadcastDispatcher", "DispatchResult"]
