"""Decoded envelope and drop outcomes produced by the codec."""

from __future__ import annotations

from enum import Enum
from typing import Any
from dataclasses import field, replace, dataclass

from src.config.websocket import WS_KEY_DATA, WS_KEY_TYPE, WS_KEY_TIMESTAMP

from .kinds import EnvelopeKind


class DropReason(str, Enum):
    MALFORMED_FRAME = "malformed_frame"
    OVERSIZED_FRAME = "oversized_frame"
    UNKNOWN_KIND = "unknown_kind"


@dataclass(frozen=True, slots=True)
class Envelope:
    kind: EnvelopeKind
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: int | None = None

    def stamped(self, timestamp: int) -> Envelope:
        return replace(self, timestamp=int(timestamp))

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {WS_KEY_TYPE: self.kind.value, WS_KEY_DATA: self.data}
        if self.timestamp is not None:
            wire[WS_KEY_TIMESTAMP] = self.timestamp
        return wire


@dataclass(frozen=True, slots=True)
class Dropped:
    """A frame the relay will not route.

    ``UNKNOWN_KIND`` is not an error: the frame was well formed but named a
    type outside the closed set. ``raw_type`` and ``raw_data`` keep what the
    peer sent for logging.
    """

    reason: DropReason
    detail: str
    raw_type: str | None = None
    raw_data: Any = None

    @property
    def is_error(self) -> bool:
        return self.reason is not DropReason.UNKNOWN_KIND


__all__ = ["DropReason", "Dropped", "Envelope"]
