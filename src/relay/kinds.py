"""Closed set of envelope kinds understood by the relay."""

from __future__ import annotations

from enum import Enum


class EnvelopeKind(str, Enum):
    CONFIGURATION = "configuration"
    AUDIO_DATA = "audio_data"
    TRANSCRIPTION_RESULT = "transcription_result"
    ACCURACY_METRICS = "accuracy_metrics"
    LATENCY_METRICS = "latency_metrics"

    @classmethod
    def from_type(cls, msg_type: str) -> EnvelopeKind | None:
        try:
            return cls(msg_type)
        except ValueError:
            return None

    @property
    def is_broadcast(self) -> bool:
        return self in BROADCAST_KINDS


BROADCAST_KINDS: frozenset[EnvelopeKind] = frozenset(
    {
        EnvelopeKind.TRANSCRIPTION_RESULT,
        EnvelopeKind.ACCURACY_METRICS,
        EnvelopeKind.LATENCY_METRICS,
    }
)

__all__ = ["BROADCAST_KINDS", "EnvelopeKind"]
