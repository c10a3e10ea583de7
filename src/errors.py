"""Shared error types for the transcription relay."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RateLimitError(Exception):
    """Raised when a sliding-window rate limiter is saturated."""

    retry_in: float
    limit: int
    window_seconds: float


@dataclass(frozen=True, slots=True)
class TransportError(Exception):
    """Raised when reading from or writing to one peer connection fails.

    Scoped to a single connection: callers close and deregister that peer and
    carry on with everyone else.
    """

    connection_id: str
    reason: str

    def __str__(self) -> str:
        return f"connection {self.connection_id}: {self.reason}"


__all__ = ["RateLimitError", "TransportError"]
