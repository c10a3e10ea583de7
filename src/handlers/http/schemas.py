"""Request models for the HTTP collaborator endpoints."""

from __future__ import annotations

from pydantic import Field, BaseModel


class SimulateTranscriptionRequest(BaseModel):
    """Every field is optional; the simulator fills in demo values."""

    text: str | None = Field(default=None, max_length=10_000)
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    latency: float | None = Field(default=None, ge=0.0)


__all__ = ["SimulateTranscriptionRequest"]
