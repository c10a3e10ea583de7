"""Demo transcription simulation configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_float

SIMULATION_DELAY_S: float = max(0.0, get_float("SIMULATION_DELAY_MS", 100.0)) / 1000.0

SIMULATION_DEFAULT_TEXT = "Sample transcription text"

# Ranges used when the caller leaves a field out.
SIMULATION_CONFIDENCE_RANGE: tuple[float, float] = (0.7, 1.0)
SIMULATION_LATENCY_RANGE_MS: tuple[float, float] = (50.0, 150.0)

__all__ = [
    "SIMULATION_CONFIDENCE_RANGE",
    "SIMULATION_DEFAULT_TEXT",
    "SIMULATION_DELAY_S",
    "SIMULATION_LATENCY_RANGE_MS",
]
