"""Health, connection count and demo simulation endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, APIRouter

from src.state.runtime import RuntimeDeps

from .schemas import SimulateTranscriptionRequest
from .dependencies import get_runtime_deps

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["relay"])


@router.get("/health")
async def health(runtime_deps: RuntimeDeps = Depends(get_runtime_deps)) -> dict[str, Any]:
    return {"status": "ok", "timestamp": runtime_deps.dispatcher.clock.now_ms()}


@router.get("/connections")
async def connections(runtime_deps: RuntimeDeps = Depends(get_runtime_deps)) -> dict[str, Any]:
    return {
        "activeConnections": runtime_deps.registry.get_connection_count(),
        "timestamp": runtime_deps.dispatcher.clock.now_ms(),
    }


@router.post("/simulate-transcription")
async def simulate_transcription(
    body: SimulateTranscriptionRequest | None = None,
    runtime_deps: RuntimeDeps = Depends(get_runtime_deps),
) -> dict[str, str]:
    body = body or SimulateTranscriptionRequest()
    runtime_deps.simulator.schedule(text=body.text, confidence=body.confidence, latency=body.latency)
    logger.debug("Simulated transcription scheduled (pending: %s)", runtime_deps.simulator.pending)
    return {"status": "simulation_started"}


__all__ = ["router"]
