"""Runtime dependency construction (registry, dispatcher, simulator)."""

from __future__ import annotations

import logging

from src.state import RuntimeDeps
from src.relay.clock import ServerClock
from src.state.settings import AppSettings
from src.relay.dispatcher import BroadcastDispatcher
from src.relay.simulation import TranscriptionSimulator
from src.handlers.connections import ConnectionRegistry

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None, *, clock: ServerClock | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    registry = ConnectionRegistry(max_connections=settings.limits.max_concurrent_connections)
    dispatcher = BroadcastDispatcher(
        registry,
        include_sender=settings.relay.include_sender,
        clock=clock or ServerClock(),
    )
    simulator = TranscriptionSimulator(
        dispatcher,
        delay_s=settings.simulation.delay_s,
        default_text=settings.simulation.default_text,
        confidence_range=settings.simulation.confidence_range,
        latency_range_ms=settings.simulation.latency_range_ms,
    )

    logger.info(
        "relay: include_sender=%s max_connections=%s max_frame_bytes=%s",
        settings.relay.include_sender,
        settings.limits.max_concurrent_connections or "unlimited",
        settings.websocket.max_frame_bytes,
    )
    return RuntimeDeps(
        settings=settings,
        registry=registry,
        dispatcher=dispatcher,
        simulator=simulator,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
