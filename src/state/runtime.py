"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from src.state.settings import AppSettings
    from src.handlers.connections import ConnectionRegistry
    from src.relay.dispatcher import BroadcastDispatcher
    from src.relay.simulation import TranscriptionSimulator


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    registry: ConnectionRegistry
    dispatcher: BroadcastDispatcher
    simulator: TranscriptionSimulator

    async def shutdown(self) -> None:
        try:
            await self.simulator.shutdown()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
