"""Per-connection lifecycle: registry membership plus the optional watchdog."""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib

from src.state.connection import ConnectionState
from src.handlers.connections import ConnectionRegistry
from src.config.websocket import (
    WS_IDLE_TIMEOUT_S,
    WS_CLOSE_IDLE_CODE,
    WS_WATCHDOG_TICK_S,
    WS_CLOSE_IDLE_REASON,
    WS_CLOSE_MAX_DURATION_CODE,
    WS_CLOSE_MAX_DURATION_REASON,
    WS_MAX_CONNECTION_DURATION_S,
)

from .peer import PeerConnection

logger = logging.getLogger(__name__)


class WebSocketLifecycle:
    """Drive one peer through ``OPEN -> CLOSED``.

    ``close`` may be reached from several places for the same peer (client
    close, transport error, watchdog); only the first call transitions and
    registry removal is idempotent, so the active count never drops twice.
    """

    def __init__(
        self,
        peer: PeerConnection,
        registry: ConnectionRegistry,
        *,
        idle_timeout_s: float | None = None,
        watchdog_tick_s: float | None = None,
        max_connection_duration_s: float | None = None,
    ) -> None:
        self._peer = peer
        self._registry = registry
        self._idle_timeout_s = float(WS_IDLE_TIMEOUT_S if idle_timeout_s is None else idle_timeout_s)
        self._watchdog_tick_s = float(WS_WATCHDOG_TICK_S if watchdog_tick_s is None else watchdog_tick_s)
        self._max_connection_duration_s = float(
            WS_MAX_CONNECTION_DURATION_S if max_connection_duration_s is None else max_connection_duration_s
        )
        self._connection_start = time.monotonic()
        self._last_activity = time.monotonic()
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def peer(self) -> PeerConnection:
        return self._peer

    @property
    def state(self) -> ConnectionState:
        return self._peer.state

    @property
    def watchdog_enabled(self) -> bool:
        return self._idle_timeout_s > 0 or self._max_connection_duration_s > 0

    @property
    def watchdog_tick_s(self) -> float:
        return self._watchdog_tick_s

    def open(self) -> bool:
        added = self._registry.add(self._peer)
        if added:
            logger.info(
                "WebSocket connection opened connection=%s. Active: %s",
                self._peer.connection_id,
                self._registry.get_connection_count(),
            )
        return added

    def close(self, reason: str) -> bool:
        first = self._peer.mark_closed(reason)
        self._stop_event.set()
        if self._registry.remove(self._peer):
            logger.info(
                "WebSocket connection closed connection=%s reason=%s. Active: %s",
                self._peer.connection_id,
                self._peer.close_reason,
                self._registry.get_connection_count(),
            )
        return first

    def touch(self) -> None:
        self._last_activity = time.monotonic()

    def should_close(self) -> bool:
        return self._stop_event.is_set() or not self._peer.is_open

    def start(self) -> asyncio.Task | None:
        if not self.watchdog_enabled:
            return None
        if self._task is None:
            self._task = asyncio.create_task(self._watchdog_loop())
        return self._task

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await self._task
        self._task = None

    async def _expire(self, reason: str, *, code: int, close_reason: str) -> None:
        logger.info("WebSocket %s; closing connection=%s", close_reason, self._peer.connection_id)
        self.close(reason)
        with contextlib.suppress(Exception):
            await self._peer.ws.close(code=code, reason=close_reason)

    async def _watchdog_loop(self) -> None:
        try:
            while not self._stop_event.is_set():
                await asyncio.sleep(self._watchdog_tick_s)
                if self._stop_event.is_set():
                    break
                now = time.monotonic()
                if (
                    self._max_connection_duration_s > 0
                    and (now - self._connection_start) >= self._max_connection_duration_s
                ):
                    await self._expire(
                        "max_duration",
                        code=WS_CLOSE_MAX_DURATION_CODE,
                        close_reason=WS_CLOSE_MAX_DURATION_REASON,
                    )
                    break
                if self._idle_timeout_s > 0 and (now - self._last_activity) >= self._idle_timeout_s:
                    await self._expire("idle_timeout", code=WS_CLOSE_IDLE_CODE, close_reason=WS_CLOSE_IDLE_REASON)
                    break
        except asyncio.CancelledError:
            return
        except Exception:
            logger.debug("idle watchdog exiting due to unexpected error", exc_info=True)


__all__ = ["WebSocketLifecycle"]
