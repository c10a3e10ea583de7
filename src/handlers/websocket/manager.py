"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from src.state.runtime import RuntimeDeps
from src.handlers.limits import SlidingWindowRateLimiter
from src.config.websocket import WS_CLOSE_BUSY_CODE, WS_CLOSE_NORMAL_CODE, WS_ERROR_SERVER_AT_CAPACITY

from .peer import PeerConnection
from .errors import reject_connection
from .lifecycle import WebSocketLifecycle
from .message_loop import CLOSE_REASON_CLIENT, CLOSE_REASON_SERVER, run_message_loop

logger = logging.getLogger(__name__)


def _create_rate_limiter(runtime_deps: RuntimeDeps) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(
        limit=runtime_deps.settings.limits.ws_max_messages_per_window,
        window_seconds=runtime_deps.settings.limits.ws_message_window_seconds,
    )


async def _admit(ws: WebSocket, runtime_deps: RuntimeDeps) -> PeerConnection | None:
    registry = runtime_deps.registry
    if not registry.try_reserve(ws):
        logger.warning(
            "Rejecting WebSocket connection; at capacity (%s)",
            registry.max_connections,
        )
        await reject_connection(
            ws,
            error_code=WS_ERROR_SERVER_AT_CAPACITY,
            message="Server cannot accept new connections. Please try again later.",
            close_code=WS_CLOSE_BUSY_CODE,
            timestamp=runtime_deps.dispatcher.clock.now_ms(),
        )
        return None

    try:
        await ws.accept()
    except BaseException:
        registry.release(ws)
        raise
    return PeerConnection(ws)


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    peer = await _admit(ws, runtime_deps)
    if peer is None:
        return

    ws_settings = runtime_deps.settings.websocket
    lifecycle = WebSocketLifecycle(
        peer,
        runtime_deps.registry,
        idle_timeout_s=ws_settings.idle_timeout_s,
        watchdog_tick_s=ws_settings.watchdog_tick_s,
        max_connection_duration_s=ws_settings.max_connection_duration_s,
    )
    lifecycle.open()

    reason = CLOSE_REASON_SERVER
    try:
        lifecycle.start()
        reason = await run_message_loop(peer, lifecycle, _create_rate_limiter(runtime_deps), runtime_deps)
    finally:
        with contextlib.suppress(Exception):
            await lifecycle.stop()
        lifecycle.close(reason)
        if reason != CLOSE_REASON_CLIENT:
            with contextlib.suppress(Exception):
                await ws.close(code=WS_CLOSE_NORMAL_CODE)


__all__ = ["handle_websocket_connection"]
