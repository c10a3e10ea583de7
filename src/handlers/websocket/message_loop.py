"""WebSocket message loop: receive, rate limit, decode, dispatch."""

from __future__ import annotations

import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect

from src.errors import TransportError
from src.state.runtime import RuntimeDeps
from src.relay.codec import decode_frame
from src.relay.envelope import Dropped, DropReason
from src.handlers.limits import SlidingWindowRateLimiter
from src.config.websocket import WS_CLOSE_NORMAL_CODE, WS_ERROR_MALFORMED_FRAME, WS_ERROR_OVERSIZED_FRAME

from .peer import PeerConnection
from .errors import send_error
from .limits import consume_limiter
from .lifecycle import WebSocketLifecycle

logger = logging.getLogger(__name__)

_DROP_ERROR_CODES: dict[DropReason, str] = {
    DropReason.MALFORMED_FRAME: WS_ERROR_MALFORMED_FRAME,
    DropReason.OVERSIZED_FRAME: WS_ERROR_OVERSIZED_FRAME,
}

CLOSE_REASON_CLIENT = "client_closed"
CLOSE_REASON_TRANSPORT = "transport_error"
CLOSE_REASON_SERVER = "server_closed"


async def _recv_frame_with_watchdog(
    ws: WebSocket,
    peer: PeerConnection,
    lifecycle: WebSocketLifecycle,
) -> tuple[str | bytes | None, bool]:
    try:
        message = await asyncio.wait_for(ws.receive(), timeout=lifecycle.watchdog_tick_s * 2)
    except TimeoutError:
        return None, lifecycle.should_close()
    except Exception as exc:
        raise TransportError(peer.connection_id, f"receive failed: {exc!r}") from exc

    if message.get("type") == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", WS_CLOSE_NORMAL_CODE), reason=message.get("reason"))
    text = message.get("text")
    if text is not None:
        return text, False
    return message.get("bytes"), False


async def _handle_dropped(peer: PeerConnection, dropped: Dropped, runtime_deps: RuntimeDeps) -> None:
    if not dropped.is_error:
        logger.info("Unknown message type %r from connection=%s; dropped", dropped.raw_type, peer.connection_id)
        return

    logger.warning("Dropped frame from connection=%s: %s", peer.connection_id, dropped.detail)
    if runtime_deps.settings.relay.report_malformed:
        await send_error(
            peer,
            error_code=_DROP_ERROR_CODES[dropped.reason],
            message=dropped.detail,
            timestamp=runtime_deps.dispatcher.clock.now_ms(),
        )


async def run_message_loop(
    peer: PeerConnection,
    lifecycle: WebSocketLifecycle,
    limiter: SlidingWindowRateLimiter,
    runtime_deps: RuntimeDeps,
) -> str:
    """Process frames from one peer in arrival order. Returns the close reason."""
    settings = runtime_deps.settings
    dispatcher = runtime_deps.dispatcher

    try:
        while True:
            raw, should_exit = await _recv_frame_with_watchdog(peer.ws, peer, lifecycle)
            if should_exit or not peer.is_open:
                return peer.close_reason or CLOSE_REASON_SERVER
            if raw is None:
                continue

            lifecycle.touch()

            ok = await consume_limiter(
                peer,
                limiter,
                timestamp=dispatcher.clock.now_ms(),
                report=settings.relay.report_malformed,
            )
            if not ok:
                continue

            outcome = decode_frame(raw, max_frame_bytes=settings.websocket.max_frame_bytes)
            if isinstance(outcome, Dropped):
                await _handle_dropped(peer, outcome, runtime_deps)
                continue

            logger.debug("Received %s from connection=%s", outcome.kind.value, peer.connection_id)
            await dispatcher.dispatch(peer, outcome)
    except WebSocketDisconnect as exc:
        logger.debug("WebSocket disconnect connection=%s code=%s", peer.connection_id, exc.code)
        return CLOSE_REASON_CLIENT
    except TransportError as exc:
        logger.warning("WebSocket transport error: %s", exc)
        return CLOSE_REASON_TRANSPORT


__all__ = ["CLOSE_REASON_CLIENT", "CLOSE_REASON_SERVER", "CLOSE_REASON_TRANSPORT", "run_message_loop"]
