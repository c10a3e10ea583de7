"""Error replies for the relay's WebSocket envelope."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

from src.errors import TransportError
from src.relay.codec import encode_error

from .peer import PeerConnection

logger = logging.getLogger(__name__)


async def safe_send_text(peer: PeerConnection, text: str) -> bool:
    try:
        await peer.send_text(text)
    except TransportError:
        logger.debug("WebSocket send failed connection=%s", peer.connection_id, exc_info=True)
        return False
    return True


async def send_error(
    peer: PeerConnection,
    *,
    error_code: str,
    message: str,
    timestamp: int,
    details: dict[str, Any] | None = None,
) -> bool:
    """Answer only the offending peer; a failure here is never fatal."""
    return await safe_send_text(peer, encode_error(error_code, message, timestamp=timestamp, details=details))


async def reject_connection(
    ws: WebSocket,
    *,
    error_code: str,
    message: str,
    close_code: int,
    timestamp: int,
) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        return
    try:
        await ws.send_text(encode_error(error_code, message, timestamp=timestamp))
    except Exception:
        logger.debug("WebSocket reject send failed", exc_info=True)
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = ["reject_connection", "safe_send_text", "send_error"]
