"""Frame codec for the relay's JSON envelope.

Inbound frames are ``{"type": str, "data": object}``. Decoding never raises:
anything the relay will not route comes back as a :class:`Dropped` with a
reason, so callers can log it, optionally answer the sender, and move on.
"""

from __future__ import annotations

from typing import Any

import orjson

from src.config.websocket import (
    WS_KEY_DATA,
    WS_KEY_TYPE,
    WS_TYPE_ERROR,
    WS_KEY_TIMESTAMP,
)

from .kinds import EnvelopeKind
from .envelope import Dropped, Envelope, DropReason

_MAX_UTF8_BYTES_PER_CHAR = 4


def _frame_size(raw: str | bytes) -> int:
    if isinstance(raw, (bytes, bytearray)):
        return len(raw)
    return len(raw.encode("utf-8", errors="surrogatepass"))


def _exceeds(raw: str | bytes, max_frame_bytes: int) -> bool:
    if max_frame_bytes <= 0:
        return False
    if isinstance(raw, str) and len(raw) * _MAX_UTF8_BYTES_PER_CHAR <= max_frame_bytes:
        return False
    return _frame_size(raw) > max_frame_bytes


def _malformed(detail: str) -> Dropped:
    return Dropped(reason=DropReason.MALFORMED_FRAME, detail=detail)


def decode_frame(raw: str | bytes, *, max_frame_bytes: int = 0) -> Envelope | Dropped:
    if _exceeds(raw, max_frame_bytes):
        return Dropped(
            reason=DropReason.OVERSIZED_FRAME,
            detail=f"frame is {_frame_size(raw)} bytes; limit is {max_frame_bytes}",
        )

    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        return _malformed(f"invalid JSON: {exc}")

    if not isinstance(msg, dict):
        return _malformed("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type:
        return _malformed("message missing non-empty 'type'")

    kind = EnvelopeKind.from_type(msg_type)
    if kind is None:
        return Dropped(
            reason=DropReason.UNKNOWN_KIND,
            detail=f"message type '{msg_type}' is not relayed",
            raw_type=msg_type,
            raw_data=msg.get(WS_KEY_DATA),
        )

    if WS_KEY_DATA not in msg:
        return _malformed("message missing 'data'")
    data = msg[WS_KEY_DATA]
    if not isinstance(data, dict):
        return _malformed("message 'data' must be an object")

    # A sender-supplied top-level timestamp is never trusted; the dispatcher
    # stamps broadcasts itself.
    return Envelope(kind=kind, data=data)


def encode_envelope(envelope: Envelope) -> str:
    return orjson.dumps(envelope.to_wire()).decode("utf-8")


def build_error_data(
    code: str,
    message: str,
    *,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    return {"code": code, "message": message, "details": dict(details or {})}


def encode_error(
    code: str,
    message: str,
    *,
    timestamp: int,
    details: dict[str, Any] | None = None,
) -> str:
    frame = {
        WS_KEY_TYPE: WS_TYPE_ERROR,
        WS_KEY_DATA: build_error_data(code, message, details=details),
        WS_KEY_TIMESTAMP: int(timestamp),
    }
    return orjson.dumps(frame).decode("utf-8")


__all__ = ["build_error_data", "decode_frame", "encode_envelope", "encode_error"]
