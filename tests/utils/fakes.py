"""In-memory WebSocket double for unit tests."""

from __future__ import annotations

import json
import time
import asyncio
from typing import Any
from collections.abc import Callable


class FakeWebSocket:
    """Implements the slice of ``starlette.websockets.WebSocket`` the relay uses."""

    def __init__(self, *, fail_send: bool = False, fail_accept: bool = False) -> None:
        self.fail_send = fail_send
        self.fail_accept = fail_accept
        self.accepted = False
        self.closed = False
        self.close_code: int | None = None
        self.close_reason: str | None = None
        self.sent: list[str] = []
        self._inbound: asyncio.Queue[dict[str, Any]] = asyncio.Queue()

    async def accept(self) -> None:
        # The real handshake awaits the transport, handing control back to the loop.
        await asyncio.sleep(0)
        if self.fail_accept:
            raise RuntimeError("handshake failed")
        self.accepted = True

    async def receive(self) -> dict[str, Any]:
        return await self._inbound.get()

    async def send_text(self, text: str) -> None:
        if self.fail_send:
            raise RuntimeError("socket is gone")
        self.sent.append(text)

    async def close(self, *, code: int = 1000, reason: str | None = None) -> None:
        if self.closed:
            raise RuntimeError("close message already sent")
        self.closed = True
        self.close_code = code
        self.close_reason = reason

    def feed_text(self, text: str) -> None:
        self._inbound.put_nowait({"type": "websocket.receive", "text": text})

    def feed_json(self, payload: Any) -> None:
        self.feed_text(json.dumps(payload))

    def feed_bytes(self, data: bytes) -> None:
        self._inbound.put_nowait({"type": "websocket.receive", "bytes": data})

    def feed_disconnect(self, code: int = 1000) -> None:
        self._inbound.put_nowait({"type": "websocket.disconnect", "code": code})

    def sent_json(self) -> list[dict[str, Any]]:
        return [json.loads(text) for text in self.sent]


async def wait_until(predicate: Callable[[], bool], *, timeout: float = 2.0, interval: float = 0.005) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() >= deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(interval)


__all__ = ["FakeWebSocket", "wait_until"]
