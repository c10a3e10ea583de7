"""Minimal relay client: publish envelopes, or listen and hand them to a callback."""

from __future__ import annotations

import json
import time
import asyncio
import logging
from typing import Any
from collections.abc import Callable

import websockets

from tests.params import config
from tests.utils.network import ws_url

logger = logging.getLogger(__name__)


class RelayClient:
    def __init__(self, server: str, secure: bool = False) -> None:
        self.url = ws_url(server, secure)
        self.received: list[dict[str, Any]] = []
        self.sent = 0
        self.connect_elapsed_s: float | None = None

    def _connect(self):
        return websockets.connect(
            self.url,
            ping_interval=config.WS_PING_INTERVAL_S,
            ping_timeout=config.WS_PING_TIMEOUT_S,
        )

    async def _recv_loop(self, ws, on_message: Callable[[dict[str, Any]], None] | None) -> None:
        async for raw in ws:
            try:
                msg = json.loads(raw)
            except (TypeError, ValueError):
                logger.debug("non-JSON frame ignored: %r", raw)
                continue
            self.received.append(msg)
            if on_message is not None:
                on_message(msg)

    async def publish(
        self,
        envelopes: list[dict[str, Any]],
        *,
        interval_s: float,
        linger_s: float = 0.5,
        on_message: Callable[[dict[str, Any]], None] | None = None,
    ) -> None:
        """Send envelopes in order, then keep reading echoes or errors for ``linger_s``."""
        start = time.perf_counter()
        async with self._connect() as ws:
            self.connect_elapsed_s = time.perf_counter() - start
            recv_task = asyncio.create_task(self._recv_loop(ws, on_message))
            try:
                for envelope in envelopes:
                    await ws.send(json.dumps(envelope))
                    self.sent += 1
                    if interval_s > 0:
                        await asyncio.sleep(interval_s)
                await asyncio.sleep(linger_s)
            finally:
                recv_task.cancel()
                await asyncio.gather(recv_task, return_exceptions=True)

    async def listen(
        self,
        *,
        duration_s: float | None,
        on_message: Callable[[dict[str, Any]], None] | None = None,
    ) -> None:
        """Read envelopes until ``duration_s`` elapses (forever when None) or the server closes."""
        start = time.perf_counter()
        async with self._connect() as ws:
            self.connect_elapsed_s = time.perf_counter() - start
            try:
                await asyncio.wait_for(self._recv_loop(ws, on_message), timeout=duration_s)
            except TimeoutError:
                return
            except websockets.exceptions.ConnectionClosed as exc:
                logger.info("connection closed code=%s reason=%s", exc.code, exc.reason)


__all__ = ["RelayClient"]
