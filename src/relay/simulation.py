"""Fire-and-forget synthetic transcription broadcasts for demos."""

from __future__ import annotations

import random
import asyncio
import logging
from typing import Any

from .kinds import EnvelopeKind
from .envelope import Envelope
from .dispatcher import BroadcastDispatcher

logger = logging.getLogger(__name__)


class TranscriptionSimulator:
    """Schedule a ``transcription_result`` broadcast after a fixed delay.

    The caller gets the task back but is not expected to await it. Pending
    tasks are tracked so shutdown can cancel them.
    """

    def __init__(
        self,
        dispatcher: BroadcastDispatcher,
        *,
        delay_s: float,
        default_text: str,
        confidence_range: tuple[float, float] = (0.7, 1.0),
        latency_range_ms: tuple[float, float] = (50.0, 150.0),
        rng: random.Random | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._delay_s = max(0.0, float(delay_s))
        self._default_text = default_text
        self._confidence_range = confidence_range
        self._latency_range_ms = latency_range_ms
        self._rng = rng or random.Random()
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def build_result(
        self,
        *,
        text: str | None = None,
        confidence: float | None = None,
        latency: float | None = None,
    ) -> Envelope:
        if confidence is None:
            confidence = self._rng.uniform(*self._confidence_range)
        if latency is None:
            latency = self._rng.uniform(*self._latency_range_ms)
        data: dict[str, Any] = {
            "text": text or self._default_text,
            "confidence": float(confidence),
            "latency": float(latency),
            "timestamp": self._dispatcher.clock.now_ms(),
        }
        return Envelope(kind=EnvelopeKind.TRANSCRIPTION_RESULT, data=data)

    def schedule(
        self,
        *,
        text: str | None = None,
        confidence: float | None = None,
        latency: float | None = None,
    ) -> asyncio.Task:
        task = asyncio.create_task(self._run(text=text, confidence=confidence, latency=latency))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def shutdown(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    async def _run(self, *, text: str | None, confidence: float | None, latency: float | None) -> None:
        await asyncio.sleep(self._delay_s)
        envelope = self.build_result(text=text, confidence=confidence, latency=latency)
        try:
            result = await self._dispatcher.broadcast(envelope)
        except Exception:
            logger.exception("Simulated transcription broadcast failed")
            return
        logger.info("Simulated transcription broadcast to %s connection(s)", result.recipients)


__all__ = ["TranscriptionSimulator"]
