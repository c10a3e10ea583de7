"""Rate limiting for inbound WebSocket frames."""

from __future__ import annotations

import math
import logging

from src.errors import RateLimitError
from src.config.websocket import WS_ERROR_RATE_LIMITED
from src.handlers.limits import SlidingWindowRateLimiter

from .peer import PeerConnection
from .errors import send_error

logger = logging.getLogger(__name__)


async def consume_limiter(
    peer: PeerConnection,
    limiter: SlidingWindowRateLimiter,
    *,
    timestamp: int,
    report: bool = True,
) -> bool:
    """Return False (after optionally telling the peer) when the frame must be dropped."""
    try:
        limiter.consume()
    except RateLimitError as exc:
        retry_in_s = int(max(1, math.ceil(float(exc.retry_in)))) if exc.retry_in else 1
        logger.warning("Rate limit hit connection=%s; dropping frame", peer.connection_id)
        if report:
            await send_error(
                peer,
                error_code=WS_ERROR_RATE_LIMITED,
                message=(
                    f"rate limit: at most {exc.limit} messages per {int(exc.window_seconds)} seconds; "
                    f"retry in {retry_in_s} seconds"
                ),
                timestamp=timestamp,
                details={
                    "retry_in": retry_in_s,
                    "limit": exc.limit,
                    "window_seconds": int(exc.window_seconds),
                },
            )
        return False
    return True


__all__ = ["consume_limiter"]
