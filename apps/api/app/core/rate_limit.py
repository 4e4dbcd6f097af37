from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from app.core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class RateLimitState:
    last_request_time: float | None = None
    daily_request_count: int = 0


class TextRateLimiter:
    """Request spacing and a daily call ceiling for the text vendor.

    State lives for the lifetime of the process and has no reset hook. The
    read-modify-write in ``wait_for_slot`` is not locked: two requests that
    interleave around the interval check can both see the same
    ``last_request_time`` and dispatch together. Treat the limiter as advisory
    under concurrent load; a multi-instance deployment needs a shared counter.
    """

    def __init__(
        self,
        min_interval_ms: int = 4000,
        max_daily: int = 1400,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.min_interval_ms = min_interval_ms
        self.max_daily = max_daily
        self.state = RateLimitState()
        self._clock = clock
        self._sleep = sleep

    def quota_available(self) -> bool:
        return self.state.daily_request_count < self.max_daily

    async def wait_for_slot(self) -> float:
        """Sleep until the minimum interval has elapsed, then stamp the dispatch time."""
        last = self.state.last_request_time
        if last is not None:
            elapsed_ms = (self._clock() - last) * 1000
            if elapsed_ms < self.min_interval_ms:
                wait_ms = self.min_interval_ms - elapsed_ms
                logger.info("Waiting %.0fms before next text request", wait_ms)
                await self._sleep(wait_ms / 1000)

        dispatched_at = self._clock()
        self.state.last_request_time = dispatched_at
        return dispatched_at

    def record_success(self) -> None:
        self.state.daily_request_count += 1


text_rate_limiter = TextRateLimiter(
    min_interval_ms=settings.min_request_interval_ms,
    max_daily=settings.max_daily_requests,
)
