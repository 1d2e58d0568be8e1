"""Fixed-window request throttle used as an httpx request hook.

Up to ``limit`` requests pass immediately in each window. The next request
waits for the rest of the current window, then opens a fresh one. Requests
are only ever delayed, never rejected.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

import httpx

logger = logging.getLogger(__name__)


class FixedWindowRateLimiter:
    """Per-client fixed-window throttle.

    State is a request counter and the window start time. An asyncio.Lock
    is held across the wait, so concurrent coroutines queue in arrival
    order and at most ``limit`` requests are released per window.

    Args:
        limit: Requests allowed per window (> 0).
        window_ms: Window length in milliseconds (> 0).
        clock: Monotonic clock in seconds.
        sleep: Coroutine used to wait.
    """

    def __init__(
        self,
        limit: int,
        window_ms: int,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if limit <= 0:
            raise ValueError("limit must be a positive integer")
        if window_ms <= 0:
            raise ValueError("window_ms must be a positive integer")
        self.limit = limit
        self.window_ms = window_ms
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self.count = 0
        self.window_start = clock()

    @property
    def window_seconds(self) -> float:
        return self.window_ms / 1000.0

    async def acquire(self) -> None:
        """Wait until a request may be sent, then count it."""
        async with self._lock:
            now = self._clock()
            if now - self.window_start >= self.window_seconds:
                self.count = 0
                self.window_start = now

            if self.count >= self.limit:
                wait = self.window_seconds - (now - self.window_start)
                logger.debug("Rate limit of %d reached, waiting %.3fs", self.limit, wait)
                await self._sleep(wait)
                self.count = 0
                self.window_start = self._clock()

            self.count += 1

    async def __call__(self, request: httpx.Request) -> None:
        await self.acquire()


__all__ = ["FixedWindowRateLimiter"]
