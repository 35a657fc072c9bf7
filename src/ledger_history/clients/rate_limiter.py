# -*- coding: utf-8 -*-
"""Per-client call spacing: one call at a time, at least `interval` apart."""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any, Optional

import structlog


class CallRateLimiter:
    """Serializes callers through a single slot and spaces successive calls.

    The slot is an asyncio.Lock (waiters are served FIFO). The deadline for the
    next call is armed when the holder leaves the slot, success or failure,
    and is only read or written while the lock is held.
    """

    def __init__(
        self,
        interval_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the limiter, ready immediately.

        Args:
            interval_seconds: Minimum time between the start of two calls.
            clock: Monotonic clock (injected for tests).
            sleep: Async sleep (injected for tests).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        if interval_seconds < 0:
            raise ValueError("interval_seconds must be >= 0")
        self._interval = interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._ready_at = float("-inf")
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Hold the slot for one call.

        Waits for the lock, then until the deadline armed by the previous
        holder. On exit the next deadline is set to now + interval.
        """
        async with self._lock:
            waited = 0.0
            # Re-check after each sleep; the loop may wake marginally early.
            while (delay := self._ready_at - self._clock()) > 0:
                waited += delay
                await self._sleep(delay)
            if waited > 0:
                self._logger.debug("rate_limiter_waited", rate_limiter_wait_seconds=round(waited, 4))
            try:
                yield
            finally:
                self._ready_at = self._clock() + self._interval
