# -*- coding: utf-8 -*-
"""Unit tests for CallRateLimiter."""

from __future__ import annotations

import asyncio
import time

import pytest

from ledger_history.clients.rate_limiter import CallRateLimiter


class _FakeClock:
    """Manual monotonic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def _limiter(clock: _FakeClock, interval: float = 0.25) -> CallRateLimiter:
    return CallRateLimiter(interval, clock=clock, sleep=clock.sleep)


async def test_first_call_does_not_wait() -> None:
    clock = _FakeClock()
    limiter = _limiter(clock)

    async with limiter.slot():
        pass

    assert clock.sleeps == []


async def test_second_call_waits_for_full_interval() -> None:
    clock = _FakeClock()
    limiter = _limiter(clock)

    async with limiter.slot():
        pass
    async with limiter.slot():
        pass

    assert clock.sleeps == [0.25]
    assert clock.now == 100.25


async def test_interval_counts_from_end_of_previous_call() -> None:
    clock = _FakeClock()
    limiter = _limiter(clock)

    async with limiter.slot():
        clock.now += 1.0  # slow network call
    async with limiter.slot():
        pass

    assert clock.sleeps == [0.25]


async def test_no_wait_after_idle_period_longer_than_interval() -> None:
    clock = _FakeClock()
    limiter = _limiter(clock)

    async with limiter.slot():
        pass
    clock.now += 5.0
    async with limiter.slot():
        pass

    assert clock.sleeps == []


async def test_deadline_is_armed_when_call_raises() -> None:
    clock = _FakeClock()
    limiter = _limiter(clock)

    with pytest.raises(RuntimeError):
        async with limiter.slot():
            raise RuntimeError("boom")
    async with limiter.slot():
        pass

    assert clock.sleeps == [0.25]


def test_negative_interval_is_rejected() -> None:
    with pytest.raises(ValueError, match="interval_seconds"):
        CallRateLimiter(-1.0)


async def test_concurrent_callers_are_serialized_and_spaced() -> None:
    interval = 0.05
    limiter = CallRateLimiter(interval)
    starts: list[float] = []
    in_flight = 0
    max_in_flight = 0

    async def call() -> None:
        nonlocal in_flight, max_in_flight
        async with limiter.slot():
            starts.append(time.monotonic())
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
            await asyncio.sleep(0.005)
            in_flight -= 1

    t0 = time.monotonic()
    await asyncio.gather(*(call() for _ in range(4)))

    assert max_in_flight == 1
    assert len(starts) == 4
    assert starts[0] - t0 < interval
    gaps = [later - earlier for earlier, later in zip(starts, starts[1:])]
    assert all(gap >= interval for gap in gaps)
