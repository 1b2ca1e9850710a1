"""Deterministic scheduler for tests and headless simulation."""

from __future__ import annotations

import time
from collections.abc import Callable

from memflip.game.interfaces import IScheduler, ScheduledCall


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class _ManualCall(ScheduledCall):
    __slots__ = ("due_ms", "seq", "callback", "_active")

    def __init__(self, due_ms: float, seq: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.seq = seq
        self.callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def _mark_fired(self) -> None:
        self._active = False


class ManualScheduler(IScheduler):
    """Virtual-time scheduler. Time only moves when :meth:`advance` is called.

    Due callbacks run in (due time, scheduling order) order, and the clock
    reads the callback's due time while it runs.  Callbacks may schedule
    further calls; those fire within the same ``advance`` if they fall due.
    """

    __slots__ = ("_now", "_seq", "_calls")

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._seq = 0
        self._calls: list[_ManualCall] = []

    def now_ms(self) -> float:
        return self._now

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        if delay_ms < 0:
            raise ValueError("delay_ms must be non-negative")
        call = _ManualCall(self._now + delay_ms, self._seq, callback)
        self._seq += 1
        self._calls.append(call)
        return call

    @property
    def pending(self) -> int:
        """Number of calls that have neither fired nor been cancelled."""
        return sum(1 for call in self._calls if call.active)

    def advance(self, ms: float) -> None:
        """Move virtual time forward by *ms*, firing everything that falls due."""
        if ms < 0:
            raise ValueError("Cannot move time backwards")
        target = self._now + ms
        while True:
            self._calls = [call for call in self._calls if call.active]
            due = [call for call in self._calls if call.due_ms <= target]
            if not due:
                break
            call = min(due, key=lambda c: (c.due_ms, c.seq))
            self._now = max(self._now, call.due_ms)
            call._mark_fired()
            call.callback()
        self._now = target

    def advance_seconds(self, seconds: float) -> None:
        self.advance(seconds * 1000.0)
