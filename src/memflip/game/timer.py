"""Level countdown timer with drift-free pause/resume."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from memflip.game.interfaces import TimerState


@dataclass(frozen=True, slots=True)
class TimerReading:
    """Result of one :meth:`LevelTimer.tick`."""

    remaining_ms: int
    expired: bool

    @property
    def seconds_remaining(self) -> int:
        return max(0, self.remaining_ms) // 1000


class LevelTimer:
    """Countdown for a single level, read against an injected monotonic clock.

    Remaining time is ``limit - (now - start)``.  While paused, ``now`` is
    frozen at the pause instant; resuming shifts ``start`` forward by the
    paused duration, so pause length never eats into the limit.

    Expiry is reported by exactly one :meth:`tick`; the timer then stops and
    later ticks return ``None`` until :meth:`start` is called again.
    """

    __slots__ = ("_clock", "_state", "_limit_ms", "_start_ms", "_frozen_ms")

    def __init__(self, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._state = TimerState.STOPPED
        self._limit_ms = 0
        self._start_ms = 0.0
        self._frozen_ms = 0.0  # pause or stop instant

    # ── Transitions ──────────────────────────────────────────────────────

    def start(self, limit_ms: int) -> None:
        if limit_ms <= 0:
            raise ValueError("limit_ms must be positive")
        self._limit_ms = limit_ms
        self._start_ms = self._clock()
        self._state = TimerState.RUNNING

    def stop(self) -> None:
        if self._state == TimerState.RUNNING:
            self._frozen_ms = self._clock()
        self._state = TimerState.STOPPED

    def pause(self) -> bool:
        if self._state != TimerState.RUNNING:
            return False
        self._frozen_ms = self._clock()
        self._state = TimerState.PAUSED
        return True

    def resume(self) -> bool:
        if self._state != TimerState.PAUSED:
            return False
        self._start_ms += self._clock() - self._frozen_ms
        self._state = TimerState.RUNNING
        return True

    def tick(self) -> TimerReading | None:
        """Sample the countdown. Returns ``None`` while stopped."""
        if self._state == TimerState.STOPPED:
            return None
        remaining = self.remaining_ms()
        if remaining <= 0:
            self.stop()
            return TimerReading(remaining, expired=True)
        return TimerReading(remaining, expired=False)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self._state == TimerState.PAUSED

    @property
    def limit_ms(self) -> int:
        return self._limit_ms

    def remaining_ms(self) -> int:
        """Milliseconds left; may be negative once the limit has passed."""
        if self._limit_ms == 0:
            return 0
        now = self._clock() if self._state == TimerState.RUNNING else self._frozen_ms
        return int(self._limit_ms - (now - self._start_ms))

    def remaining_seconds(self) -> int:
        return max(0, self.remaining_ms()) // 1000
