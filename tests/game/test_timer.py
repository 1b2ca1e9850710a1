"""Tests for LevelTimer."""

import pytest

from memflip.game.interfaces import TimerState
from memflip.game.timer import LevelTimer


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _running_timer(limit_ms: int = 60_000) -> tuple[LevelTimer, _FakeClock]:
    clock = _FakeClock()
    timer = LevelTimer(clock)
    timer.start(limit_ms)
    return timer, clock


class TestTimerBasics:
    def test_stopped_initially(self) -> None:
        timer = LevelTimer(_FakeClock())
        assert timer.state == TimerState.STOPPED
        assert timer.tick() is None
        assert timer.remaining_ms() == 0

    def test_start_sets_running(self) -> None:
        timer, _ = _running_timer()
        assert timer.is_running
        assert timer.remaining_seconds() == 60

    def test_time_decreases(self) -> None:
        timer, clock = _running_timer()
        clock.now = 1_500
        reading = timer.tick()
        assert reading is not None
        assert reading.remaining_ms == 58_500
        assert reading.seconds_remaining == 58
        assert not reading.expired

    def test_rejects_non_positive_limit(self) -> None:
        timer = LevelTimer(_FakeClock())
        with pytest.raises(ValueError):
            timer.start(0)


class TestTimerPause:
    def test_paused_time_is_frozen(self) -> None:
        timer, clock = _running_timer()
        clock.now = 10_000
        assert timer.pause()
        clock.now = 40_000
        reading = timer.tick()
        assert reading is not None and reading.remaining_ms == 50_000
        assert timer.is_paused

    def test_resume_does_not_drift(self) -> None:
        timer, clock = _running_timer()
        clock.now = 10_000
        timer.pause()
        clock.now = 500_000
        assert timer.resume()
        assert timer.remaining_ms() == 50_000
        clock.now = 510_000
        assert timer.remaining_ms() == 40_000

    def test_pause_requires_running(self) -> None:
        timer = LevelTimer(_FakeClock())
        assert not timer.pause()
        assert not timer.resume()

    def test_double_pause_keeps_first_instant(self) -> None:
        timer, clock = _running_timer()
        clock.now = 5_000
        timer.pause()
        clock.now = 9_000
        assert not timer.pause()
        assert timer.remaining_ms() == 55_000

    def test_no_expiry_while_paused(self) -> None:
        timer, clock = _running_timer(1_000)
        timer.pause()
        clock.now = 10_000
        reading = timer.tick()
        assert reading is not None and not reading.expired


class TestTimerExpiry:
    def test_expires_exactly_once(self) -> None:
        timer, clock = _running_timer(3_000)
        clock.now = 3_000
        reading = timer.tick()
        assert reading is not None and reading.expired
        assert timer.state == TimerState.STOPPED
        clock.now = 4_000
        assert timer.tick() is None
        clock.now = 5_000
        assert timer.tick() is None

    def test_restart_after_expiry(self) -> None:
        timer, clock = _running_timer(1_000)
        clock.now = 2_000
        timer.tick()
        timer.start(5_000)
        clock.now = 3_000
        reading = timer.tick()
        assert reading is not None and reading.remaining_ms == 4_000

    def test_stop_freezes_remaining(self) -> None:
        timer, clock = _running_timer()
        clock.now = 12_000
        timer.stop()
        clock.now = 30_000
        assert timer.remaining_seconds() == 48
        assert timer.tick() is None
