"""Tests for the deterministic ManualScheduler."""

import pytest

from memflip.game.scheduler import ManualScheduler


class TestManualScheduler:
    def test_fires_when_due(self) -> None:
        sched = ManualScheduler()
        fired: list[float] = []
        sched.call_later(500, lambda: fired.append(sched.now_ms()))
        sched.advance(499)
        assert fired == []
        sched.advance(1)
        assert fired == [500]

    def test_order_by_due_then_scheduling(self) -> None:
        sched = ManualScheduler()
        order: list[str] = []
        sched.call_later(200, lambda: order.append("b"))
        sched.call_later(100, lambda: order.append("a"))
        sched.call_later(200, lambda: order.append("c"))
        sched.advance(1_000)
        assert order == ["a", "b", "c"]

    def test_cancel(self) -> None:
        sched = ManualScheduler()
        fired: list[int] = []
        call = sched.call_later(10, lambda: fired.append(1))
        assert sched.pending == 1
        call.cancel()
        assert not call.active
        sched.advance(100)
        assert fired == []
        assert sched.pending == 0

    def test_rescheduling_callbacks_run_within_advance(self) -> None:
        sched = ManualScheduler()
        ticks: list[float] = []

        def tick() -> None:
            ticks.append(sched.now_ms())
            sched.call_later(1_000, tick)

        sched.call_later(1_000, tick)
        sched.advance_seconds(3.5)
        assert ticks == [1_000, 2_000, 3_000]
        assert sched.now_ms() == 3_500

    def test_rejects_negative(self) -> None:
        sched = ManualScheduler()
        with pytest.raises(ValueError):
            sched.advance(-1)
        with pytest.raises(ValueError):
            sched.call_later(-5, lambda: None)
