"""Tests for the QTimer-backed scheduler."""

from __future__ import annotations

from PyQt6.QtCore import QCoreApplication, QEventLoop, QTimer

from memflip.ui.qt_scheduler import QtScheduler


def _spin(ms: int) -> None:
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


class TestQtScheduler:
    def test_call_fires(self, qapp: object) -> None:
        assert qapp is not None
        sched = QtScheduler()
        fired: list[int] = []
        call = sched.call_later(10, lambda: fired.append(1))
        assert call.active
        _spin(100)
        assert fired == [1]
        assert not call.active
        assert sched.pending == 0

    def test_cancel(self, qapp: object) -> None:
        assert qapp is not None
        sched = QtScheduler()
        fired: list[int] = []
        call = sched.call_later(10, lambda: fired.append(1))
        call.cancel()
        _spin(60)
        QCoreApplication.processEvents()
        assert fired == []
        assert sched.pending == 0

    def test_cancel_all(self, qapp: object) -> None:
        assert qapp is not None
        sched = QtScheduler()
        fired: list[int] = []
        for _ in range(3):
            sched.call_later(10, lambda: fired.append(1))
        sched.cancel_all()
        _spin(60)
        assert fired == []

    def test_clock_is_monotonic(self) -> None:
        sched = QtScheduler()
        a = sched.now_ms()
        b = sched.now_ms()
        assert b >= a
