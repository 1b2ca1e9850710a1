"""Qt event-loop scheduler built on single-shot QTimers."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from memflip.game.interfaces import IScheduler, ScheduledCall
from memflip.game.scheduler import monotonic_ms


class _QtCall(ScheduledCall):
    __slots__ = ("_timer", "_owner")

    def __init__(self, timer: QTimer, owner: QtScheduler) -> None:
        self._timer: QTimer | None = timer
        self._owner = owner

    @property
    def active(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._release()

    def _fire(self, callback: Callable[[], None]) -> None:
        if self._timer is None:
            return
        self._release()
        callback()

    def _release(self) -> None:
        timer, self._timer = self._timer, None
        self._owner._live.discard(self)
        if timer is not None:
            timer.deleteLater()


class QtScheduler(IScheduler):
    """Runs game continuations on the Qt main loop.

    Pending calls are held here until they fire or are cancelled, so their
    timers survive even without a Qt parent.
    """

    __slots__ = ("_parent", "_live")

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._live: set[_QtCall] = set()

    def now_ms(self) -> float:
        return monotonic_ms()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        call = _QtCall(timer, self)
        timer.timeout.connect(lambda: call._fire(callback))
        self._live.add(call)
        timer.start(max(0, int(delay_ms)))
        return call

    @property
    def pending(self) -> int:
        return len(self._live)

    def cancel_all(self) -> None:
        for call in list(self._live):
            call.cancel()
