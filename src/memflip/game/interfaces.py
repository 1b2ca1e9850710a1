"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on a concrete event loop, so the
same game logic runs under Qt and under a deterministic test scheduler.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memflip.leaderboard.models import LeaderboardRecord


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a memory game session."""

    NOT_STARTED = auto()
    AWAITING_FIRST = auto()
    AWAITING_SECOND = auto()  # one tile face-up
    RESOLVING = auto()  # two tiles face-up
    LEVEL_CLEARED = auto()
    LEVEL_FAILED = auto()
    GAME_CLEARED = auto()

    @property
    def accepts_selection(self) -> bool:
        return self in (GamePhase.AWAITING_FIRST, GamePhase.AWAITING_SECOND)

    @property
    def is_in_play(self) -> bool:
        return self in (
            GamePhase.AWAITING_FIRST,
            GamePhase.AWAITING_SECOND,
            GamePhase.RESOLVING,
        )

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.LEVEL_FAILED, GamePhase.GAME_CLEARED)


class TimerState(IntEnum):
    """Level timer states."""

    STOPPED = auto()
    RUNNING = auto()
    PAUSED = auto()


# ── Scheduling ───────────────────────────────────────────────────────────────


class ScheduledCall(ABC):
    """Handle to a pending continuation."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until the call has fired or been cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Drop the call. No-op if it already fired."""


class IScheduler(ABC):
    """Single-threaded event loop facade: a clock plus delayed callbacks."""

    @abstractmethod
    def now_ms(self) -> float:
        """Monotonic time in milliseconds."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        """Run *callback* once on the loop after *delay_ms*."""


# ── Controller ───────────────────────────────────────────────────────────────


class IGameController(ABC):
    """Command surface exposed to the presentation layer."""

    @abstractmethod
    def new_game(self, player_name: str) -> None:
        """Start a fresh session. Raises ``PlayerNameError`` on a bad name."""

    @abstractmethod
    def select_tile(self, index: int) -> None:
        """Flip the tile at *index* if the game accepts it."""

    @abstractmethod
    def pause(self) -> bool:
        """Pause the level. Returns True if the game was paused."""

    @abstractmethod
    def resume(self) -> bool:
        """Resume a paused level. Returns True on success."""

    @abstractmethod
    def top_scores(self, n: int | None = None) -> list[LeaderboardRecord]:
        """Best *n* leaderboard records, highest final score first."""
