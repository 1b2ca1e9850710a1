"""GameController — the central orchestrator of a memory game.

Coordinates: Board generation, LevelTimer, ScoreLedger, LeaderboardStore.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from memflip.config import GameSettings
from memflip.core.board import Board, generate_board
from memflip.core.enums import LevelId
from memflip.core.levels import FIRST_LEVEL, PAIRS_PER_BOARD, level_spec
from memflip.core.names import validate_player_name
from memflip.core.scoring import CORRECT_MATCH_SCORE, INCORRECT_FLIP_PENALTY
from memflip.game.interfaces import (
    GamePhase,
    IGameController,
    IScheduler,
    ScheduledCall,
)
from memflip.game.session import GameSession
from memflip.game.timer import LevelTimer
from memflip.leaderboard.errors import LeaderboardWriteError
from memflip.leaderboard.models import LeaderboardRecord
from memflip.leaderboard.store import LeaderboardStore

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

TileCallback = Callable[[int], None]  # tile index
MatchCallback = Callable[[bool, int], None]  # correct, score delta
LevelCallback = Callable[[LevelId], None]
TimeCallback = Callable[[int], None]  # seconds remaining
FailedCallback = Callable[[], None]
CompletedCallback = Callable[[int], None]  # final score
PhaseCallback = Callable[[GamePhase], None]
PauseCallback = Callable[[bool], None]
WarningCallback = Callable[[str], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_tile_revealed: list[TileCallback] = field(default_factory=list)
    on_tile_hidden: list[TileCallback] = field(default_factory=list)
    on_match_resolved: list[MatchCallback] = field(default_factory=list)
    on_level_cleared: list[LevelCallback] = field(default_factory=list)
    on_level_advanced: list[LevelCallback] = field(default_factory=list)
    on_time_updated: list[TimeCallback] = field(default_factory=list)
    on_level_failed: list[FailedCallback] = field(default_factory=list)
    on_game_completed: list[CompletedCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_pause_changed: list[PauseCallback] = field(default_factory=list)
    on_warning: list[WarningCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns a :class:`GameSession` and every transition of it.

    Thread-safety: all methods, and every continuation handed to the
    scheduler, run on the single event-loop thread.
    """

    __slots__ = (
        "_scheduler",
        "_settings",
        "_store",
        "_rng",
        "_clock",
        "_timer",
        "_session",
        "_tick_call",
        "_hide_call",
        "_hide_deferred",
        "events",
    )

    def __init__(
        self,
        scheduler: IScheduler,
        *,
        settings: GameSettings | None = None,
        store: LeaderboardStore | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._scheduler = scheduler
        self._settings = settings or GameSettings()
        self._store = store
        self._rng = rng
        self._clock = clock
        self._timer = LevelTimer(scheduler.now_ms)
        self._session: GameSession | None = None
        self._tick_call: ScheduledCall | None = None
        self._hide_call: ScheduledCall | None = None
        self._hide_deferred = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession | None:
        return self._session

    @property
    def phase(self) -> GamePhase:
        if self._session is None:
            return GamePhase.NOT_STARTED
        return self._session.phase

    @property
    def board(self) -> Board | None:
        return self._session.board if self._session else None

    @property
    def timer(self) -> LevelTimer:
        return self._timer

    @property
    def is_paused(self) -> bool:
        return self._session is not None and self._session.paused

    @property
    def settings(self) -> GameSettings:
        return self._settings

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, player_name: str) -> None:
        name = validate_player_name(player_name)
        self._cancel_pending()
        self._timer.stop()
        self._session = GameSession(player_name=name)
        _LOGGER.info("New game for %s", name)
        self._load_level(FIRST_LEVEL)

    def reset_game(self) -> None:
        """Play again with the current player's name."""
        if self._session is None:
            raise RuntimeError("No game to reset; call new_game() first")
        self.new_game(self._session.player_name)

    def select_tile(self, index: int) -> None:
        s = self._session
        if s is None or s.paused or not s.phase.accepts_selection:
            return
        board = s.board
        if board is None or not board.in_range(index):
            return
        tile = board[index]
        if not tile.is_selectable:
            return

        tile.revealed = True
        self._emit(self.events.on_tile_revealed, index)

        if s.phase == GamePhase.AWAITING_FIRST:
            s.first_selection = index
            self._set_phase(GamePhase.AWAITING_SECOND)
            return

        s.second_selection = index
        s.moves += 1
        self._set_phase(GamePhase.RESOLVING)
        self._resolve()

    def pause(self) -> bool:
        s = self._session
        if s is None or s.paused or not s.phase.is_in_play:
            return False
        if not self._timer.pause():
            return False
        s.paused = True
        self._emit(self.events.on_pause_changed, True)
        return True

    def resume(self) -> bool:
        s = self._session
        if s is None or not s.paused:
            return False
        self._timer.resume()
        s.paused = False
        self._emit(self.events.on_pause_changed, False)
        if self._hide_deferred:
            self._hide_deferred = False
            self._hide_mismatch()
        return True

    def top_scores(self, n: int | None = None) -> list[LeaderboardRecord]:
        if self._store is None:
            return []
        return self._store.top_n(self._settings.leaderboard_size if n is None else n)

    def close(self) -> None:
        """Tear down the session and cancel every pending continuation."""
        self._cancel_pending()
        self._timer.stop()
        if self._session is not None:
            self._session = None
            self._emit(self.events.on_phase_changed, GamePhase.NOT_STARTED)

    # ── Match resolution ─────────────────────────────────────────────────

    def _resolve(self) -> None:
        s = self._require_session()
        board = self._require_board()
        assert s.first_selection is not None and s.second_selection is not None
        first = board[s.first_selection]
        second = board[s.second_selection]

        if first.symbol != second.symbol:
            s.scores.add_to_current_level(INCORRECT_FLIP_PENALTY)
            self._emit(self.events.on_match_resolved, False, INCORRECT_FLIP_PENALTY)
            self._hide_call = self._scheduler.call_later(
                self._settings.mismatch_delay_ms, self._on_hide_due
            )
            return

        s.scores.add_to_current_level(CORRECT_MATCH_SCORE)
        s.matched_pairs += 1
        first.matched = True
        second.matched = True
        s.clear_selection()
        self._emit(self.events.on_match_resolved, True, CORRECT_MATCH_SCORE)
        self._set_phase(GamePhase.AWAITING_FIRST)

        if s.matched_pairs >= PAIRS_PER_BOARD:
            self._complete_level()

    def _on_hide_due(self) -> None:
        self._hide_call = None
        if self.is_paused:
            self._hide_deferred = True
            return
        self._hide_mismatch()

    def _hide_mismatch(self) -> None:
        s = self._session
        if s is None or s.phase != GamePhase.RESOLVING or s.board is None:
            return
        for index in s.selection:
            s.board[index].revealed = False
            self._emit(self.events.on_tile_hidden, index)
        s.clear_selection()
        self._set_phase(GamePhase.AWAITING_FIRST)

    # ── Level progression ────────────────────────────────────────────────

    def _load_level(self, level: LevelId) -> None:
        s = self._require_session()
        spec = level_spec(level)
        self._cancel_hide()
        s.level = spec.level
        s.scores.set_level(spec.level)
        s.board = generate_board(spec.level, self._rng)
        s.matched_pairs = 0
        s.paused = False
        s.clear_selection()

        self._timer.start(spec.time_limit_ms)
        self._schedule_tick()
        self._set_phase(GamePhase.AWAITING_FIRST)
        self._emit(self.events.on_time_updated, self._timer.remaining_seconds())

    def _complete_level(self) -> None:
        s = self._require_session()
        self._timer.stop()
        self._cancel_tick()
        level = s.level

        if level.is_last:
            self._set_phase(GamePhase.GAME_CLEARED)
            _LOGGER.info(
                "%s cleared the game with %d points in %d moves",
                s.player_name,
                s.total_score,
                s.moves,
            )
            self._persist(
                LeaderboardRecord.stamped(
                    s.player_name, s.scores.per_level, s.total_score, self._clock()
                )
            )
            self._emit(self.events.on_game_completed, s.total_score)
            return

        self._set_phase(GamePhase.LEVEL_CLEARED)
        _LOGGER.info("%s cleared level %d", s.player_name, level)
        self._emit(self.events.on_level_cleared, level)
        if self._session is not s or s.phase != GamePhase.LEVEL_CLEARED:
            return  # a listener started over or closed the game
        self._load_level(level.next)
        self._emit(self.events.on_level_advanced, s.level)

    # ── Timer ────────────────────────────────────────────────────────────

    def _schedule_tick(self) -> None:
        self._cancel_tick()
        self._tick_call = self._scheduler.call_later(
            self._settings.tick_interval_ms, self._on_tick
        )

    def _on_tick(self) -> None:
        self._tick_call = None
        reading = self._timer.tick()
        if reading is None:
            return
        self._emit(self.events.on_time_updated, reading.seconds_remaining)
        if reading.expired:
            self._on_time_expired()
            return
        self._schedule_tick()

    def _on_time_expired(self) -> None:
        s = self._session
        if s is None or s.failed or s.matched_pairs >= PAIRS_PER_BOARD:
            return
        s.failed = True
        self._timer.stop()
        self._cancel_pending()
        self._set_phase(GamePhase.LEVEL_FAILED)
        _LOGGER.info("%s ran out of time on level %d", s.player_name, s.level)
        self._persist(
            LeaderboardRecord.stamped(
                s.player_name, s.scores.failure_scores(s.level), 0, self._clock()
            )
        )
        self._emit(self.events.on_level_failed)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _persist(self, record: LeaderboardRecord) -> None:
        if self._store is None:
            return
        try:
            self._store.append(record)
        except LeaderboardWriteError as exc:
            _LOGGER.warning("%s", exc)
            self._emit(self.events.on_warning, str(exc))

    def _cancel_tick(self) -> None:
        if self._tick_call is not None:
            self._tick_call.cancel()
            self._tick_call = None

    def _cancel_hide(self) -> None:
        if self._hide_call is not None:
            self._hide_call.cancel()
            self._hide_call = None
        self._hide_deferred = False

    def _cancel_pending(self) -> None:
        self._cancel_tick()
        self._cancel_hide()

    def _require_session(self) -> GameSession:
        if self._session is None:
            raise RuntimeError("No game in progress")
        return self._session

    def _require_board(self) -> Board:
        board = self._require_session().board
        if board is None:
            raise RuntimeError("No board for the current level")
        return board

    def _set_phase(self, phase: GamePhase) -> None:
        s = self._require_session()
        if s.phase == phase:
            return
        s.phase = phase
        self._emit(self.events.on_phase_changed, phase)

    def _emit(self, handlers: Sequence[Callable[..., None]], *args: object) -> None:
        for cb in list(handlers):
            cb(*args)
