"""GameSession — the mutable state of one play-through."""

from __future__ import annotations

from dataclasses import dataclass, field

from memflip.core.board import Board
from memflip.core.enums import LevelId
from memflip.core.levels import FIRST_LEVEL
from memflip.core.scoring import ScoreLedger
from memflip.game.interfaces import GamePhase


@dataclass(slots=True)
class GameSession:
    """Everything that changes while a player works through the levels.

    Owned by the :class:`~memflip.game.controller.GameController`; nothing
    else mutates it.  ``failed`` latches once a level times out so the
    failure is reported only once per attempt.
    """

    player_name: str
    level: LevelId = FIRST_LEVEL
    board: Board | None = None
    phase: GamePhase = GamePhase.NOT_STARTED
    matched_pairs: int = 0
    moves: int = 0
    scores: ScoreLedger = field(default_factory=ScoreLedger)
    failed: bool = False
    paused: bool = False
    first_selection: int | None = None
    second_selection: int | None = None

    @property
    def selection(self) -> tuple[int, ...]:
        """Face-up tiles pending resolution (zero, one or two indices)."""
        return tuple(
            i for i in (self.first_selection, self.second_selection) if i is not None
        )

    @property
    def total_score(self) -> int:
        return self.scores.total

    def clear_selection(self) -> None:
        self.first_selection = None
        self.second_selection = None
