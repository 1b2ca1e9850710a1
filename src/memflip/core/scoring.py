"""Score ledger: per-level and running total scores for one session."""

from __future__ import annotations

from memflip.core.enums import LevelId
from memflip.core.levels import FIRST_LEVEL, LEVEL_COUNT

CORRECT_MATCH_SCORE = 10
INCORRECT_FLIP_PENALTY = -2


class ScoreLedger:
    """Tracks the score of each level and their sum.

    Scores are not floored, a run of mismatches drives them negative.
    """

    __slots__ = ("_per_level", "_total", "_level")

    def __init__(self) -> None:
        self._per_level: list[int] = [0] * LEVEL_COUNT
        self._total = 0
        self._level = FIRST_LEVEL

    @property
    def current_level(self) -> LevelId:
        return self._level

    @property
    def per_level(self) -> tuple[int, ...]:
        return tuple(self._per_level)

    @property
    def total(self) -> int:
        return self._total

    def level_score(self, level: int) -> int:
        return self._per_level[LevelId(level) - 1]

    def set_level(self, level: int) -> None:
        """Direct subsequent deltas to *level*'s bucket."""
        self._level = LevelId(level)

    def add_to_current_level(self, delta: int) -> None:
        self._per_level[self._level - 1] += delta
        self._total += delta

    def reset(self) -> None:
        self._per_level = [0] * LEVEL_COUNT
        self._total = 0
        self._level = FIRST_LEVEL

    def failure_scores(self, level: int) -> tuple[int, ...]:
        """Per-level scores with *level* and every later level zeroed.

        Only levels strictly before the failed one were completed, so only
        those count on a failure record.
        """
        cutoff = LevelId(level) - 1
        return tuple(
            score if i < cutoff else 0 for i, score in enumerate(self._per_level)
        )
