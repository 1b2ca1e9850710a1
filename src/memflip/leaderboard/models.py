"""Leaderboard record model and its CSV row form."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from memflip.core.levels import LEVEL_COUNT
from memflip.leaderboard.errors import MalformedRecordError

HEADER: tuple[str, ...] = (
    "Name",
    "Date",
    "Time",
    *(f"Level {i}" for i in range(1, LEVEL_COUNT + 1)),
    "Final Score",
)

DATE_FORMAT = "%d-%m-%Y"
TIME_FORMAT = "%H:%M"


@dataclass(frozen=True, slots=True)
class LeaderboardRecord:
    """One finished attempt, as stored in the log."""

    name: str
    date: str  # DD-MM-YYYY
    time: str  # HH:MM
    level_scores: tuple[int, ...]
    final_score: int

    @classmethod
    def stamped(
        cls,
        name: str,
        level_scores: Sequence[int],
        final_score: int,
        when: datetime,
    ) -> LeaderboardRecord:
        """Build a record dated at *when*."""
        scores = tuple(level_scores)
        if len(scores) != LEVEL_COUNT:
            raise ValueError(f"Expected {LEVEL_COUNT} level scores, got {len(scores)}")
        return cls(
            name=name,
            date=when.strftime(DATE_FORMAT),
            time=when.strftime(TIME_FORMAT),
            level_scores=scores,
            final_score=final_score,
        )

    def to_row(self) -> list[str]:
        return [
            self.name,
            self.date,
            self.time,
            *(str(score) for score in self.level_scores),
            str(self.final_score),
        ]

    @classmethod
    def from_row(cls, row: Sequence[str], line_no: int = 0) -> LeaderboardRecord:
        """Parse a CSV row.

        Raises:
            MalformedRecordError: Wrong field count or a non-integer final
                score. A non-integer level score is read as 0.
        """
        line = ",".join(row)
        if len(row) != len(HEADER):
            raise MalformedRecordError(
                line_no, line, f"expected {len(HEADER)} fields, got {len(row)}"
            )
        name, date, time = (field.strip() for field in row[:3])
        scores = tuple(_level_score(field) for field in row[3:-1])
        try:
            final = int(row[-1])
        except ValueError:
            raise MalformedRecordError(
                line_no, line, "non-numeric final score"
            ) from None
        return cls(name, date, time, scores, final)


def _level_score(field: str) -> int:
    try:
        return int(field)
    except ValueError:
        return 0
