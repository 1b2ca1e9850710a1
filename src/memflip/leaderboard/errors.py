"""Leaderboard error taxonomy.

None of these is fatal to a game in progress: writes degrade to a warning
and reads degrade to an empty or partial ranking.
"""

from __future__ import annotations


class LeaderboardError(Exception):
    """Base class for leaderboard persistence problems."""


class LeaderboardWriteError(LeaderboardError):
    """Appending a record to the log failed."""


class LeaderboardReadError(LeaderboardError):
    """The log is missing or could not be read."""


class MalformedRecordError(LeaderboardError):
    """A log line could not be parsed into a record."""

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"line {line_no}: {reason}: {line!r}")
        self.line_no = line_no
        self.line = line
        self.reason = reason
