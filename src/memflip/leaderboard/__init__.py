"""Leaderboard persistence: append-only CSV log and top-N ranking."""

from memflip.leaderboard.errors import (
    LeaderboardError,
    LeaderboardReadError,
    LeaderboardWriteError,
    MalformedRecordError,
)
from memflip.leaderboard.models import HEADER, LeaderboardRecord
from memflip.leaderboard.store import LeaderboardStore

__all__ = [
    "HEADER",
    "LeaderboardError",
    "LeaderboardReadError",
    "LeaderboardRecord",
    "LeaderboardStore",
    "LeaderboardWriteError",
    "MalformedRecordError",
]
