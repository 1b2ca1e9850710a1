"""Application settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

LEADERBOARD_ENV = "MEMFLIP_LEADERBOARD"


@dataclass
class GameSettings:
    """All tunable settings."""

    # Persistence
    leaderboard_path: Path = Path("leaderboard.csv")
    leaderboard_size: int = 3

    # Timing
    tick_interval_ms: int = 1000
    mismatch_delay_ms: int = 500

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameSettings:
        """Defaults, with the leaderboard path taken from the environment if set."""
        env = os.environ if environ is None else environ
        settings = cls()
        path = env.get(LEADERBOARD_ENV, "").strip()
        if path:
            settings = replace(settings, leaderboard_path=Path(path).expanduser())
        return settings
