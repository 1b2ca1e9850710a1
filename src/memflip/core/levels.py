"""Per-level data: symbol alphabets and time limits, keyed by level number."""

from __future__ import annotations

from dataclasses import dataclass

from memflip.core.enums import LevelId

PAIRS_PER_BOARD = 8
TILES_PER_BOARD = PAIRS_PER_BOARD * 2


@dataclass(frozen=True, slots=True)
class LevelSpec:
    """Immutable definition of one level.

    Args:
        level: Ordinal of the level.
        symbols: The distinct symbols placed on the board (each twice).
        time_limit_ms: Countdown length for the level.
    """

    level: LevelId
    symbols: tuple[str, ...]
    time_limit_ms: int

    def __post_init__(self) -> None:
        if len(set(self.symbols)) != PAIRS_PER_BOARD:
            raise ValueError(
                f"Level {self.level} needs {PAIRS_PER_BOARD} distinct symbols, "
                f"got {len(set(self.symbols))}"
            )
        if self.time_limit_ms <= 0:
            raise ValueError("Time limit must be positive")


LEVELS: dict[LevelId, LevelSpec] = {
    LevelId.ONE: LevelSpec(
        LevelId.ONE,
        ("A", "B", "C", "D", "E", "F", "G", "H"),
        60_000,
    ),
    LevelId.TWO: LevelSpec(
        LevelId.TWO,
        ("1", "2", "3", "4", "5", "6", "7", "8"),
        50_000,
    ),
    LevelId.THREE: LevelSpec(
        LevelId.THREE,
        (
            "Apple",
            "Banana",
            "Cherry",
            "Date",
            "Elderberry",
            "Fig",
            "Grape",
            "Honeydew",
        ),
        40_000,
    ),
}

FIRST_LEVEL = LevelId.ONE
LEVEL_COUNT = len(LEVELS)


def level_spec(level: int) -> LevelSpec:
    """Look up the definition of *level* (1-based)."""
    try:
        return LEVELS[LevelId(level)]
    except (ValueError, KeyError):
        raise ValueError(f"Unknown level: {level!r}") from None
