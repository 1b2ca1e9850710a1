"""Core enumerations for the memory-game domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class LevelId(IntEnum):
    """Level ordinal (1-based, as shown to the player)."""

    ONE = 1
    TWO = 2
    THREE = 3

    @property
    def is_last(self) -> bool:
        return self is LevelId.THREE

    @property
    def next(self) -> LevelId:
        if self.is_last:
            raise ValueError("No level after the last one")
        return LevelId(self.value + 1)

    def __str__(self) -> str:
        return str(self.value)


class TileColor(StrEnum):
    """Light palette used for revealed tiles, one entry per symbol slot."""

    ROSE = "#ffcccc"
    MINT = "#ccffcc"
    LAVENDER = "#ccccff"
    LEMON = "#ffffcc"
    ORCHID = "#ffccff"
    PEACH = "#ffe5cc"
    LILAC = "#e5ccff"
    AQUA = "#ccffff"


PALETTE: tuple[TileColor, ...] = tuple(TileColor)
