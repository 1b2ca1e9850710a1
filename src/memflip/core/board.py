"""Board and tile model plus the shuffled board generator."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass

from memflip.core.enums import PALETTE, LevelId, TileColor
from memflip.core.levels import TILES_PER_BOARD, level_spec


@dataclass(slots=True)
class Tile:
    """One cell of the board. Mutated only by the game controller."""

    index: int
    symbol: str
    color: TileColor
    revealed: bool = False
    matched: bool = False

    @property
    def is_selectable(self) -> bool:
        return not (self.revealed or self.matched)


class Board:
    """Ordered sequence of tiles for the active level."""

    __slots__ = ("_level", "_tiles", "_colors")

    def __init__(
        self,
        level: LevelId,
        tiles: list[Tile],
        colors: dict[str, TileColor],
    ) -> None:
        self._level = level
        self._tiles = tiles
        self._colors = colors

    @property
    def level(self) -> LevelId:
        return self._level

    @property
    def colors(self) -> dict[str, TileColor]:
        """Symbol → color mapping (copy)."""
        return dict(self._colors)

    @property
    def symbols(self) -> list[str]:
        return [tile.symbol for tile in self._tiles]

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __getitem__(self, index: int) -> Tile:
        return self._tiles[index]

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tiles)

    def __repr__(self) -> str:
        return f"Board(level={int(self._level)}, symbols={self.symbols!r})"


def assign_colors(symbols: list[str]) -> dict[str, TileColor]:
    """Give each distinct symbol the next palette color in first-seen order."""
    colors: dict[str, TileColor] = {}
    for symbol in symbols:
        if symbol not in colors:
            colors[symbol] = PALETTE[len(colors) % len(PALETTE)]
    return colors


def generate_board(level: int, rng: random.Random | None = None) -> Board:
    """Build a shuffled 16-tile board for *level*.

    Every symbol of the level's alphabet is placed twice, then the layout
    is permuted uniformly (``Random.shuffle`` is Fisher-Yates).  Colors are
    assigned in the shuffled order.

    Raises:
        ValueError: If *level* is not a known level.
    """
    spec = level_spec(level)
    symbols = [symbol for symbol in spec.symbols for _ in range(2)]
    assert len(symbols) == TILES_PER_BOARD
    (rng or random).shuffle(symbols)

    colors = assign_colors(symbols)
    tiles = [
        Tile(index=i, symbol=symbol, color=colors[symbol])
        for i, symbol in enumerate(symbols)
    ]
    return Board(spec.level, tiles, colors)
