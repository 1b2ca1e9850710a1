"""Core domain layer — boards, levels, scoring. No external dependencies.

Quick start::

    from memflip.core import generate_board

    board = generate_board(1)
    for tile in board:
        print(tile.index, tile.symbol, tile.color)
"""

from memflip.core.board import Board, Tile, assign_colors, generate_board
from memflip.core.enums import PALETTE, LevelId, TileColor
from memflip.core.levels import (
    FIRST_LEVEL,
    LEVEL_COUNT,
    LEVELS,
    PAIRS_PER_BOARD,
    TILES_PER_BOARD,
    LevelSpec,
    level_spec,
)
from memflip.core.names import PlayerNameError, validate_player_name
from memflip.core.scoring import (
    CORRECT_MATCH_SCORE,
    INCORRECT_FLIP_PENALTY,
    ScoreLedger,
)

__all__ = [
    # Enums / constants
    "CORRECT_MATCH_SCORE",
    "FIRST_LEVEL",
    "INCORRECT_FLIP_PENALTY",
    "LEVELS",
    "LEVEL_COUNT",
    "LevelId",
    "PAIRS_PER_BOARD",
    "PALETTE",
    "TILES_PER_BOARD",
    "TileColor",
    # Domain objects
    "Board",
    "LevelSpec",
    "ScoreLedger",
    "Tile",
    # Helpers
    "PlayerNameError",
    "assign_colors",
    "generate_board",
    "level_spec",
    "validate_player_name",
]
