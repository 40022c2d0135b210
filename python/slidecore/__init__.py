"""Sliding-tile puzzle engine.

Image slicing lives in :mod:`slidecore.imaging` and is not imported here,
so the engine itself never loads an image library.
"""

from slidecore.api import (
    apply_move,
    generate,
    is_adjacent,
    is_solvable,
    is_solved,
    solved_board,
)
from slidecore.config import EMPTY
from slidecore.engine.moves import MoveResult
from slidecore.errors import InvalidBoardError, InvalidSizeError, PuzzleError
from slidecore.models.board import Board

__all__ = [
    "EMPTY",
    "Board",
    "InvalidBoardError",
    "InvalidSizeError",
    "MoveResult",
    "PuzzleError",
    "apply_move",
    "generate",
    "is_adjacent",
    "is_solvable",
    "is_solved",
    "solved_board",
]
