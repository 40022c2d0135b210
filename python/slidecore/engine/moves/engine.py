"""Move validation, move application, and win detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from slidecore.models.board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a click: the resulting board and whether it changed."""

    board: Board
    accepted: bool


class MoveEngine:
    """Stateless move rules; all methods are static."""

    @staticmethod
    def is_adjacent(index: int, empty_index: int, size: int) -> bool:
        """Return True if the two cells share an edge on a ``size``×``size`` grid.

        Neighbours in a row must really share the row: on a 3×3 board,
        indices 2 and 3 differ by one but sit on different rows.
        """
        last = size * size
        if not (0 <= index < last and 0 <= empty_index < last):
            return False
        row, col = divmod(index, size)
        erow, ecol = divmod(empty_index, size)
        if row == erow:
            return abs(col - ecol) == 1
        return col == ecol and abs(row - erow) == 1

    @staticmethod
    def apply_move(board: Board, index: int) -> MoveResult:
        """Slide the tile at *index* into the blank.

        Returns the new board with ``accepted=True``, or the untouched
        board with ``accepted=False`` when *index* is not next to the
        blank (this includes the blank itself and off-board indices).
        """
        empty = board.empty_index
        if not MoveEngine.is_adjacent(index, empty, board.size):
            logger.debug("Rejected move: index %r, blank at %d", index, empty)
            return MoveResult(board=board, accepted=False)
        return MoveResult(board=board.swap(index, empty), accepted=True)

    @staticmethod
    def movable_indices(board: Board) -> list[int]:
        """Indices whose tile could slide into the blank right now."""
        empty = board.empty_index
        return [
            i
            for i in (empty - board.size, empty - 1, empty + 1, empty + board.size)
            if MoveEngine.is_adjacent(i, empty, board.size)
        ]

    @staticmethod
    def is_solved(board: Board) -> bool:
        """Check if all tiles are in their goal positions."""
        return board == Board.solved(board.size)
