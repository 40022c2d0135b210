"""Parity-based solvability test for sliding puzzle boards."""

from __future__ import annotations

from collections.abc import Sequence

from slidecore.config import EMPTY
from slidecore.models.board import Board


class SolvabilityChecker:
    """Stateless checker; all methods are static."""

    @staticmethod
    def count_inversions(cells: Sequence[int]) -> int:
        """Count tile pairs out of goal order, ignoring the blank."""
        tiles = [v for v in cells if v != EMPTY]
        inversions = 0
        for i, a in enumerate(tiles):
            for b in tiles[i + 1 :]:
                if a > b:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd widths: solvable iff the inversion count is even.

        Even widths: count the blank's row from the bottom (1-based).  The
        board is solvable iff that row is even and the inversion count is
        odd, or the row is odd and the inversion count is even.
        """
        inversions = SolvabilityChecker.count_inversions(board.cells)
        n = board.size

        if n % 2 == 1:
            return inversions % 2 == 0

        blank_row_from_top = board.empty_index // n + 1
        blank_row_from_bottom = n - blank_row_from_top + 1
        if blank_row_from_bottom % 2 == 0:
            return inversions % 2 == 1
        return inversions % 2 == 0
