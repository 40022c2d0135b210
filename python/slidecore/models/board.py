"""Board model for the sliding puzzle engine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from slidecore.config import EMPTY, validate_size
from slidecore.errors import InvalidBoardError, InvalidSizeError


@dataclass(frozen=True)
class Board:
    """An immutable N×N sliding puzzle board.

    Cells are stored flat in row-major order (``index = row * size + col``).
    ``EMPTY`` (0) marks the blank; every other cell holds a tile id in
    ``1 .. size*size - 1``.  Construction rejects anything that is not a
    permutation of those tiles plus exactly one blank.
    """

    size: int
    cells: tuple[int, ...]

    def __post_init__(self) -> None:
        validate_size(self.size)
        cells = tuple(self.cells)
        object.__setattr__(self, "cells", cells)

        expected = self.size * self.size
        if len(cells) != expected:
            raise InvalidSizeError(
                f"Expected {expected} cells for a {self.size}×{self.size} board, "
                f"got {len(cells)}."
            )
        if sorted(cells) != list(range(expected)):
            raise InvalidBoardError(
                f"Cells must be a permutation of 1..{expected - 1} plus one "
                f"empty cell ({EMPTY}); got {list(cells)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(size=size, cells=tuple(flat))

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        validate_size(size)
        return cls(size=size, cells=(*range(1, size * size), EMPTY))

    # -- queries --------------------------------------------------------------

    @property
    def empty_index(self) -> int:
        return self.cells.index(EMPTY)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.empty_index, self.size)

    @property
    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    def is_tile_correct(self, index: int) -> bool:
        """Check if the cell at *index* holds its goal-state value."""
        val = self.cells[index]
        if val == EMPTY:
            return index == len(self.cells) - 1
        return val == index + 1

    def swap(self, i: int, j: int) -> Board:
        """Return a new board with cells *i* and *j* exchanged."""
        cells = list(self.cells)
        cells[i], cells[j] = cells[j], cells[i]
        return Board(size=self.size, cells=tuple(cells))

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)
