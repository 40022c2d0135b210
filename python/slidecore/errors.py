"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all engine errors."""


class InvalidSizeError(PuzzleError, ValueError):
    """The board size is below the minimum or the cell count is not N×N."""


class InvalidBoardError(PuzzleError, ValueError):
    """The cells are not a permutation of the tiles plus one empty marker."""
