"""Functional entry points over plain cell sequences.

These wrap the engine classes for callers that keep the board as a list
of ints (``0`` for the blank) rather than a :class:`Board`::

    board = generate(3)
    result = apply_move(list(board.cells), 5, 3)
    if result.accepted and is_solved(result.board.cells, 3):
        ...

A cell count that does not match ``size * size`` raises
:class:`~slidecore.errors.InvalidSizeError`.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from slidecore.config import validate_size
from slidecore.engine.generator import GameGenerator
from slidecore.engine.moves import MoveEngine, MoveResult
from slidecore.engine.solvability import SolvabilityChecker
from slidecore.models.board import Board

__all__ = [
    "apply_move",
    "generate",
    "is_adjacent",
    "is_solvable",
    "is_solved",
    "solved_board",
]


def _as_board(cells: Sequence[int] | Board, size: int) -> Board:
    validate_size(size)
    if isinstance(cells, Board):
        if cells.size != size:
            return Board.from_flat(size, cells.cells)
        return cells
    return Board.from_flat(size, cells)


def generate(size: int, rng: random.Random | None = None) -> Board:
    return GameGenerator.generate(size, rng=rng)


def solved_board(size: int) -> Board:
    return Board.solved(size)


def is_solvable(cells: Sequence[int] | Board, size: int) -> bool:
    return SolvabilityChecker.is_solvable(_as_board(cells, size))


def is_adjacent(index: int, empty_index: int, size: int) -> bool:
    validate_size(size)
    return MoveEngine.is_adjacent(index, empty_index, size)


def apply_move(cells: Sequence[int] | Board, clicked_index: int, size: int) -> MoveResult:
    return MoveEngine.apply_move(_as_board(cells, size), clicked_index)


def is_solved(cells: Sequence[int] | Board, size: int) -> bool:
    return MoveEngine.is_solved(_as_board(cells, size))
