"""Board model: construction, validation, and queries."""

from __future__ import annotations

import dataclasses

import pytest

from slidecore.errors import InvalidBoardError, InvalidSizeError, PuzzleError
from slidecore.models.board import Board


def test_solved_board_layout() -> None:
    assert Board.solved(3).cells == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert Board.solved(2).cells == (1, 2, 3, 0)
    assert Board.solved(4).cells[-1] == 0
    assert Board.solved(5).cells[:24] == tuple(range(1, 25))


def test_from_flat_and_queries() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 6, 7, 5, 8])

    assert board.empty_index == 4
    assert board.blank_pos == (1, 1)
    assert board.get_tile(2, 1) == 5
    assert board.rows == [(1, 2, 3), (4, 0, 6), (7, 5, 8)]
    assert list(board) == [1, 2, 3, 4, 0, 6, 7, 5, 8]
    assert len(board) == 9


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 6, 7, 5, 8])

    assert board.is_tile_correct(0)
    assert board.is_tile_correct(5)
    assert not board.is_tile_correct(4)  # blank away from home
    assert not board.is_tile_correct(7)
    assert Board.solved(3).is_tile_correct(8)


def test_swap_returns_new_board() -> None:
    board = Board.solved(3)
    swapped = board.swap(7, 8)

    assert swapped.cells == (1, 2, 3, 4, 5, 6, 7, 0, 8)
    assert board.cells == (1, 2, 3, 4, 5, 6, 7, 8, 0)


def test_board_is_immutable() -> None:
    board = Board.solved(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        board.size = 4  # type: ignore[misc]


def test_equality_is_structural() -> None:
    assert Board.from_flat(2, [1, 2, 3, 0]) == Board.solved(2)
    assert Board.from_flat(2, [1, 2, 0, 3]) != Board.solved(2)


@pytest.mark.parametrize("size", [1, 0, -3])
def test_size_below_minimum(size: int) -> None:
    with pytest.raises(InvalidSizeError):
        Board.solved(size)


def test_non_integer_size() -> None:
    with pytest.raises(InvalidSizeError):
        Board.solved(3.0)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "size, flat",
    [
        (3, [1, 2, 3, 4, 5, 6, 7, 0]),
        (3, [1, 2, 3, 4, 5, 6, 7, 8, 0, 9]),
        (2, [1, 2, 3, 4, 5, 6, 7, 8, 0]),
    ],
)
def test_wrong_cell_count(size: int, flat: list[int]) -> None:
    with pytest.raises(InvalidSizeError):
        Board.from_flat(size, flat)


@pytest.mark.parametrize(
    "flat",
    [
        [1, 1, 3, 4, 5, 6, 7, 8, 0],  # duplicate tile
        [1, 2, 3, 4, 5, 6, 7, 0, 0],  # two blanks
        [1, 2, 3, 4, 5, 6, 7, 8, 9],  # no blank
        [1, 2, 3, 4, 5, 6, 7, -8, 0],  # out of range
    ],
)
def test_not_a_permutation(flat: list[int]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(3, flat)


def test_errors_are_value_errors() -> None:
    assert issubclass(InvalidSizeError, ValueError)
    assert issubclass(InvalidBoardError, ValueError)
    assert issubclass(InvalidBoardError, PuzzleError)
