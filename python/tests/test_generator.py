"""Board generation: solvable, scrambled, reproducible, always terminates."""

from __future__ import annotations

import logging
import random

import pytest

from helpers import assert_permutation
from slidecore.engine.generator import GameGenerator
from slidecore.engine.solvability import SolvabilityChecker
from slidecore.errors import InvalidSizeError
from slidecore.models.board import Board


class _NoShuffle(random.Random):
    """A random source whose shuffle leaves the list in order."""

    def shuffle(self, x) -> None:  # type: ignore[override]
        return None


@pytest.mark.parametrize("size", [2, 3, 4, 5])
@pytest.mark.parametrize("seed", range(10))
def test_generated_board_is_playable(size: int, seed: int) -> None:
    board = GameGenerator.generate(size, rng=random.Random(seed))

    assert board.size == size
    assert_permutation(board)
    assert SolvabilityChecker.is_solvable(board)
    assert board != Board.solved(size)


def test_same_seed_same_board() -> None:
    a = GameGenerator.generate(4, rng=random.Random(7))
    b = GameGenerator.generate(4, rng=random.Random(7))
    assert a == b


def test_without_rng() -> None:
    board = GameGenerator.generate(3)
    assert SolvabilityChecker.is_solvable(board)
    assert board != GameGenerator.solved(3)


def test_shuffle_keeps_permutation() -> None:
    board = GameGenerator.shuffle(5, random.Random(3))
    assert_permutation(board)


@pytest.mark.parametrize(
    "size, expected",
    [
        (2, (2, 3, 1, 0)),
        (3, (2, 3, 1, 4, 5, 6, 7, 8, 0)),
        (4, (2, 3, 1, *range(4, 16), 0)),
    ],
)
def test_fallback_is_fixed_three_cycle(size: int, expected: tuple[int, ...]) -> None:
    board = GameGenerator.fallback(size)

    assert board.cells == expected
    assert SolvabilityChecker.is_solvable(board)
    assert board != Board.solved(size)


def test_budget_exhaustion_uses_fallback(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="slidecore.engine.generator.generator")

    board = GameGenerator.generate(3, rng=_NoShuffle(), max_attempts=50)

    assert board == GameGenerator.fallback(3)
    assert "fixed scramble" in caplog.text


def test_zero_budget_goes_straight_to_fallback() -> None:
    board = GameGenerator.generate(5, rng=random.Random(0), max_attempts=0)
    assert board == GameGenerator.fallback(5)


@pytest.mark.parametrize("size", [1, 0, -1])
def test_invalid_size(size: int) -> None:
    with pytest.raises(InvalidSizeError):
        GameGenerator.generate(size)
