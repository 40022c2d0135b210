"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from slidecore.config import FALLBACK_SWAPS, MAX_SHUFFLE_ATTEMPTS, validate_size
from slidecore.engine.solvability import SolvabilityChecker
from slidecore.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling and rejecting unsolvable draws."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(size: int, rng: random.Random) -> Board:
        """Return a uniformly shuffled board, solvable or not."""
        cells = list(Board.solved(size).cells)
        rng.shuffle(cells)
        return Board(size=size, cells=tuple(cells))

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        max_attempts: int = MAX_SHUFFLE_ATTEMPTS,
    ) -> Board:
        """Return a random *solvable* board of the given size.

        The result is never the solved board.  Pass a seeded ``rng`` for a
        reproducible board.
        """
        validate_size(size)
        rng = rng if rng is not None else random.Random()
        goal = Board.solved(size)

        for attempt in range(1, max_attempts + 1):
            board = GameGenerator.shuffle(size, rng)
            if board != goal and SolvabilityChecker.is_solvable(board):
                logger.debug(
                    "Generated %dx%d board after %d attempt(s)", size, size, attempt
                )
                return board

        logger.info(
            "No solvable %dx%d shuffle in %d attempts; using fixed scramble",
            size,
            size,
            max_attempts,
        )
        return GameGenerator.fallback(size)

    @staticmethod
    def fallback(size: int) -> Board:
        """Scramble the solved board with fixed swaps until it is playable."""
        goal = Board.solved(size)
        board = goal
        for i, j in FALLBACK_SWAPS:
            board = board.swap(i, j)
            if board != goal and SolvabilityChecker.is_solvable(board):
                return board
        # FALLBACK_SWAPS always ends on a solvable 3-cycle for size >= 2.
        raise RuntimeError(f"Fallback swaps produced no playable {size}x{size} board")
