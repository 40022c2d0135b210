"""Play-session bookkeeping for the terminal frontend.

The engine is pure; this is where the current board lives between clicks.
"""

from __future__ import annotations

import random

from slidecore.engine.generator import GameGenerator
from slidecore.engine.moves import MoveEngine
from slidecore.models.board import Board


class GameState:
    """Holds the current board, move counter, and completion flag."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.is_complete: bool = MoveEngine.is_solved(board)

    @property
    def size(self) -> int:
        return self.board.size

    def replace_board(self, board: Board) -> None:
        self.board = board
        self.moves += 1
        self.is_complete = MoveEngine.is_solved(board)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self.size = size
        self._rng = rng
        self.state = GameState(GameGenerator.generate(size, rng=rng))

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj._rng = None
        obj.state = GameState(board)
        return obj

    def restart(self) -> None:
        self.state = GameState(GameGenerator.generate(self.size, rng=self._rng))

    def click(self, index: int) -> bool:
        """Slide the tile at *index* into the blank.

        Returns True if the move was accepted.  Clicks after the puzzle is
        complete are ignored.
        """
        if self.state.is_complete:
            return False
        result = MoveEngine.apply_move(self.state.board, index)
        if result.accepted:
            self.state.replace_board(result.board)
        return result.accepted

    @property
    def is_won(self) -> bool:
        return self.state.is_complete
