"""Core gameplay logic — checks and applies moves, detects the win."""

from __future__ import annotations

from backend.engine.gameloader import PuzzleLoader
from backend.engine.gamestate import GameState
from backend.models.board import Board, Move


class GamePlay:
    """Orchestrates a single puzzle session."""

    def __init__(self) -> None:
        self.state = GameState(PuzzleLoader.sample())

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a session from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.state = GameState(board)
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> bool:
        """Play *move* if it is legal on the current board.

        Returns True if the move was applied.
        """
        board = self.state.board
        if move not in board.all_moves():
            return False
        self.state.push(move, board.play(move))
        return True

    def undo(self) -> bool:
        """Take back the last move.  Returns False if nothing was played."""
        return self.state.pop() is not None

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
