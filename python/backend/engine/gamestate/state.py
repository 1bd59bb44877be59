"""Tracks the state of a puzzle being played or replayed."""

from __future__ import annotations

import time

from backend.models.board import Board, Move


class GameState:
    """Holds the current board, the moves played so far, and elapsed time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.history: list[Move] = []
        self._start_time: float = time.time()

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        return time.time() - self._start_time

    # -- moves ----------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    def push(self, move: Move, board: Board) -> None:
        self.history.append(move)
        self.board = board

    def pop(self) -> Move | None:
        if not self.history:
            return None
        move = self.history.pop()
        self.board = self.board.undo(move)
        return move

    @property
    def is_solved(self) -> bool:
        return self.board.is_won
