"""Breadth-first sliding-block solver.

The search expands one ply at a time.  Every board ever discovered is kept
in a transposition table mapping it to the move that first produced it
(``None`` for the start board), which both prevents re-exploring a
configuration and lets the solution be rebuilt by walking backwards with
``Board.undo``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from backend.models.board import Board, Move

log = logging.getLogger("slider.solver")

Visited = dict[Board, Move | None]


class UnsolvablePuzzleError(RuntimeError):
    """Every reachable configuration was explored without reaching the goal."""


class SearchLimitError(RuntimeError):
    """The search went deeper than the requested ply limit."""


@dataclass
class Solution:
    board: Board
    plies: int
    moves: list[Move]
    explored: int
    elapsed_ms: float


# -- search -------------------------------------------------------------------


def search(
    start: Board, visited: Visited, max_plies: int | None = None
) -> tuple[Board, int]:
    """Return the first winning board found and its depth in plies.

    *visited* is filled in as a side effect and must be empty on entry.
    A start board that is already won is returned at depth 0.
    """
    visited[start] = None
    if start.is_won:
        return start, 0

    frontier = start.future_boards()
    plies = 0
    while True:
        # A board is admitted once: the first move reaching it wins.
        admitted: list[Board] = []
        for board, move in frontier:
            if board in visited:
                continue
            visited[board] = move
            admitted.append(board)

        plies += 1
        log.debug(
            "ply %d: %d new boards, %d visited", plies, len(admitted), len(visited)
        )
        if not admitted:
            raise UnsolvablePuzzleError(
                f"no winning board after exploring {len(visited)} configurations"
            )
        if max_plies is not None and plies > max_plies:
            raise SearchLimitError(f"no solution within {max_plies} plies")

        frontier = []
        for board in admitted:
            if board.is_won:
                return board, plies
            frontier.extend(board.future_boards())


def reconstruct(board: Board, visited: Visited) -> list[Move]:
    """Walk back from *board* to the start board, returning the moves in order."""
    history: list[Move] = []
    while (move := visited[board]) is not None:
        history.append(move)
        board = board.undo(move)
    history.reverse()
    return history


# -- public API ---------------------------------------------------------------


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board, max_plies: int | None = None) -> Solution:
        """Return a shortest solution for *board*.

        Raises ``UnsolvablePuzzleError`` when no winning configuration is
        reachable and ``SearchLimitError`` when *max_plies* is exceeded.
        """
        visited: Visited = {}
        started = time.perf_counter()
        won, plies = search(board, visited, max_plies)
        moves = reconstruct(won, visited)
        elapsed_ms = (time.perf_counter() - started) * 1000

        log.info(
            "Solved in %d plies (%s boards explored, %.1f ms)",
            plies, f"{len(visited):,}", elapsed_ms,
        )
        return Solution(
            board=won,
            plies=plies,
            moves=moves,
            explored=len(visited),
            elapsed_ms=elapsed_ms,
        )

    @staticmethod
    def hint(board: Board) -> Move | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        if board.is_won:
            return None
        try:
            moves = Solver.solve(board).moves
        except UnsolvablePuzzleError:
            return None
        return moves[0]

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach a winning configuration."""
        try:
            Solver.solve(board)
        except UnsolvablePuzzleError:
            return False
        return True
