"""Vanilla terminal frontend — no third-party dependencies.

Prints the solve summary as plain lines, with the move list on request.
"""

from __future__ import annotations

from backend.engine.gamesolver import SearchLimitError, Solver, UnsolvablePuzzleError
from backend.models.board import Board


def _render_board(board: Board) -> str:
    """Return a plain text grid: ``#`` for pieces, ``X`` for the marked one."""
    marked = {t for p in board.pieces if p.marked for t in p.occupies()}
    lines: list[str] = []
    for y in range(board.height):
        row = ""
        for x in range(board.width):
            if (x, y) in marked:
                row += "X"
            elif (x, y) in board.occupied_tiles:
                row += "#"
            elif (x, y) == board.goal:
                row += "o"
            else:
                row += "."
        lines.append(row)
    return "\n".join(lines)


def run(board: Board, verbose: bool = False, max_plies: int | None = None) -> bool:
    """Solve *board* and print the result.  Returns False if no solution was found."""
    try:
        solution = Solver.solve(board, max_plies)
    except (UnsolvablePuzzleError, SearchLimitError) as e:
        print(_render_board(board))
        print(f"No solution: {e}")
        return False

    print(f"Total steps: {solution.plies}")
    print(f"Total time: {solution.elapsed_ms:.0f} ms")

    if verbose:
        for move in solution.moves:
            print(move)
    return True
