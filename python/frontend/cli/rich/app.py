"""Rich terminal frontend — board grids, panels and a move table.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import string

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SearchLimitError, Solution, Solver, UnsolvablePuzzleError
from backend.models.board import Board

console = Console()

# Plain pieces are lettered in board order; X is kept for the marked piece.
_LABELS = [c for c in string.ascii_uppercase if c != "X"]


# -- board rendering ----------------------------------------------------------


def _labels(board: Board) -> dict[tuple[int, int], str]:
    """Map every occupied tile to the label of the piece covering it."""
    cells: dict[tuple[int, int], str] = {}
    plain = 0
    for piece in board.pieces:
        if piece.marked:
            label = "X"
        else:
            label = _LABELS[plain % len(_LABELS)]
            plain += 1
        for tile in piece.occupies():
            cells[tile] = label
    return cells


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=1, justify="center")

    cells = _labels(board)
    for y in range(board.height):
        row: list[str] = []
        for x in range(board.width):
            label = cells.get((x, y))
            if label == "X":
                row.append("[bold red]X[/bold red]")
            elif label is not None:
                row.append(f"[bold white]{label}[/bold white]")
            elif (x, y) == board.goal:
                row.append("[bold green]◎[/bold green]")
            else:
                row.append("[dim]·[/dim]")
        table.add_row(*row)

    return table


def _render_moves(solution: Solution) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Piece", justify="center", style="cyan")
    table.add_column("Slide", style="yellow")
    table.add_column("Steps", justify="right", style="yellow")
    for i, move in enumerate(solution.moves, 1):
        x, y = move.origin
        table.add_row(str(i), f"({x},{y})", move.slide.value, str(move.steps))
    return table


# -- screens ------------------------------------------------------------------


def _draw_solution(start: Board, solution: Solution, verbose: bool) -> None:
    boards = Table.grid(padding=(0, 4))
    boards.add_row(
        Panel(_render_board(start), title="[dim]start[/dim]", border_style="dim"),
        Panel(_render_board(solution.board), title="[bold green]goal[/bold green]", border_style="green"),
    )

    stats = Text()
    stats.append("  Steps: ", style="dim")
    stats.append(str(solution.plies), style="bold yellow")
    stats.append("    Explored: ", style="dim")
    stats.append(f"{solution.explored:,}", style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{solution.elapsed_ms:.0f} ms", style="bold yellow")

    parts = [Align.center(boards), Text(""), Align.center(stats)]
    if verbose and solution.moves:
        parts += [Text(""), Align.center(_render_moves(solution))]

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Sliding Blocks  {start.width}×{start.height}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_failure(start: Board, message: str) -> None:
    panel = Panel(
        Group(Align.center(_render_board(start)), Text(""), Align.center(Text(message, style="red"))),
        title="[bold red]No solution[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- public entry point -------------------------------------------------------


def run(board: Board, verbose: bool = False, max_plies: int | None = None) -> bool:
    """Solve *board* and render the result.  Returns False if no solution was found."""
    with console.status("[cyan]Searching…[/cyan]"):
        try:
            solution = Solver.solve(board, max_plies)
        except (UnsolvablePuzzleError, SearchLimitError) as e:
            failure = str(e)
        else:
            failure = None

    if failure is not None:
        _draw_failure(board, failure)
        return False

    _draw_solution(board, solution, verbose)
    return True
