#!/usr/bin/env python3
"""Sliding-Block Puzzle Solver.

Usage::

    python main.py                       # solve the built-in sample
    python main.py --verbose             # ... and print every move
    python main.py puzzle.json -f rich   # Rich terminal, puzzle from file
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("slider")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Optional[Path] = typer.Argument(
        None,
        exists=True, dir_okay=False,
        help="Puzzle definition (JSON). Omit to solve the built-in sample.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to report the solution.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Print every move of the solution.",
    ),
    max_plies: Optional[int] = typer.Option(
        None, "--max-plies",
        min=0,
        help="Give up when no solution is found within this many moves.",
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Enable debug-level logging.",
    ),
) -> None:
    """Sliding-Block Puzzle Solver."""
    from backend.engine.gameloader import PuzzleLoader

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if puzzle is None:
        board = PuzzleLoader.sample()
    else:
        try:
            board = PuzzleLoader.load(puzzle)
        except ValueError as e:
            log.error("Invalid puzzle %s: %s", puzzle, e)
            raise typer.Exit(code=2)

    mod = importlib.import_module(_RUNNERS[frontend])
    if not mod.run(board, verbose=verbose, max_plies=max_plies):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
