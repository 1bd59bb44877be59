"""Loads puzzle definitions — the built-in sample and JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from backend.models.board import Board, Direction, Piece

log = logging.getLogger("slider.loader")


class PuzzleLoader:
    """Builds boards from plain data.  Piece placement is taken as given."""

    @staticmethod
    def sample() -> Board:
        """Return the built-in 6×6 puzzle (goal on the right edge of row 2)."""
        h, v = Direction.HORIZONTAL, Direction.VERTICAL
        return Board(
            width=6,
            height=6,
            goal=(5, 2),
            pieces=(
                Piece(2, (0, 2), h, marked=True),
                Piece(2, (0, 3), h),
                Piece(2, (0, 4), v),
                Piece(2, (1, 4), v),
                Piece(2, (2, 0), v),
                Piece(2, (2, 2), v),
                Piece(2, (2, 4), h),
                Piece(2, (2, 5), h),
                Piece(3, (3, 0), h),
                Piece(2, (3, 3), h),
                Piece(2, (3, 1), v),
                Piece(3, (5, 2), v),
            ),
        )

    # -- (de)serialisation ----------------------------------------------------

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Board:
        """Create a board from its JSON representation.

        Example::

            PuzzleLoader.from_dict({
                "width": 3, "height": 1, "goal": [2, 0],
                "pieces": [{"location": [0, 0], "size": 1,
                            "direction": "horizontal", "marked": True}],
            })
        """
        try:
            pieces = tuple(
                Piece(
                    size=int(p["size"]),
                    location=_tile(p["location"]),
                    direction=Direction(p["direction"]),
                    marked=bool(p.get("marked", False)),
                )
                for p in data["pieces"]
            )
            return Board(
                width=int(data["width"]),
                height=int(data["height"]),
                goal=_tile(data["goal"]),
                pieces=pieces,
            )
        except KeyError as e:
            raise ValueError(f"Puzzle definition is missing {e}.") from e
        except TypeError as e:
            raise ValueError(f"Malformed puzzle definition: {e}") from e

    @staticmethod
    def to_dict(board: Board) -> dict[str, Any]:
        return {
            "width": board.width,
            "height": board.height,
            "goal": list(board.goal),
            "pieces": [
                {
                    "location": list(p.location),
                    "size": p.size,
                    "direction": p.direction.value,
                    "marked": p.marked,
                }
                for p in board.pieces
            ],
        }

    # -- persistence ----------------------------------------------------------

    @staticmethod
    def load(path: Path) -> Board:
        board = PuzzleLoader.from_dict(json.loads(path.read_text()))
        log.info(
            "Loaded %dx%d puzzle with %d pieces from %s",
            board.width, board.height, len(board.pieces), path,
        )
        return board

    @staticmethod
    def save(board: Board, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(PuzzleLoader.to_dict(board), indent=2) + "\n")


# -- helpers ------------------------------------------------------------------


def _tile(raw: Any) -> tuple[int, int]:
    x, y = raw
    return int(x), int(y)
