"""Board model for sliding-block puzzles.

Pieces and boards are immutable values.  A move never changes a board in
place; ``Board.play`` builds a new one with the moved piece relocated and
the occupancy and win flag recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum

Tile = tuple[int, int]


class Direction(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Slide(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_INVERSE = {
    Slide.LEFT: Slide.RIGHT,
    Slide.RIGHT: Slide.LEFT,
    Slide.UP: Slide.DOWN,
    Slide.DOWN: Slide.UP,
}


@dataclass(frozen=True)
class Piece:
    """A rigid piece covering ``size`` tiles from ``location`` along its axis."""

    size: int
    location: Tile
    direction: Direction
    marked: bool = False

    def occupies(self) -> tuple[Tile, ...]:
        x, y = self.location
        if self.direction is Direction.HORIZONTAL:
            return tuple((x + i, y) for i in range(self.size))
        return tuple((x, y + i) for i in range(self.size))


@dataclass(frozen=True)
class Move:
    """Slide the piece located at ``origin`` by ``steps`` tiles."""

    slide: Slide
    origin: Tile
    steps: int

    def offset(self) -> Tile:
        return {
            Slide.LEFT: (-self.steps, 0),
            Slide.RIGHT: (self.steps, 0),
            Slide.UP: (0, -self.steps),
            Slide.DOWN: (0, self.steps),
        }[self.slide]

    def inverse(self) -> Move:
        """Return the move that puts the piece back where it came from."""
        dx, dy = self.offset()
        x, y = self.origin
        return Move(_INVERSE[self.slide], (x + dx, y + dy), self.steps)

    def __str__(self) -> str:
        x, y = self.origin
        return f"Move ({x},{y}) {self.slide.value} by {self.steps} steps"


@dataclass(frozen=True)
class Board:
    """Snapshot of a puzzle.

    Equality and hashing cover every field, with ``pieces`` compared in
    order.  ``play`` keeps the relative order of pieces, so two move
    sequences ending in the same configuration produce equal boards.
    """

    width: int
    height: int
    goal: Tile
    pieces: tuple[Piece, ...]
    occupied_tiles: frozenset[Tile] = field(init=False)
    is_won: bool = field(init=False)

    def __post_init__(self) -> None:
        pieces = tuple(self.pieces)
        object.__setattr__(self, "pieces", pieces)
        object.__setattr__(self, "occupied_tiles", Board.occupied(pieces))
        object.__setattr__(
            self,
            "is_won",
            any(p.marked and self.goal in p.occupies() for p in pieces),
        )

    # -- queries --------------------------------------------------------------

    @staticmethod
    def occupied(pieces: tuple[Piece, ...]) -> frozenset[Tile]:
        return frozenset(t for p in pieces for t in p.occupies())

    def tile_exists(self, tile: Tile) -> bool:
        x, y = tile
        return 0 <= x < self.width and 0 <= y < self.height

    def empty_tile(self, tile: Tile) -> bool:
        return self.tile_exists(tile) and tile not in self.occupied_tiles

    def piece_at(self, tile: Tile) -> Piece | None:
        """Return the piece whose ``location`` is exactly *tile*."""
        for piece in self.pieces:
            if piece.location == tile:
                return piece
        return None

    # -- move generation ------------------------------------------------------

    def all_moves(self) -> list[Move]:
        """Every legal slide, one ``Move`` per reachable step count.

        Probing in a direction stops at the first occupied or off-board
        tile, so the step counts for a direction always form ``1..k``.
        """
        moves: list[Move] = []
        for piece in self.pieces:
            x, y = piece.location
            if piece.direction is Direction.HORIZONTAL:
                start, end = x, x + piece.size - 1
                for i in range(1, self.width):
                    if not self.empty_tile((end + i, y)):
                        break
                    moves.append(Move(Slide.RIGHT, (x, y), i))
                for i in range(1, self.width):
                    if start < i or not self.empty_tile((start - i, y)):
                        break
                    moves.append(Move(Slide.LEFT, (x, y), i))
            else:
                start, end = y, y + piece.size - 1
                for i in range(1, self.height):
                    if start < i or not self.empty_tile((x, start - i)):
                        break
                    moves.append(Move(Slide.UP, (x, y), i))
                for i in range(1, self.height):
                    if not self.empty_tile((x, end + i)):
                        break
                    moves.append(Move(Slide.DOWN, (x, y), i))
        return moves

    def future_boards(self) -> list[tuple[Board, Move]]:
        """All one-ply successors paired with the move producing each."""
        return [(self.play(move), move) for move in self.all_moves()]

    # -- transitions ----------------------------------------------------------

    def play(self, move: Move) -> Board:
        """Return the board after *move*.

        The destination is not checked; only pass moves taken from
        ``all_moves()`` of this board.
        """
        dx, dy = move.offset()
        pieces = tuple(
            replace(p, location=(p.location[0] + dx, p.location[1] + dy))
            if p.location == move.origin
            else p
            for p in self.pieces
        )
        return Board(self.width, self.height, self.goal, pieces)

    def undo(self, move: Move) -> Board:
        """Return the board *move* was played on."""
        return self.play(move.inverse())
