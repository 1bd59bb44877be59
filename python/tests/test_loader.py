"""Puzzle loader tests."""

from __future__ import annotations

import json

import pytest

from backend.engine.gameloader import PuzzleLoader
from backend.models.board import Board, Direction, Piece

_CORRIDOR = {
    "width": 3,
    "height": 1,
    "goal": [2, 0],
    "pieces": [
        {"location": [0, 0], "size": 1, "direction": "horizontal", "marked": True},
    ],
}


def test_sample_puzzle_shape() -> None:
    board = PuzzleLoader.sample()
    assert (board.width, board.height, board.goal) == (6, 6, (5, 2))
    assert len(board.pieces) == 12
    assert [p.marked for p in board.pieces].count(True) == 1
    assert not board.is_won


def test_from_dict() -> None:
    board = PuzzleLoader.from_dict(_CORRIDOR)
    assert board == Board(3, 1, (2, 0), (Piece(1, (0, 0), Direction.HORIZONTAL, marked=True),))


def test_marked_defaults_to_false() -> None:
    data = json.loads(json.dumps(_CORRIDOR))
    del data["pieces"][0]["marked"]
    assert not PuzzleLoader.from_dict(data).pieces[0].marked


def test_to_dict_keeps_piece_order() -> None:
    board = PuzzleLoader.sample()
    data = PuzzleLoader.to_dict(board)
    assert [tuple(p["location"]) for p in data["pieces"]] == [p.location for p in board.pieces]
    assert PuzzleLoader.from_dict(data) == board


def test_save_and_load(tmp_path) -> None:
    path = tmp_path / "puzzles" / "sample.json"
    PuzzleLoader.save(PuzzleLoader.sample(), path)
    assert path.exists()
    assert PuzzleLoader.load(path) == PuzzleLoader.sample()


def test_missing_key_raises() -> None:
    data = dict(_CORRIDOR)
    del data["goal"]
    with pytest.raises(ValueError, match="goal"):
        PuzzleLoader.from_dict(data)


def test_non_object_definition_raises() -> None:
    with pytest.raises(ValueError, match="Malformed"):
        PuzzleLoader.from_dict([])  # type: ignore[arg-type]


def test_location_must_be_a_pair() -> None:
    data = json.loads(json.dumps(_CORRIDOR))
    data["pieces"][0]["location"] = 5
    with pytest.raises(ValueError, match="Malformed"):
        PuzzleLoader.from_dict(data)


def test_unknown_direction_raises() -> None:
    data = json.loads(json.dumps(_CORRIDOR))
    data["pieces"][0]["direction"] = "diagonal"
    with pytest.raises(ValueError):
        PuzzleLoader.from_dict(data)
