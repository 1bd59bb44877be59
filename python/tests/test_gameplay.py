"""Gameplay tests — move legality, undo and win detection."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gameloader import PuzzleLoader
from backend.models.board import Board, Direction, Move, Piece, Slide


def _corridor() -> Board:
    return Board(3, 1, (2, 0), (Piece(1, (0, 0), Direction.HORIZONTAL, marked=True),))


def test_default_session_uses_sample() -> None:
    game = GamePlay()
    assert game.state.board == PuzzleLoader.sample()
    assert game.state.moves == 0


def test_legal_move_is_applied() -> None:
    game = GamePlay.from_board(_corridor())
    assert game.move(Move(Slide.RIGHT, (0, 0), 1))
    assert game.state.moves == 1
    assert game.state.board.pieces[0].location == (1, 0)
    assert not game.is_won


def test_illegal_move_is_rejected() -> None:
    game = GamePlay.from_board(_corridor())
    for move in (
        Move(Slide.RIGHT, (0, 0), 3),   # off the board
        Move(Slide.UP, (0, 0), 1),      # wrong axis
        Move(Slide.RIGHT, (1, 0), 1),   # no piece there
    ):
        assert not game.move(move)
    assert game.state.moves == 0
    assert game.state.board == _corridor()


def test_winning_move() -> None:
    game = GamePlay.from_board(_corridor())
    assert game.move(Move(Slide.RIGHT, (0, 0), 2))
    assert game.is_won


def test_undo_restores_previous_board() -> None:
    game = GamePlay.from_board(_corridor())
    game.move(Move(Slide.RIGHT, (0, 0), 1))
    game.move(Move(Slide.RIGHT, (1, 0), 1))
    assert game.is_won

    assert game.undo()
    assert game.state.board.pieces[0].location == (1, 0)
    assert game.undo()
    assert game.state.board == _corridor()
    assert game.state.moves == 0


def test_undo_with_no_history() -> None:
    game = GamePlay.from_board(_corridor())
    assert not game.undo()
    assert game.state.elapsed_time >= 0
