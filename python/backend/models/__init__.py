from backend.models.board import Board, Direction, Move, Piece, Slide, Tile

__all__ = ["Board", "Direction", "Move", "Piece", "Slide", "Tile"]
