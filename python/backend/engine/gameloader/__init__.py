from backend.engine.gameloader.loader import PuzzleLoader

__all__ = ["PuzzleLoader"]
