from backend.engine.gamesolver.solver import (
    SearchLimitError,
    Solution,
    Solver,
    UnsolvablePuzzleError,
    reconstruct,
    search,
)

__all__ = [
    "SearchLimitError",
    "Solution",
    "Solver",
    "UnsolvablePuzzleError",
    "reconstruct",
    "search",
]
