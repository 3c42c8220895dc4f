"""Game-tree search for choosing engine moves."""

from .alphabeta import (
    AlphaBetaSearch,
    SearchResult,
    SearchStats,
    search,
    score_root_moves,
    ENGINE_DEPTH,
    SCORE_MIN,
    SCORE_MAX,
)
from .minimax import minimax

__all__ = [
    "AlphaBetaSearch",
    "SearchResult",
    "SearchStats",
    "search",
    "score_root_moves",
    "minimax",
    "ENGINE_DEPTH",
    "SCORE_MIN",
    "SCORE_MAX",
]
