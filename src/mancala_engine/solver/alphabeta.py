"""
Depth-limited minimax search with alpha-beta pruning.

White maximizes and Black minimizes the score from White's point of view.
Children are visited in move-generator order and a child only replaces the
current best on a strictly better score, so the earliest enumerated move
wins ties. The search is fail-soft: when a cutoff happens the extremal
value found so far is returned rather than the bound.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tqdm import tqdm

from ..core import (
    Move,
    Player,
    Position,
    legal_turns,
    heuristic_eval,
    final_score,
)

logger = logging.getLogger(__name__)

ENGINE_DEPTH = 10  # Default search depth in plies

SCORE_MIN = float("-inf")
SCORE_MAX = float("inf")


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: int


@dataclass
class SearchStats:
    """Work done by one search context."""

    nodes: int = 0  # Positions visited
    cutoffs: int = 0  # Sibling lists abandoned early
    leaves: int = 0  # Heuristic or terminal evaluations
    cutoffs_by_depth: dict = field(default_factory=dict)

    def record_cutoff(self, depth: int) -> None:
        self.cutoffs += 1
        self.cutoffs_by_depth[depth] = self.cutoffs_by_depth.get(depth, 0) + 1


class AlphaBetaSearch:
    """
    Alpha-beta search context.

    Owns the statistics of the searches it runs; bounds are plain
    arguments so separate instances (or repeated calls) never interfere.
    """

    def __init__(self, depth: int = ENGINE_DEPTH):
        """
        Initialize search context.

        Args:
            depth: Default search depth used by best_move()
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.stats = SearchStats()

    def search(
        self,
        position: Position,
        depth: int,
        alpha: float = SCORE_MIN,
        beta: float = SCORE_MAX,
    ) -> SearchResult:
        """
        Search a position to a fixed depth.

        Args:
            position: Position to search
            depth: Remaining plies (one ply = one compound turn)
            alpha: Lower bound of the window
            beta: Upper bound of the window

        Returns:
            SearchResult; best_move is None at leaves and terminal positions
        """
        self.stats.nodes += 1

        children = legal_turns(position)
        if not children:
            self.stats.leaves += 1
            return SearchResult(None, final_score(position))

        if depth == 0:
            self.stats.leaves += 1
            return SearchResult(None, heuristic_eval(position))

        best_move: Optional[Move] = None

        if position.player == Player.WHITE:
            best_score = SCORE_MIN
            for move, child in children:
                score = self.search(child, depth - 1, alpha, beta).score
                if score > best_score:
                    best_score = score
                    best_move = move
                if best_score > beta:
                    self.stats.record_cutoff(depth)
                    break
                alpha = max(alpha, best_score)
        else:
            best_score = SCORE_MAX
            for move, child in children:
                score = self.search(child, depth - 1, alpha, beta).score
                if score < best_score:
                    best_score = score
                    best_move = move
                if best_score < alpha:
                    self.stats.record_cutoff(depth)
                    break
                beta = min(beta, best_score)

        return SearchResult(best_move, best_score)

    def best_move(self, position: Position, depth: Optional[int] = None) -> SearchResult:
        """
        Find the engine's move from a non-terminal position.

        Raises:
            ValueError: position is terminal (no move to choose)
        """
        depth = self.depth if depth is None else depth
        self.stats = SearchStats()

        result = self.search(position, depth)
        if result.best_move is None:
            if depth == 0:
                raise ValueError("Depth 0 search does not choose a move")
            raise ValueError("Cannot choose a move from a terminal position")

        logger.debug(
            f"Depth {depth}: move {result.best_move} score {result.score} "
            f"({self.stats.nodes:,} nodes, {self.stats.cutoffs:,} cutoffs)"
        )
        return result


def search(
    position: Position,
    depth: int,
    alpha: float = SCORE_MIN,
    beta: float = SCORE_MAX,
) -> SearchResult:
    """Run a one-off alpha-beta search with a fresh context."""
    return AlphaBetaSearch(depth).search(position, depth, alpha, beta)


def score_root_moves(
    position: Position, depth: int, show_progress: bool = False
) -> List[Tuple[Move, int]]:
    """
    Score every root move with a full-window search of its child.

    Unlike search(), nothing is pruned at the root, so every score is
    exact at the given depth.

    Args:
        position: Root position
        depth: Depth including the root move itself (must be >= 1)
        show_progress: Display a tqdm bar over root moves

    Returns:
        List of (move, score) in move-generator order
    """
    if depth < 1:
        raise ValueError(f"Root move scoring needs depth >= 1, got {depth}")

    engine = AlphaBetaSearch(depth)
    scored = []

    for move, child in tqdm(
        legal_turns(position), desc="Root moves", unit=" move", disable=not show_progress
    ):
        scored.append((move, engine.search(child, depth - 1).score))

    logger.debug(f"Scored {len(scored)} root moves ({engine.stats.nodes:,} nodes)")
    return scored
