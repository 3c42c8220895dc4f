"""
Plain depth-limited minimax.

Visits every node of the compound-move tree without pruning. It is slow,
but it is the yardstick the alpha-beta search must agree with.
"""

import logging
from typing import Optional

from ..core import (
    Move,
    Player,
    Position,
    legal_turns,
    heuristic_eval,
    final_score,
)
from .alphabeta import SearchResult

logger = logging.getLogger(__name__)


def minimax(position: Position, depth: int) -> SearchResult:
    """
    Compute the minimax value of a position.

    Same leaf rules and tie-breaking as the alpha-beta search:
    terminal positions use the swept final score, depth 0 uses the
    store differential, and the first strictly better child wins.

    Args:
        position: Position to evaluate
        depth: Remaining plies

    Returns:
        SearchResult with the exact value at this depth
    """
    children = legal_turns(position)
    if not children:
        return SearchResult(None, final_score(position))

    if depth == 0:
        return SearchResult(None, heuristic_eval(position))

    # White maximizes
    is_maximizing = position.player == Player.WHITE

    best_value = float("-inf") if is_maximizing else float("inf")
    best_move: Optional[Move] = None

    for move, child in children:
        child_value = minimax(child, depth - 1).score

        if is_maximizing:
            if child_value > best_value:
                best_value = child_value
                best_move = move
        else:
            if child_value < best_value:
                best_value = child_value
                best_move = move

    return SearchResult(best_move, best_value)
