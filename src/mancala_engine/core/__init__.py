"""Core board representation, rules and move generation."""

from .errors import MancalaError, PocketIndexError, EmptyPocketError
from .game_state import Position, Player, NUM_PITS, NUM_STONES
from .rules import (
    create_starting_state,
    default_position,
    get_opposite_pocket,
    player_to_move,
    sub_move,
    full_move,
    is_terminal,
    heuristic_eval,
    final_score,
    get_game_result,
)
from .moves import Move, legal_pockets, legal_turns

__all__ = [
    "MancalaError",
    "PocketIndexError",
    "EmptyPocketError",
    "Position",
    "Player",
    "NUM_PITS",
    "NUM_STONES",
    "create_starting_state",
    "default_position",
    "get_opposite_pocket",
    "player_to_move",
    "sub_move",
    "full_move",
    "is_terminal",
    "heuristic_eval",
    "final_score",
    "get_game_result",
    "Move",
    "legal_pockets",
    "legal_turns",
]
