"""
Compound move generation.

A turn in Kalah may consist of several sows: every sow that ends in the
mover's own store grants another one. A Move is therefore the ordered
tuple of pockets sown during one complete turn.
"""

from typing import List, Tuple

from .game_state import Position
from .rules import sub_move

Move = Tuple[int, ...]


def legal_pockets(position: Position) -> List[int]:
    """
    Pockets the player to move may sow from.

    A pocket is legal if it:
    - Belongs to the player to move
    - Contains at least one stone

    Args:
        position: Current position

    Returns:
        Legal pocket indices in increasing order
    """
    legal = []
    for pocket in position.get_player_pockets(position.player):
        if position.board[pocket] > 0:
            legal.append(pocket)

    return legal


def legal_turns(position: Position) -> List[Tuple[Move, Position]]:
    """
    Enumerate every complete turn available to the player to move.

    Pockets are tried in increasing order at every level, so the result
    is the depth-first, left-to-right walk of the compound-move tree.
    A sow that lands in the mover's store is expanded recursively and
    its pocket is prepended to each continuation. If that sow empties
    the mover's side, nothing can follow and the sow alone is the turn.

    Args:
        position: Current position

    Returns:
        List of (move, resulting position); empty when the game is over
    """
    turns: List[Tuple[Move, Position]] = []

    for pocket in legal_pockets(position):
        child = sub_move(position, pocket)

        if child.player != position.player:
            turns.append(((pocket,), child))
            continue

        continuations = legal_turns(child)
        if not continuations:
            turns.append(((pocket,), child))
            continue

        for tail, result in continuations:
            turns.append(((pocket,) + tail, result))

    return turns
