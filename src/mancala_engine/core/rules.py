"""
Kalah game rules implementation.

Implements standard Kalah rules:
- Counter-clockwise sowing, skipping the opponent's store
- Capture when the last stone lands in an empty own pocket
- Extra sow when the last stone lands in the mover's own store
- Game ends when the player to move has no stones left
"""

from typing import Iterable, Optional

from .errors import EmptyPocketError, PocketIndexError
from .game_state import NUM_PITS, NUM_STONES, Player, Position


def create_starting_state(num_pits: int = NUM_PITS, num_seeds: int = NUM_STONES) -> Position:
    """
    Create the initial position.

    Args:
        num_pits: Number of playing pockets per player
        num_seeds: Initial stones per playing pocket

    Returns:
        Starting Position with White to move
    """
    board = [num_seeds] * num_pits  # White pockets
    board.append(0)  # White store
    board.extend([num_seeds] * num_pits)  # Black pockets
    board.append(0)  # Black store

    return Position(board=tuple(board), player=Player.WHITE, num_pits=num_pits)


def default_position() -> Position:
    """Kalah(6,4) starting position."""
    return create_starting_state(NUM_PITS, NUM_STONES)


def get_opposite_pocket(pocket: int, num_pits: int = NUM_PITS) -> int:
    """
    Get the opposite pocket index for the capture rule.

    Formula: opposite_of(pocket_i) = (2 * num_pits) - pocket_i

    Args:
        pocket: Playing pocket index
        num_pits: Number of playing pockets per player

    Returns:
        Opposite pocket index
    """
    white_store = num_pits
    black_store = 2 * num_pits + 1

    if pocket == white_store or pocket == black_store:
        raise ValueError(f"Cannot get opposite of store {pocket}")

    return (2 * num_pits) - pocket


def player_to_move(position: Position) -> Player:
    return position.player


def sub_move(position: Position, pocket: int) -> Position:
    """
    Sow the stones of one pocket and return the resulting position.

    This is the only board mutator; compound turns are built by
    repeating it while the mover keeps landing in their own store.

    1. Pick up all stones from the chosen pocket
    2. Sow forward, one stone per slot, skipping the opponent's store
    3. Last stone in own store: same player sows again
    4. Last stone in an empty own pocket: capture it together with
       the opposite pocket, then pass the turn
    5. Otherwise pass the turn

    Args:
        position: Current position
        pocket: Pocket index to sow from

    Returns:
        New Position after the sow

    Raises:
        PocketIndexError: pocket is not one of the mover's playing pockets
        EmptyPocketError: pocket holds no stones
    """
    mover = position.player
    own_pockets = position.get_player_pockets(mover)

    if pocket not in own_pockets:
        raise PocketIndexError(pocket)
    if position.board[pocket] == 0:
        raise EmptyPocketError(pocket)

    board = list(position.board)
    own_store = position.get_player_store(mover)
    opponent_store = position.get_player_store(mover.toggled())

    stones_in_hand = board[pocket]
    board[pocket] = 0
    cursor = pocket

    while stones_in_hand > 0:
        cursor = (cursor + 1) % len(board)

        if cursor == opponent_store:
            continue

        board[cursor] += 1
        stones_in_hand -= 1

    if cursor == own_store:
        # Extra sow - player doesn't change
        return Position(board=tuple(board), player=mover, num_pits=position.num_pits)

    if cursor in own_pockets and board[cursor] == 1:
        # Capture, even when the opposite pocket is empty
        opposite = get_opposite_pocket(cursor, position.num_pits)
        board[own_store] += board[opposite] + 1
        board[opposite] = 0
        board[cursor] = 0

    return Position(board=tuple(board), player=mover.toggled(), num_pits=position.num_pits)


def full_move(position: Position, move: Iterable[int]) -> Position:
    """
    Apply a complete compound move.

    Each sow is validated by sub_move; the first illegal sow raises and
    the caller's position is left untouched.

    Args:
        position: Position the move was generated from
        move: Ordered pocket sequence

    Returns:
        Position after the whole turn
    """
    pockets = list(move)
    if not pockets:
        raise ValueError("A move must contain at least one pocket")

    for pocket in pockets:
        position = sub_move(position, pocket)
    return position


def is_terminal(position: Position) -> bool:
    """
    Check if the game has ended.

    The game ends when the player to move has no stones in any of
    their playing pockets.
    """
    return position.side_total(position.player) == 0


def heuristic_eval(position: Position) -> int:
    """Store differential from White's perspective. Remaining pockets are ignored."""
    return (
        position.board[position.white_store_idx]
        - position.board[position.black_store_idx]
    )


def final_score(position: Position) -> int:
    """
    Score a finished game.

    Remaining stones on each side are swept into that side's store.
    Value = White total - Black total

    Args:
        position: Position to score (normally terminal)

    Returns:
        Game value from White's perspective (positive = White wins)
    """
    white_total = position.board[position.white_store_idx] + position.side_total(Player.WHITE)
    black_total = position.board[position.black_store_idx] + position.side_total(Player.BLACK)
    return white_total - black_total


def get_game_result(position: Position) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        position: Game position

    Returns:
        Result string or None if not terminal
    """
    if not is_terminal(position):
        return None

    value = final_score(position)

    if value > 0:
        return f"White wins by {value}"
    elif value < 0:
        return f"Black wins by {-value}"
    else:
        return "Tie game"
