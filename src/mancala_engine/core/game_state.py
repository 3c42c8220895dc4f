"""
Board position representation.

A Kalah position consists of:
- Stone counts for every pocket (playing pockets + stores)
- The player to move

Positions are immutable values. Every rule operation returns a new
Position, so branches explored by the search never share a board.
"""

from enum import IntEnum
from typing import List, Tuple
from dataclasses import dataclass

NUM_PITS = 6  # Playing pockets per side
NUM_STONES = 4  # Starting stones per playing pocket


class Player(IntEnum):
    """Side to move. White moves first."""

    WHITE = 0
    BLACK = 1

    def toggled(self) -> "Player":
        """The other player."""
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Position:
    """
    Immutable board position.

    Board layout for num_pits=6:
          Black pockets (12-7)
       [12][11][10][9][8][7]
    [13]                    [6]  <- Stores
       [0] [1] [2] [3][4][5]
          White pockets (0-5)

    Indices:
    - White pockets: 0 to num_pits-1
    - White store: num_pits
    - Black pockets: num_pits+1 to 2*num_pits
    - Black store: 2*num_pits+1
    """

    board: Tuple[int, ...]  # Stones in each slot (immutable)
    player: Player = Player.WHITE  # Player to move
    num_pits: int = NUM_PITS

    def __post_init__(self) -> None:
        """Validate position invariants."""
        expected_size = 2 * self.num_pits + 2  # pockets + stores
        if len(self.board) != expected_size:
            raise ValueError(
                f"Board size {len(self.board)} doesn't match expected {expected_size}"
            )
        if self.player not in (Player.WHITE, Player.BLACK):
            raise ValueError(f"Invalid player {self.player!r}")
        if any(stones < 0 for stones in self.board):
            raise ValueError("Negative stone count not allowed")
        # Normalise plain ints/lists so equality and hashing behave
        object.__setattr__(self, "player", Player(self.player))
        object.__setattr__(self, "board", tuple(self.board))

    def __getitem__(self, pocket: int) -> int:
        return self.board[pocket]

    @property
    def white_store_idx(self) -> int:
        """Index of White's store."""
        return self.num_pits

    @property
    def black_store_idx(self) -> int:
        """Index of Black's store."""
        return 2 * self.num_pits + 1

    @property
    def total_stones(self) -> int:
        """Total stones on the board, stores included."""
        return sum(self.board)

    @property
    def stones_in_pockets(self) -> int:
        """Stones remaining in playing pockets (not in stores)."""
        total = sum(self.board)
        total -= self.board[self.white_store_idx]
        total -= self.board[self.black_store_idx]
        return total

    def get_player_pockets(self, player: Player) -> List[int]:
        """Get playing pocket indices for a player."""
        if player == Player.WHITE:
            return list(range(self.num_pits))
        else:
            return list(range(self.num_pits + 1, 2 * self.num_pits + 1))

    def get_player_store(self, player: Player) -> int:
        """Get store index for a player."""
        return self.white_store_idx if player == Player.WHITE else self.black_store_idx

    def side_total(self, player: Player) -> int:
        """Stones left on a player's playing pockets."""
        return sum(self.board[p] for p in self.get_player_pockets(player))

    def __str__(self) -> str:
        """Human-readable board representation."""
        black_pockets = list(
            reversed(self.board[self.num_pits + 1 : 2 * self.num_pits + 1])
        )
        white_pockets = list(self.board[: self.num_pits])
        white_store = self.board[self.white_store_idx]
        black_store = self.board[self.black_store_idx]

        pocket_width = 3
        black_str = " ".join(f"{s:>{pocket_width}}" for s in black_pockets)
        white_str = " ".join(f"{s:>{pocket_width}}" for s in white_pockets)
        store_width = len(black_str)

        board_str = f"""
      {black_str}
[{black_store:>2}] {' ' * store_width} [{white_store:>2}]
      {white_str}

{self.player}'s turn
"""
        return board_str
