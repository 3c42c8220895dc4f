"""Tests for position representation."""

import dataclasses

import pytest
from mancala_engine.core import Player, Position


def test_create_position():
    """Test basic position creation."""
    board = tuple([4] * 6 + [0] + [4] * 6 + [0])
    position = Position(board=board, player=Player.WHITE)

    assert position.num_pits == 6
    assert len(position.board) == 14  # 6 + 1 + 6 + 1
    assert position.player == Player.WHITE
    assert position.total_stones == 48
    assert position.stones_in_pockets == 48


def test_plain_values_are_normalised():
    """Lists and ints are accepted and stored as tuple and Player."""
    position = Position(board=[1] * 14, player=1)

    assert position.board == (1,) * 14
    assert position.player is Player.BLACK
    assert position == Position(board=(1,) * 14, player=Player.BLACK)


def test_position_is_immutable():
    """Positions are values; assignment is refused."""
    position = Position(board=tuple([0] * 14))

    with pytest.raises(dataclasses.FrozenInstanceError):
        position.player = Player.BLACK


def test_indexing_reads_pockets():
    board = tuple(range(14))
    position = Position(board=board)

    assert position[0] == 0
    assert position[6] == 6
    assert position[13] == 13


def test_player_pockets():
    """Test getting player pocket indices."""
    position = Position(board=tuple([0] * 14))

    assert position.get_player_pockets(Player.WHITE) == [0, 1, 2, 3, 4, 5]
    assert position.get_player_pockets(Player.BLACK) == [7, 8, 9, 10, 11, 12]


def test_player_stores():
    """Test getting player store indices."""
    position = Position(board=tuple([0] * 14))

    assert position.get_player_store(Player.WHITE) == 6
    assert position.get_player_store(Player.BLACK) == 13
    assert position.white_store_idx == 6
    assert position.black_store_idx == 13


def test_small_board_geometry():
    """Smaller boards keep the same layout."""
    position = Position(board=tuple([0] * 10), num_pits=4)

    assert position.get_player_pockets(Player.BLACK) == [5, 6, 7, 8]
    assert position.get_player_store(Player.BLACK) == 9


def test_side_totals():
    board = (1, 2, 3, 0, 0, 0, 7, 0, 0, 0, 0, 5, 5, 9)
    position = Position(board=board)

    assert position.side_total(Player.WHITE) == 6
    assert position.side_total(Player.BLACK) == 10
    assert position.stones_in_pockets == 16


def test_player_toggle():
    assert Player.WHITE.toggled() is Player.BLACK
    assert Player.BLACK.toggled() is Player.WHITE
    assert str(Player.WHITE) == "White"


def test_str_shows_stores_and_turn():
    board = (4, 4, 4, 4, 4, 4, 11, 4, 4, 4, 4, 4, 4, 22)
    position = Position(board=board, player=Player.BLACK)

    rendered = str(position)
    assert "Black's turn" in rendered
    assert "[22]" in rendered
    assert "[11]" in rendered


def test_position_validation():
    """Test validation catches errors."""
    # Wrong board size
    with pytest.raises(ValueError):
        Position(board=tuple([0] * 12))

    # Invalid player
    with pytest.raises(ValueError):
        Position(board=tuple([0] * 14), player=2)

    # Negative stones
    with pytest.raises(ValueError):
        Position(board=tuple([0, -1] + [0] * 12))
