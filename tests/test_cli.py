"""Tests for the interactive host loop."""

import io

import pytest
from rich.console import Console

from mancala_engine.cli.main import play_game, pocket_from_label, read_human_sow
from mancala_engine.core import Player, default_position, sub_move
from mancala_engine.utils import BoardDisplay, format_move


@pytest.fixture
def display():
    return BoardDisplay(console=Console(file=io.StringIO(), width=100))


def _scripted(*answers):
    """Input function that replays fixed answers."""
    replies = iter(answers)
    return lambda prompt: next(replies)


def _output(display):
    return display.console.file.getvalue()


def test_pocket_labels_map_to_mover_side():
    position = default_position()
    assert pocket_from_label(position, 1) == 0
    assert pocket_from_label(position, 6) == 5

    black = sub_move(position, 0)
    assert pocket_from_label(black, 1) == 7
    assert pocket_from_label(black, 6) == 12


def test_format_move():
    position = sub_move(default_position(), 0)

    assert format_move((9, 10), position) == "3 → 4"
    assert format_move((9, 10)) == "9 → 10"


def test_read_human_sow_reprompts(display):
    """Bad input and illegal pockets are reported, then the prompt repeats."""
    position = default_position()

    result = read_human_sow(position, display, _scripted("abc", "9", "0", "3"))

    assert result == sub_move(position, 2)
    output = _output(display)
    assert "'abc' is not a pocket number" in output
    assert "Pocket 9" in output
    assert "Pocket 0" in output


def test_read_human_sow_empty_pocket(display):
    position = sub_move(default_position(), 2)  # White sows again, pocket 2 empty

    result = read_human_sow(position, display, _scripted("3", "1"))

    assert result == sub_move(position, 0)
    assert "empty" in _output(display)


def test_read_human_sow_quit(display):
    assert read_human_sow(default_position(), display, _scripted(" Q ")) is None


def test_play_game_quit(display):
    assert play_game(Player.WHITE, 1, display, _scripted("q")) is None
    assert "Game abandoned" in _output(display)


def test_play_game_engine_moves_first_for_black_human(display):
    """With the human on Black, the engine opens."""
    assert play_game(Player.BLACK, 1, display, _scripted("q")) is None
    assert "Engine plays 3 → 4" in _output(display)


def test_play_game_extra_sow_prompts_again(display):
    """A human sow into the store asks for another pocket."""
    prompts = []
    answers = iter(["3", "q"])

    def read(prompt):
        prompts.append(prompt)
        return next(answers)

    play_game(Player.WHITE, 1, display, read)

    assert len(prompts) == 2
    assert all(p.startswith("White") for p in prompts)
