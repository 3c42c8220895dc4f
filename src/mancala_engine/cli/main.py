"""
Main CLI for the Mancala engine.
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from tqdm import tqdm

from ..core import (
    MancalaError,
    Player,
    Position,
    default_position,
    final_score,
    full_move,
    get_game_result,
    legal_turns,
    sub_move,
)
from ..solver import AlphaBetaSearch, ENGINE_DEPTH, score_root_moves
from ..utils.rich_display import BoardDisplay, format_move, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def pocket_from_label(position: Position, label: int) -> int:
    """Map a 1-based pocket label on the mover's side to a board index."""
    offset = 0 if position.player == Player.WHITE else position.num_pits + 1
    return offset + label - 1


def read_human_sow(
    position: Position,
    display: BoardDisplay,
    read: Callable[[str], str] = input,
) -> Optional[Position]:
    """
    Prompt until the human enters a legal sow, and apply it.

    Returns:
        Position after the sow, or None if the human quits
    """
    while True:
        raw = read(f"{position.player}, choose a pocket (1-{position.num_pits}, q to quit): ")
        raw = raw.strip().lower()
        if raw in ("q", "quit", "exit"):
            return None

        try:
            label = int(raw)
        except ValueError:
            display.log_error(f"'{raw}' is not a pocket number")
            continue

        try:
            return sub_move(position, pocket_from_label(position, label))
        except MancalaError as e:
            display.log_error(f"Pocket {label}: {e}")


def play_game(
    human: Player,
    depth: int,
    display: BoardDisplay,
    read: Callable[[str], str] = input,
) -> Optional[Position]:
    """
    Interactive game: one human side, one engine side.

    A human turn is played one sow at a time so that a sow ending in the
    human's store prompts again. The engine plays its whole compound move
    at once.

    Returns:
        Final position, or None if the human quit
    """
    logger = logging.getLogger(__name__)
    engine = AlphaBetaSearch(depth)
    position = default_position()

    while legal_turns(position):
        display.show_board(position)

        if position.player == human:
            position = read_human_sow(position, display, read)
            if position is None:
                display.log_warning("Game abandoned")
                return None
            continue

        result = engine.best_move(position)
        display.log_info(
            f"Engine plays {format_move(result.best_move, position)} "
            f"(score {result.score:+d})"
        )
        logger.debug(f"Engine stats: {engine.stats}")
        position = full_move(position, result.best_move)

    display.show_board(position)
    display.log_success(f"Game over: {get_game_result(position)}")
    return position


def best_move_command(args):
    """Search the starting position and show the best move."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = BoardDisplay()

    display.show_header("Mancala Engine - Best Move", args.depth)

    position = default_position()
    engine = AlphaBetaSearch(args.depth)
    result = engine.best_move(position)

    logger.info(f"Best move: {list(result.best_move)}")
    logger.info(f"Score: {result.score}")
    logger.info(f"Nodes searched: {engine.stats.nodes:,} ({engine.stats.cutoffs:,} cutoffs)")

    display.log("Position after move:")
    display.show_board(full_move(position, result.best_move))


def analyze_command(args):
    """Score every opening move."""
    setup_logging(args.log_level)
    display = BoardDisplay()

    display.show_header("Mancala Engine - Opening Analysis", args.depth)

    position = default_position()
    display.show_board(position)
    scored = score_root_moves(position, args.depth, show_progress=True)
    display.show_root_scores(position, scored)


def play_command(args):
    """Play against the engine."""
    setup_rich_logging(args.log_level)
    display = BoardDisplay()
    human = Player.WHITE if args.color == "white" else Player.BLACK

    display.show_header(f"Mancala Engine - You play {human}", args.depth)
    play_game(human, args.depth, display)


def selfplay_command(args):
    """Let the engine play both sides."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = BoardDisplay()

    display.show_header("Mancala Engine - Self Play", args.depth)

    engine = AlphaBetaSearch(args.depth)
    position = default_position()
    turns = 0

    with tqdm(total=args.max_turns, desc="Self play", unit=" turn") as pbar:
        while legal_turns(position) and turns < args.max_turns:
            result = engine.best_move(position)
            logger.debug(
                f"Turn {turns + 1}: {position.player} plays {list(result.best_move)} "
                f"(score {result.score:+d})"
            )
            position = full_move(position, result.best_move)
            turns += 1
            pbar.update(1)

    display.show_board(position)

    outcome = get_game_result(position)
    if outcome is None:
        logger.warning(f"Stopped after {turns} turns; current score {final_score(position):+d}")
    else:
        logger.info(f"Finished in {turns} turns: {outcome}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Kalah engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    best_parser = subparsers.add_parser("best-move", help="Best move from the opening position")
    best_parser.add_argument(
        "--depth", type=int, default=ENGINE_DEPTH, help="Search depth in turns"
    )
    best_parser.set_defaults(func=best_move_command)

    analyze_parser = subparsers.add_parser("analyze", help="Score every opening move")
    analyze_parser.add_argument(
        "--depth", type=int, default=ENGINE_DEPTH, help="Search depth in turns"
    )
    analyze_parser.set_defaults(func=analyze_command)

    play_parser = subparsers.add_parser("play", help="Play against the engine")
    play_parser.add_argument(
        "--color", choices=["white", "black"], default="white", help="Your side (White moves first)"
    )
    play_parser.add_argument(
        "--depth", type=int, default=ENGINE_DEPTH, help="Engine search depth in turns"
    )
    play_parser.set_defaults(func=play_command)

    selfplay_parser = subparsers.add_parser("selfplay", help="Engine plays both sides")
    selfplay_parser.add_argument(
        "--depth", type=int, default=6, help="Search depth in turns"
    )
    selfplay_parser.add_argument(
        "--max-turns", type=int, default=200, help="Stop after this many turns"
    )
    selfplay_parser.set_defaults(func=selfplay_command)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if getattr(args, "depth", 1) < 1:
        parser.error("--depth must be at least 1")

    args.func(args)


if __name__ == "__main__":
    main()
