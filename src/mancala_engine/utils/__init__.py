"""Utility modules for the Mancala engine."""

from .rich_display import (
    BoardDisplay,
    format_move,
    setup_rich_logging,
)

__all__ = [
    "BoardDisplay",
    "format_move",
    "setup_rich_logging",
]
