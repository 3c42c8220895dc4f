"""
Rich-based board and engine output.

Provides clean, formatted output with:
- Board rendering (pockets, stores, side to move)
- Root move score tables
- Short status lines for the play loop
"""

import logging
from typing import List, Optional, Sequence, Tuple
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from ..core import Move, Player, Position

console = Console()
logger = logging.getLogger(__name__)


def format_move(move: Sequence[int], position: Optional[Position] = None) -> str:
    """
    Format a move as 1-based pocket labels on the mover's side.

    Without a position the raw board indices are shown.
    """
    if position is None:
        return " → ".join(str(p) for p in move)

    offset = 0 if position.player == Player.WHITE else position.num_pits + 1
    return " → ".join(str(p - offset + 1) for p in move)


class BoardDisplay:
    """
    Rich-based display for games in progress.

    Shows:
    - Black pockets (right to left) above White pockets (left to right)
    - Stores at either end
    - Whose turn it is
    """

    def __init__(self, console: Console = console):
        self.console = console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        """Log warning message."""
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, depth: int):
        """Show engine header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print("Game: Kalah(6,4)")
        self.console.print(f"Search depth: {depth}")
        self.console.print()

    def board_table(self, position: Position) -> Table:
        """Create the board grid."""
        n = position.num_pits
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Black store", justify="center", style="magenta")
        for _ in range(n):
            table.add_column(justify="center")
        table.add_column("White store", justify="center", style="cyan")

        black_pockets = reversed(position.board[n + 1 : 2 * n + 1])
        white_pockets = position.board[:n]

        table.add_row("", *[f"[magenta]{s:>2}[/magenta]" for s in black_pockets], "")
        table.add_row(
            f"[bold]{position[position.black_store_idx]:>2}[/bold]",
            *["" for _ in range(n)],
            f"[bold]{position[position.white_store_idx]:>2}[/bold]",
        )
        table.add_row("", *[f"[cyan]{s:>2}[/cyan]" for s in white_pockets], "")
        table.add_row("", *[f"[dim]{i + 1}[/dim]" for i in range(n)], "")

        return table

    def show_board(self, position: Position):
        """Render a position inside a panel."""
        color = "cyan" if position.player == Player.WHITE else "magenta"
        subtitle = Text(f"{position.player} to move", style=f"bold {color}")
        self.console.print(
            Panel(self.board_table(position), title="Kalah", subtitle=subtitle, expand=False)
        )

    def show_root_scores(self, position: Position, scored: List[Tuple[Move, int]]):
        """Show a table of root moves and their scores, best first."""
        maximizing = position.player == Player.WHITE
        ranked = sorted(
            enumerate(scored),
            key=lambda item: (-item[1][1] if maximizing else item[1][1], item[0]),
        )

        table = Table(title=f"Root moves for {position.player}")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Move (pockets)", style="cyan")
        table.add_column("Score", justify="right")

        for rank, (_, (move, score)) in enumerate(ranked, start=1):
            score_str = f"{score:+d}"
            if rank == 1:
                score_str = f"[bold green]{score_str}[/bold green]"
            table.add_row(str(rank), format_move(move, position), score_str)

        self.console.print(table)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
