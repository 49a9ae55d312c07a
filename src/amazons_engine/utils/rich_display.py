"""
Rich-based console output for the CLI.

Provides:
- Coloured board diagrams
- Move listings
- Search summaries
"""

import logging
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core import SIZE, Board, Move, Piece, sq
from ..solver import SearchStats

console = Console()

PIECE_STYLES = {
    Piece.LIGHT: "bold white",
    Piece.DARK: "bold red",
    Piece.SPEAR: "yellow",
    Piece.EMPTY: "dim",
}


class BoardDisplay:
    """Rich rendering of boards, moves and search results."""

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize the display.

        Args:
            output: Console to print to (default: the module console)
        """
        self.console = output or console

    def log_info(self, message: str):
        """Print an info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Print a success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_error(self, message: str):
        """Print an error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        """Print a section rule."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")

    def board_table(self, board: Board) -> Table:
        """Board as a table, row 10 at the top, with rank and file labels."""
        table = Table(show_header=True, box=None, padding=(0, 1))
        table.add_column("", style="cyan", justify="right")
        for col in range(SIZE):
            table.add_column(chr(ord("a") + col), style="cyan", justify="center")

        for row in range(SIZE - 1, -1, -1):
            cells = []
            for col in range(SIZE):
                piece = board.get(sq(col, row))
                cells.append(Text(piece.symbol, style=PIECE_STYLES[piece]))
            table.add_row(str(row + 1), *cells)
        return table

    def show_board(self, board: Board):
        """Print the board and whose turn it is."""
        self.console.print(self.board_table(board))
        winner = board.winner()
        if winner is not None:
            self.log_success(f"{winner.name} wins after {board.num_moves} moves")
        else:
            self.console.print(f"{board.turn.name} to move (move {board.num_moves + 1})")

    def show_moves(self, moves: Iterable[Move], total: int, limit: Optional[int] = None):
        """Print up to LIMIT moves, several per line, then the total."""
        shown = [str(move) for move in moves]
        if limit is not None:
            shown = shown[:limit]
        per_line = 6
        for start in range(0, len(shown), per_line):
            self.console.print("  " + "  ".join(f"{m:<13}" for m in shown[start : start + per_line]))
        if len(shown) < total:
            self.console.print(f"[dim]... {total - len(shown):,} more[/dim]")
        self.log_info(f"{total:,} legal moves")

    def show_search_result(self, move: Optional[Move], stats: SearchStats, depth: int):
        """Print the chosen move and search counters."""
        if move is None:
            self.log_error("No legal move: the side to move has lost")
            return

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")
        table.add_row("Best move", f"[bold green]{move}[/bold green]")
        table.add_row("Score", f"{stats.best_score:+,.0f}")
        table.add_row("Depth", str(depth))
        table.add_row("Nodes", f"{stats.nodes:,}")
        table.add_row("Evaluations", f"{stats.evaluations:,}")
        table.add_row("Cutoffs", f"{stats.cutoffs:,}")
        table.add_row("Time", f"{stats.elapsed:.2f}s")
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
