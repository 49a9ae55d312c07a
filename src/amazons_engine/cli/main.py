"""
Main CLI for the Amazons engine.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core import Board, Piece, parse_move
from ..solver import AlphaBetaSearch, SearchConfig
from ..utils.rich_display import BoardDisplay, setup_rich_logging

SIDES = {"light": Piece.LIGHT, "dark": Piece.DARK}


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_board(args) -> Board:
    """
    Build the position described by the command line.

    Starts from --position (a board rendering file) or the initial layout,
    then plays --moves in order.

    Raises:
        ValueError: On a malformed position or move, or an illegal move
    """
    logger = logging.getLogger(__name__)

    if args.position:
        text = Path(args.position).read_text()
        board = Board.from_text(text, turn=SIDES[args.turn])
        logger.info(f"Loaded position from {args.position}")
    else:
        board = Board()

    for number, text in enumerate(args.moves or [], start=1):
        move = parse_move(text)
        if not board.make_move(move):
            raise ValueError(f"Move {number} ({move}) is illegal for {board.turn.name}")
        logger.debug(f"Played {move}")

    return board


def show_command(args, display: BoardDisplay) -> None:
    """Show a position."""
    board = load_board(args)
    display.show_header(f"Position after {board.num_moves} moves")
    display.show_board(board)


def moves_command(args, display: BoardDisplay) -> None:
    """List legal moves."""
    board = load_board(args)
    side = SIDES[args.side] if args.side else board.turn

    display.show_header(f"Legal moves for {side.name}")
    total = board.count_legal_moves(side)
    display.show_moves(board.legal_moves(side), total, limit=args.limit)


def bestmove_command(args, display: BoardDisplay) -> None:
    """Search a position."""
    board = load_board(args)
    config = SearchConfig(depth=args.depth, show_progress=args.progress)
    search = AlphaBetaSearch(config)

    display.show_header(f"Depth {args.depth} search for {board.turn.name}")
    display.show_board(board)
    move = search.find_best_move(board)
    display.show_search_result(move, search.stats, args.depth)


def add_position_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command that takes a position."""
    parser.add_argument(
        "--position",
        default=None,
        help="File holding a board rendering (default: initial layout)",
    )
    parser.add_argument(
        "--turn",
        choices=sorted(SIDES),
        default="light",
        help="Side to move in --position",
    )
    parser.add_argument(
        "--moves",
        nargs="*",
        default=[],
        metavar="MOVE",
        help='Moves to play first, e.g. "d1-d7(g7)"',
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Game of the Amazons engine")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-log", action="store_true", help="Route log records through rich"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Show command
    show_parser = subparsers.add_parser("show", help="Print a position")
    add_position_arguments(show_parser)
    show_parser.set_defaults(func=show_command)

    # Moves command
    moves_parser = subparsers.add_parser("moves", help="List legal moves")
    add_position_arguments(moves_parser)
    moves_parser.add_argument(
        "--side",
        choices=sorted(SIDES),
        default=None,
        help="Side to list moves for (default: side to move)",
    )
    moves_parser.add_argument(
        "--limit", type=int, default=30, help="Maximum number of moves to print"
    )
    moves_parser.set_defaults(func=moves_command)

    # Bestmove command
    bestmove_parser = subparsers.add_parser("bestmove", help="Search for the best move")
    add_position_arguments(bestmove_parser)
    bestmove_parser.add_argument(
        "--depth", type=int, default=1, help="Search depth in plies"
    )
    bestmove_parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar over root moves"
    )
    bestmove_parser.set_defaults(func=bestmove_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.rich_log:
        setup_rich_logging(args.log_level)
    else:
        setup_logging(args.log_level)

    display = BoardDisplay()
    try:
        args.func(args, display)
    except (ValueError, OSError) as e:
        display.log_error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
