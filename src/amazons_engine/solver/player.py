"""
Computer player.

The player sees the game only through two callables supplied by whoever
runs the game: one returning the current Board and one that is told which
move was chosen. It never applies or announces the move itself.
"""

import logging
from typing import Callable, Optional

from ..core import Board, Move, Piece
from .alphabeta import AlphaBetaSearch, SearchConfig

logger = logging.getLogger(__name__)


class AIPlayer:
    """Plays PIECE by alpha-beta search."""

    def __init__(
        self,
        piece: Piece,
        board_accessor: Callable[[], Board],
        report_move: Callable[[Move], None],
        config: Optional[SearchConfig] = None,
    ):
        """
        Initialize the player.

        Args:
            piece: Side played (LIGHT or DARK)
            board_accessor: Returns the game's current Board
            report_move: Called with each chosen move
            config: Search settings
        """
        if not piece.is_side:
            raise ValueError(f"AIPlayer must play LIGHT or DARK, not {piece.name}")
        self.piece = piece
        self.board_accessor = board_accessor
        self.report_move = report_move
        self.search = AlphaBetaSearch(config)

    def max_depth(self, board: Board) -> int:
        """Search depth to use on BOARD."""
        return self.search.config.depth

    def find_move(self) -> Optional[Move]:
        """Return a move for the side to move, or None if it has lost."""
        board = self.board_accessor()
        if board.turn is not self.piece:
            logger.warning(
                f"{self.piece.name} asked to move but it is {board.turn.name}'s turn"
            )
        return self.search.find_best_move(board, self.max_depth(board))

    def my_move(self) -> Optional[str]:
        """
        Choose a move, report it and return its text.

        Returns:
            Move text such as "d1-d7(g7)", or None if there is no move
        """
        move = self.find_move()
        if move is None:
            return None
        self.report_move(move)
        return str(move)
