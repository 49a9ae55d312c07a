"""
Fixed-depth minimax search with alpha-beta pruning.

LIGHT is the maximizing side (sense +1), DARK the minimizing side
(sense -1). Leaves are scored by a mobility heuristic: LIGHT's legal move
count minus DARK's. Won positions score +/-WINNING_VALUE.

The search works on a single shared Board, applying each move in place and
undoing it before trying the next.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from ..core import Board, Move, Piece

logger = logging.getLogger(__name__)

# Score of a won position (positive = LIGHT wins); exceeds any mobility
# difference, which is bounded by 4 archers * 35 destinations * 35 spears
WINNING_VALUE = 1_000_000
INFTY = float("inf")


@dataclass
class SearchConfig:
    """Search tunables."""

    depth: int = 1  # Plies searched below the root
    show_progress: bool = False  # tqdm bar over root moves

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")


@dataclass
class SearchStats:
    """Counters for the most recent search."""

    nodes: int = 0  # Positions visited, root included
    cutoffs: int = 0  # Alpha-beta cutoffs
    evaluations: int = 0  # Static evaluations
    elapsed: float = 0.0  # Seconds
    best_score: Optional[float] = None


def static_score(board: Board) -> int:
    """
    Heuristic value of BOARD from LIGHT's point of view.

    Returns:
        +/-WINNING_VALUE if the game is over, otherwise LIGHT's mobility
        minus DARK's
    """
    winner = board.winner()
    if winner is Piece.LIGHT:
        return WINNING_VALUE
    if winner is Piece.DARK:
        return -WINNING_VALUE
    return board.count_legal_moves(Piece.LIGHT) - board.count_legal_moves(Piece.DARK)


class AlphaBetaSearch:
    """
    Depth-limited alpha-beta search.

    Only the root level records a best move; deeper levels compute values.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize the search.

        Args:
            config: Search settings (default: depth 1, no progress bar)
        """
        self.config = config or SearchConfig()
        self.stats = SearchStats()

    def find_best_move(self, board: Board, depth: Optional[int] = None) -> Optional[Move]:
        """
        Find the best move for the side to move on BOARD.

        BOARD is left exactly as it was found.

        Args:
            board: Position to search
            depth: Search depth (default: config.depth)

        Returns:
            Best move, or None if the side to move has already lost
        """
        depth = self.config.depth if depth is None else depth
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.stats = SearchStats()
        start_time = time.perf_counter()

        if board.winner() is not None:
            logger.info(f"Position is terminal, {board.winner().name} has won")
            return None

        sense = 1 if board.turn is Piece.LIGHT else -1
        best_score, best_move = self._search_root(board, depth, sense)

        if best_move is None:
            raise RuntimeError(f"No move found in non-terminal position:\n{board}")

        self.stats.best_score = best_score
        self.stats.elapsed = time.perf_counter() - start_time
        logger.info(
            f"Depth {depth} search for {board.turn.name}: best {best_move} "
            f"(score {best_score}), {self.stats.nodes:,} nodes, "
            f"{self.stats.cutoffs:,} cutoffs in {self.stats.elapsed:.2f}s"
        )
        return best_move

    def _search_root(self, board: Board, depth: int, sense: int) -> tuple[float, Optional[Move]]:
        """Search the root, recording the first move with the best value."""
        self.stats.nodes += 1
        alpha, beta = -INFTY, INFTY
        best_score = -INFTY if sense == 1 else INFTY
        best_move = None

        moves = board.legal_moves()
        if self.config.show_progress:
            moves = tqdm(
                list(moves), desc=f"Depth {depth}", unit=" move", leave=False
            )

        for move in moves:
            board.make_move(move)
            value = self.search(board, depth - 1, -sense, alpha, beta)
            board.undo()

            # Update best
            if sense == 1:
                if value > best_score:
                    best_score, best_move = value, move
                alpha = max(alpha, best_score)
            else:
                if value < best_score:
                    best_score, best_move = value, move
                beta = min(beta, best_score)

        return best_score, best_move

    def search(self, board: Board, depth: int, sense: int, alpha: float, beta: float) -> float:
        """
        Alpha-beta value of BOARD searched to DEPTH.

        Args:
            board: Position (restored before returning)
            depth: Remaining plies
            sense: +1 if LIGHT (maximizing) is to move, -1 for DARK
            alpha: Lower bound already guaranteed to the maximizer
            beta: Upper bound already guaranteed to the minimizer

        Returns:
            Position value; a bound rather than the exact minimax value when
            a cutoff fires
        """
        self.stats.nodes += 1
        if depth == 0 or board.winner() is not None:
            self.stats.evaluations += 1
            return static_score(board)

        if sense == 1:
            score = -INFTY
            for move in board.legal_moves():
                board.make_move(move)
                score = max(score, self.search(board, depth - 1, -1, alpha, beta))
                alpha = max(alpha, score)
                board.undo()
                if alpha >= beta:
                    self.stats.cutoffs += 1
                    break
            return score
        else:
            score = INFTY
            for move in board.legal_moves():
                board.make_move(move)
                score = min(score, self.search(board, depth - 1, 1, alpha, beta))
                beta = min(beta, score)
                board.undo()
                if alpha >= beta:
                    self.stats.cutoffs += 1
                    break
            return score
