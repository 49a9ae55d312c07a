"""Move search."""

from .alphabeta import (
    AlphaBetaSearch,
    SearchConfig,
    SearchStats,
    static_score,
    WINNING_VALUE,
)
from .player import AIPlayer

__all__ = [
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchStats",
    "static_score",
    "WINNING_VALUE",
    "AIPlayer",
]
