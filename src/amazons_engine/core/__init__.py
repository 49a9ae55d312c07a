"""Core board geometry, game state and move generation."""

from .piece import Piece
from .square import (
    SIZE,
    SQUARES,
    SQ_PATTERN,
    DIRECTIONS,
    Square,
    exists,
    sq,
    sq_index,
    parse_square,
)
from .move import Move, mv, parse_move
from .board import Board, LIGHT_START, DARK_START
from .movegen import (
    reachable_from,
    legal_moves,
    count_legal_moves,
    has_legal_move,
)

__all__ = [
    "Piece",
    "SIZE",
    "SQUARES",
    "SQ_PATTERN",
    "DIRECTIONS",
    "Square",
    "exists",
    "sq",
    "sq_index",
    "parse_square",
    "Move",
    "mv",
    "parse_move",
    "Board",
    "LIGHT_START",
    "DARK_START",
    "reachable_from",
    "legal_moves",
    "count_legal_moves",
    "has_legal_move",
]
