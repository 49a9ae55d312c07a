"""
Amazons moves.

A move is an archer step FROM-TO followed by a spear throw TO-SPEAR,
written in standard notation as "a4-b4(c4)".
"""

import re
from dataclasses import dataclass

from .square import SQ_PATTERN, Square, parse_square

_MOVE_RE = re.compile(
    rf"^\s*({SQ_PATTERN})\s*-\s*({SQ_PATTERN})\s*\(\s*({SQ_PATTERN})\s*\)\s*$"
)


@dataclass(frozen=True)
class Move:
    """Archer move FROM_SQ-TO with a spear thrown onto SPEAR."""

    from_sq: Square
    to: Square
    spear: Square

    def __str__(self) -> str:
        return f"{self.from_sq}-{self.to}({self.spear})"


def mv(from_sq: Square, to: Square, spear: Square) -> Move:
    """Return the move FROM_SQ-TO(SPEAR)."""
    return Move(from_sq, to, spear)


def parse_move(text: str) -> Move:
    """
    Parse a move in standard notation.

    Args:
        text: Move text such as "a4-b4(c4)"

    Returns:
        The parsed Move

    Raises:
        ValueError: If TEXT is not a well-formed move
    """
    match = _MOVE_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid move: {text!r}")
    return Move(*(parse_square(group) for group in match.groups()))
