"""
Legal move enumeration.

Enumeration order is fixed and reproducible:
1. Starting squares in ascending index order (a1, b1, ..., j10)
2. Archer destinations by ascending direction (N, NE, ..., NW), then
   ascending distance
3. Spear targets in the same order, thrown from the destination with the
   vacated starting square treated as empty

Each call returns a fresh generator reading the board as it is when
iterated. A generator stays valid only if every change made to the board
between two of its items is undone before the next item is requested, which
is how the search uses it.
"""

from typing import TYPE_CHECKING, Iterator, Optional

from .move import Move
from .piece import Piece
from .square import DIRECTIONS, SQUARES, Square

if TYPE_CHECKING:
    from .board import Board


def reachable_from(
    board: "Board", origin: Square, as_empty: Optional[Square] = None
) -> Iterator[Square]:
    """
    Iterate squares reachable by an unblocked queen move from ORIGIN.

    Ignores whatever stands on ORIGIN. Each direction's walk stops at the
    first occupied square (other than AS_EMPTY) or at the edge.

    Args:
        board: Board to read occupancy from
        origin: Starting square
        as_empty: Square treated as EMPTY whatever it holds (may be None)

    Yields:
        Reachable squares, by direction then distance
    """
    skip = -1 if as_empty is None else as_empty.index
    for direction in range(len(DIRECTIONS)):
        for square in origin.ray(direction):
            if board.get(square) is not Piece.EMPTY and square.index != skip:
                break
            yield square


def legal_moves(board: "Board", side: Piece) -> Iterator[Move]:
    """Iterate all legal moves for SIDE, regardless of whose turn it is."""
    for start in SQUARES:
        if board.get(start) is not side:
            continue
        for to in reachable_from(board, start):
            for spear in reachable_from(board, to, start):
                yield Move(start, to, spear)


def count_legal_moves(board: "Board", side: Piece) -> int:
    """Number of moves legal_moves(board, SIDE) would yield."""
    count = 0
    for start in SQUARES:
        if board.get(start) is not side:
            continue
        for to in reachable_from(board, start):
            count += sum(1 for _ in reachable_from(board, to, start))
    return count


def has_legal_move(board: "Board", side: Piece) -> bool:
    """True iff SIDE has at least one legal move."""
    # Any reachable destination has at least one spear target: the start square
    for start in SQUARES:
        if board.get(start) is side:
            for _ in reachable_from(board, start):
                return True
    return False
