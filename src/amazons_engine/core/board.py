"""
Mutable Amazons game state with exact undo.

The board is modified in place by make_move() and restored by undo(), so a
search can share one Board across its whole recursion. Board is not
thread-safe: give each thread its own copy().

Illegal moves passed to make_move() are ignored: the board is left unchanged
and make_move() returns False. Call is_legal_move() first to tell the two
cases apart without side effects.

Initial layout (LIGHT = W, DARK = B), LIGHT to move:

    10  - - - B - - B - - -
     9  - - - - - - - - - -
     8  - - - - - - - - - -
     7  B - - - - - - - - B
     6  - - - - - - - - - -
     5  - - - - - - - - - -
     4  W - - - - - - - - W
     3  - - - - - - - - - -
     2  - - - - - - - - - -
     1  - - - W - - W - - -
        a b c d e f g h i j
"""

import logging
from typing import Iterator, List, Optional, Tuple

from . import movegen
from .move import Move
from .piece import Piece
from .square import SIZE, SQUARES, Square, sq

logger = logging.getLogger(__name__)

# (col, row) starting squares
LIGHT_START: Tuple[Tuple[int, int], ...] = ((3, 0), (6, 0), (0, 3), (9, 3))
DARK_START: Tuple[Tuple[int, int], ...] = ((3, 9), (6, 9), (0, 6), (9, 6))

# Marks the memoized winner as stale
_UNKNOWN = object()


class Board:
    """
    The state of an Amazons game.

    Holds square occupancy, the side to move, the stack of applied moves and
    a memoized winner.
    """

    def __init__(self, model: Optional["Board"] = None):
        """
        Initialize a board.

        Args:
            model: Board to copy. If None, start from the initial layout.
        """
        self._board: List[Piece] = []
        self._history: List[Move] = []
        self._turn = Piece.LIGHT
        self._winner = _UNKNOWN
        if model is None:
            self.init()
        else:
            self.copy_from(model)

    def init(self) -> None:
        """Reset to the initial position."""
        self._board = [Piece.EMPTY] * (SIZE * SIZE)
        self._history = []
        self._turn = Piece.LIGHT
        for col, row in LIGHT_START:
            self._board[sq(col, row).index] = Piece.LIGHT
        for col, row in DARK_START:
            self._board[sq(col, row).index] = Piece.DARK
        self._winner = _UNKNOWN

    def copy_from(self, model: "Board") -> None:
        """Make me an independent copy of MODEL."""
        self._board = list(model._board)
        self._history = list(model._history)
        self._turn = model._turn
        self._winner = model._winner

    def copy(self) -> "Board":
        """Return an independent copy of this board."""
        return Board(self)

    @classmethod
    def from_text(cls, text: str, turn: Piece = Piece.LIGHT) -> "Board":
        """
        Build a board from its text rendering (see __str__).

        Rows run from the top (row 10) down to row 1; each row holds ten
        cells out of W, B, S and -. Blank lines are skipped.

        Args:
            text: Board rendering
            turn: Side to move

        Returns:
            New Board with an empty history

        Raises:
            ValueError: If TEXT is not a 10x10 grid of piece symbols
        """
        if not turn.is_side:
            raise ValueError(f"Invalid side to move: {turn.name}")
        rows = [line.split() for line in text.splitlines() if line.strip()]
        if len(rows) != SIZE or any(len(cells) != SIZE for cells in rows):
            raise ValueError(f"Board text must be {SIZE} rows of {SIZE} cells")

        board = cls()
        board._board = [Piece.EMPTY] * (SIZE * SIZE)
        for offset, cells in enumerate(rows):
            row = SIZE - 1 - offset
            for col, symbol in enumerate(cells):
                board._board[sq(col, row).index] = Piece.from_symbol(symbol)
        board._turn = turn
        board._winner = _UNKNOWN
        return board

    @property
    def turn(self) -> Piece:
        """Side to move (LIGHT or DARK)."""
        return self._turn

    @property
    def num_moves(self) -> int:
        """Number of moves made and not undone."""
        return len(self._history)

    @property
    def history(self) -> Tuple[Move, ...]:
        """Moves made and not undone, oldest first."""
        return tuple(self._history)

    def get(self, s: Square) -> Piece:
        """Return the contents of square S."""
        return self._board[s.index]

    def put(self, p: Piece, s: Square) -> None:
        """Set square S to P."""
        self._board[s.index] = p
        self._winner = _UNKNOWN

    def winner(self) -> Optional[Piece]:
        """
        Return the winner, or None if the game is not over.

        The side to move loses when it has no legal move.
        """
        if self._winner is _UNKNOWN:
            if movegen.has_legal_move(self, self._turn):
                self._winner = None
            else:
                self._winner = self._turn.opponent()
        return self._winner

    def is_unblocked_move(
        self, from_sq: Square, to: Square, as_empty: Optional[Square] = None
    ) -> bool:
        """
        Return True iff FROM_SQ-TO is an unblocked queen move.

        Every square along the move after FROM_SQ, TO included, must be
        EMPTY or be AS_EMPTY. The contents of FROM_SQ are ignored.
        """
        if not from_sq.is_queen_move(to):
            return False
        skip = -1 if as_empty is None else as_empty.index
        for square in from_sq.ray(from_sq.direction(to)):
            if self.get(square) is not Piece.EMPTY and square.index != skip:
                return False
            if square.index == to.index:
                return True
        raise RuntimeError(f"{to} not found on ray from {from_sq}")

    def is_legal(
        self,
        from_sq: Square,
        to: Optional[Square] = None,
        spear: Optional[Square] = None,
    ) -> bool:
        """
        Check a move, or a prefix of one, against the current position.

        - is_legal(from_sq): FROM_SQ holds an archer of the side to move
        - is_legal(from_sq, to): ... and FROM_SQ-TO is unblocked
        - is_legal(from_sq, to, spear): ... and the spear line TO-SPEAR is
          unblocked once the archer has left FROM_SQ

        Raises:
            ValueError: If SPEAR is given without TO
        """
        if to is None and spear is not None:
            raise ValueError("A spear square needs an archer destination")
        if self.get(from_sq) is not self._turn:
            return False
        if to is None:
            return True
        if not self.is_unblocked_move(from_sq, to):
            return False
        if spear is None:
            return True
        return self.is_unblocked_move(to, spear, from_sq)

    def is_legal_move(self, move: Move) -> bool:
        """Return True iff MOVE is legal in the current position."""
        return self.is_legal(move.from_sq, move.to, move.spear)

    def make_move(self, move: Move) -> bool:
        """
        Apply MOVE if it is legal.

        Returns:
            True if the move was made, False if it was illegal and ignored
        """
        if not self.is_legal_move(move):
            logger.debug(f"Ignoring illegal move {move}")
            return False
        archer = self._board[move.from_sq.index]
        self._board[move.to.index] = archer
        self._board[move.from_sq.index] = Piece.EMPTY
        self._board[move.spear.index] = Piece.SPEAR
        self._history.append(move)
        self._turn = self._turn.opponent()
        self._winner = _UNKNOWN
        return True

    def undo(self) -> Optional[Move]:
        """
        Take back the last move. Has no effect on a board with no history.

        Returns:
            The undone move, or None
        """
        if not self._history:
            return None
        move = self._history.pop()
        # Spear first: it may have been thrown back onto the origin
        self._board[move.spear.index] = Piece.EMPTY
        self._board[move.from_sq.index] = self._board[move.to.index]
        self._board[move.to.index] = Piece.EMPTY
        self._turn = self._turn.opponent()
        self._winner = _UNKNOWN
        return move

    def reachable_from(
        self, from_sq: Square, as_empty: Optional[Square] = None
    ) -> Iterator[Square]:
        """Iterate squares reachable by unblocked queen move from FROM_SQ."""
        return movegen.reachable_from(self, from_sq, as_empty)

    def legal_moves(self, side: Optional[Piece] = None) -> Iterator[Move]:
        """Iterate legal moves for SIDE (default: the side to move)."""
        return movegen.legal_moves(self, self._turn if side is None else side)

    def count_legal_moves(self, side: Optional[Piece] = None) -> int:
        """Mobility of SIDE (default: the side to move)."""
        return movegen.count_legal_moves(self, self._turn if side is None else side)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._board == other._board and self._turn is other._turn

    __hash__ = None  # mutable

    def __str__(self) -> str:
        """Rows from the top (row 10) down, two characters per cell."""
        lines = []
        for row in range(SIZE - 1, -1, -1):
            cells = "".join(
                f" {self._board[row * SIZE + col].symbol}" for col in range(SIZE)
            )
            lines.append(f"  {cells}")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Board(turn={self._turn.name}, moves={self.num_moves})"

    def squares(self) -> Iterator[Tuple[Square, Piece]]:
        """Iterate (square, contents) pairs in index order."""
        for s in SQUARES:
            yield s, self._board[s.index]
