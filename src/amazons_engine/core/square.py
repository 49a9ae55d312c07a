"""
Board coordinates and queen-move geometry.

Squares are numbered from 0 (a1, lower-left) to 99 (j10, upper-right):

    index = row * 10 + col

There is exactly one Square per position. All 100 are built once at import
time, so clients get them through sq() / sq_index() / parse_square() and may
compare squares with `is`.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

SIZE = 10

# Square designation, e.g. "a3" or "j10"
SQ_PATTERN = r"[a-j](?:10|[1-9])"
_SQ_RE = re.compile(rf"^({SQ_PATTERN})$")

# DIRECTIONS[k] = (dcol, drow): N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


def exists(col: int, row: int) -> bool:
    """Return True iff (col, row) lies on the board."""
    return 0 <= col < SIZE and 0 <= row < SIZE


@dataclass(frozen=True)
class Square:
    """
    A position on the Amazons board.

    Immutable. sq() returns the shared instance for a position; a Square
    built directly compares equal to it and behaves the same.
    """

    col: int
    row: int

    def __post_init__(self) -> None:
        """Validate coordinates."""
        if not exists(self.col, self.row):
            raise ValueError("row or column out of bounds")

    @property
    def index(self) -> int:
        """Linear index 0-99 (a1 = 0, j10 = 99)."""
        return self.row * SIZE + self.col

    def queen_move(self, direction: int, steps: int) -> Optional["Square"]:
        """
        Return the square STEPS away in DIRECTION, or None if off the board.

        Args:
            direction: 0 (north) through 7 (northwest), clockwise
            steps: Number of steps, >= 0

        Returns:
            Target Square, or None for an invalid direction, negative steps
            or a square outside the board
        """
        if not 0 <= direction < len(DIRECTIONS) or steps < 0:
            return None
        dcol, drow = DIRECTIONS[direction]
        col = self.col + dcol * steps
        row = self.row + drow * steps
        if exists(col, row):
            return sq(col, row)
        return None

    def is_queen_move(self, to: Optional["Square"]) -> bool:
        """Return True iff self-TO lies on a row, column or diagonal."""
        if to is None or to.index == self.index:
            return False
        dcol = abs(self.col - to.col)
        drow = abs(self.row - to.row)
        return dcol == 0 or drow == 0 or dcol == drow

    def direction(self, to: "Square") -> int:
        """
        Return the direction index of the queen move self-TO.

        Raises:
            ValueError: If self-TO is not a queen move
        """
        if not self.is_queen_move(to):
            raise ValueError(f"{self}-{to} is not a queen move")
        dcol = _sign(to.col - self.col)
        drow = _sign(to.row - self.row)
        return DIRECTIONS.index((dcol, drow))

    def ray(self, direction: int) -> Tuple["Square", ...]:
        """Squares walked from here in DIRECTION, nearest first."""
        return _RAYS[self.index][direction]

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.col)}{self.row + 1}"

    def __repr__(self) -> str:
        return f"Square({self})"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# All squares, by index
SQUARES: Tuple[Square, ...] = tuple(
    Square(index % SIZE, index // SIZE) for index in range(SIZE * SIZE)
)


def sq(col: int, row: int) -> Square:
    """
    Return the unique Square at (col, row).

    Raises:
        ValueError: If the coordinates are off the board
    """
    if not exists(col, row):
        raise ValueError("row or column out of bounds")
    return SQUARES[row * SIZE + col]


def sq_index(index: int) -> Square:
    """Return the unique Square with linear index INDEX."""
    if not 0 <= index < SIZE * SIZE:
        raise ValueError(f"Square index {index} out of bounds")
    return SQUARES[index]


def parse_square(text: str) -> Square:
    """
    Return the Square named by TEXT in standard notation (e.g. "a4").

    Raises:
        ValueError: If TEXT is not a square designation
    """
    match = _SQ_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid square designation: {text!r}")
    name = match.group(1)
    return sq(ord(name[0]) - ord("a"), int(name[1:]) - 1)


def _build_rays() -> Tuple[Tuple[Tuple[Square, ...], ...], ...]:
    """Precompute every square's eight rays, by index."""
    table = []
    for square in SQUARES:
        rays = []
        for dcol, drow in DIRECTIONS:
            walk = []
            col, row = square.col + dcol, square.row + drow
            while exists(col, row):
                walk.append(SQUARES[row * SIZE + col])
                col += dcol
                row += drow
            rays.append(tuple(walk))
        table.append(tuple(rays))
    return tuple(table)


# _RAYS[index][direction]: squares walked from SQUARES[index], nearest first
_RAYS = _build_rays()
