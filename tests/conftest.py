"""Shared board layouts for tests."""

import pytest
from amazons_engine.core import Board, Piece

# LIGHT archer on f5 hemmed in by spears and pieces on three sides
REACHABLE_LAYOUT = """
- - - - - - - - - -
- - - - - - - - W W
- - - - - - - S - S
- - - S S S S - - S
- - - S - - - - B -
- - - S - W - - B -
- - - S S S B W B -
- - - - - - - - - -
- - - - - - - - - -
- - - - - - - - - -
"""

# LIGHT confined to a1-c2, DARK to i9-j10, everything else speared
PENS_LAYOUT = """
S S S S S S S S - B
S S S S S S S S - -
S S S S S S S S S S
S S S S S S S S S S
S S S S S S S S S S
S S S S S S S S S S
S S S S S S S S S S
S S S S S S S S S S
- - - S S S S S S S
W - - S S S S S S S
"""

# Only the j file is open; LIGHT on j1 can shut DARK in on j10
CORRIDOR_LAYOUT = """
S S S S S S S S S B
S S S S S S S S S -
S S S S S S S S S -
S S S S S S S S S -
S S S S S S S S S -
S S S S S S S S S -
S S S S S S S S S -
S S S S S S S S S -
S S S S S S S S S -
S S S S S S S S S W
"""


@pytest.fixture
def board():
    """Fresh board in the initial position."""
    return Board()


@pytest.fixture
def reachable_board():
    return Board.from_text(REACHABLE_LAYOUT)


@pytest.fixture
def pens_board():
    return Board.from_text(PENS_LAYOUT, turn=Piece.LIGHT)


@pytest.fixture
def corridor_board():
    return Board.from_text(CORRIDOR_LAYOUT, turn=Piece.LIGHT)
