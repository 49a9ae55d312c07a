"""Tests for legal move enumeration."""

from amazons_engine.core import (
    Board,
    Piece,
    count_legal_moves,
    has_legal_move,
    legal_moves,
    parse_move,
    reachable_from,
    sq,
)


def test_reachable_from(reachable_board):
    """Exactly the 8 open squares around f5 are reachable."""
    expected = {
        sq(5, 5),
        sq(4, 5),
        sq(4, 4),
        sq(6, 4),
        sq(7, 4),
        sq(6, 5),
        sq(7, 6),
        sq(8, 7),
    }
    squares = list(reachable_board.reachable_from(sq(5, 4)))

    assert len(squares) == 8
    assert set(squares) == expected


def test_reachable_order(reachable_board):
    """Squares come by direction (N, NE, ..., NW), then distance."""
    squares = [str(s) for s in reachable_from(reachable_board, sq(5, 4))]
    assert squares == ["f6", "g6", "h7", "i8", "g5", "h5", "e5", "e6"]


def test_reachable_as_empty(reachable_board):
    """A square treated as empty lets the walk continue past it."""
    f5, i5 = sq(5, 4), sq(8, 4)
    squares = list(reachable_board.reachable_from(f5, i5))

    assert i5 in squares
    assert sq(9, 4) in squares
    assert len(squares) == 10


def test_initial_move_count(board):
    """The opening position has 2176 legal moves."""
    moves = list(board.legal_moves())

    assert len(moves) == 2176
    assert len(set(moves)) == 2176
    assert all(board.is_legal_move(move) for move in moves)


def test_initial_move_count_dark(board):
    """The opening position is symmetric."""
    assert count_legal_moves(board, Piece.DARK) == 2176
    assert board.count_legal_moves() == 2176


def test_first_moves_in_order(board):
    """The first starting square is d1, heading north."""
    moves = legal_moves(board, Piece.LIGHT)
    first = [str(next(moves)) for _ in range(3)]
    assert first == ["d1-d2(d3)", "d1-d2(d4)", "d1-d2(d5)"]


def test_enumeration_is_repeatable(board):
    """Two enumerations of an unchanged board agree move for move."""
    board.make_move(parse_move("d1-d7(g7)"))
    first = list(board.legal_moves())
    second = list(board.legal_moves())
    assert first == second


def test_enumeration_sees_current_board(board):
    """Each call reflects the board at the time of the call."""
    before = list(board.legal_moves(Piece.LIGHT))
    board.make_move(parse_move("d1-d7(g7)"))
    after = list(board.legal_moves(Piece.LIGHT))
    assert before != after
    assert all(move.from_sq is not sq(3, 0) for move in after)


def test_legal_moves_for_either_side(board):
    """legal_moves(side) ignores whose turn it is."""
    dark = list(board.legal_moves(Piece.DARK))
    assert dark
    assert all(board.get(move.from_sq) is Piece.DARK for move in dark)


def test_count_matches_enumeration(pens_board, reachable_board):
    """count_legal_moves() agrees with the enumerated length."""
    for b in (pens_board, reachable_board):
        for side in (Piece.LIGHT, Piece.DARK):
            assert count_legal_moves(b, side) == sum(1 for _ in legal_moves(b, side))


def test_spear_back_to_origin(pens_board):
    """Every destination offers a spear throw back onto the start square."""
    moves = list(pens_board.legal_moves())
    destinations = {move.to for move in moves}
    for to in destinations:
        assert any(m.to is to and m.spear is sq(0, 0) for m in moves)


def test_has_legal_move(pens_board):
    """has_legal_move() is false only for a side that is shut in."""
    assert has_legal_move(pens_board, Piece.LIGHT)
    assert has_legal_move(pens_board, Piece.DARK)

    for col, row in [(0, 1), (1, 1), (1, 0)]:
        pens_board.put(Piece.SPEAR, sq(col, row))
    assert not has_legal_move(pens_board, Piece.LIGHT)
    assert list(pens_board.legal_moves(Piece.LIGHT)) == []
    assert has_legal_move(pens_board, Piece.DARK)


def test_no_archers():
    """A side with no archers has no moves."""
    b = Board()
    for s, piece in list(b.squares()):
        if piece is Piece.DARK:
            b.put(Piece.EMPTY, s)
    assert count_legal_moves(b, Piece.DARK) == 0
    assert not has_legal_move(b, Piece.DARK)
