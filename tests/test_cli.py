"""Tests for the command line interface."""

import io

from rich.console import Console

from amazons_engine.core import Board
from amazons_engine.utils.rich_display import BoardDisplay
from amazons_engine.cli.main import build_parser, main

from conftest import CORRIDOR_LAYOUT


def test_no_command(capsys):
    """Running without a command prints help and fails."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_show_initial(capsys):
    """show prints the opening position."""
    assert main(["show"]) == 0
    out = capsys.readouterr().out
    assert "LIGHT to move" in out


def test_show_after_moves(capsys):
    """Moves given on the command line are played first."""
    assert main(["show", "--moves", "d1-d7(g7)", "a7-b7(c7)"]) == 0
    out = capsys.readouterr().out
    assert "Position after 2 moves" in out
    assert "LIGHT to move" in out


def test_moves_count(capsys):
    """moves reports the legal move count."""
    assert main(["moves", "--limit", "3"]) == 0
    out = capsys.readouterr().out
    assert "2,176 legal moves" in out
    assert "d1-d2(d3)" in out
    assert "d1-d2(d6)" not in out


def test_moves_for_side(capsys):
    """--side lists the other side's moves."""
    assert main(["moves", "--side", "dark", "--limit", "1"]) == 0
    out = capsys.readouterr().out
    assert "Legal moves for DARK" in out
    assert "a7-a8(a9)" in out


def test_illegal_move_fails(capsys):
    """An illegal move in the sequence is reported as an error."""
    assert main(["show", "--moves", "d10-d8(d9)"]) == 1
    assert "illegal" in capsys.readouterr().out


def test_malformed_move_fails(capsys):
    """Unparseable move text is reported as an error."""
    assert main(["show", "--moves", "d1d7g7"]) == 1
    assert "Invalid move" in capsys.readouterr().out


def test_bestmove_from_position(tmp_path, capsys):
    """bestmove searches a position loaded from a file."""
    position = tmp_path / "corridor.txt"
    position.write_text(CORRIDOR_LAYOUT)

    assert main(["bestmove", "--position", str(position), "--depth", "1"]) == 0
    out = capsys.readouterr().out
    assert "j1-j2(j9)" in out


def test_missing_position_file(tmp_path, capsys):
    """A missing position file is an error, not a crash."""
    assert main(["show", "--position", str(tmp_path / "missing.txt")]) == 1


def test_parser_defaults():
    """Default depth is 1 and the log level is quiet."""
    args = build_parser().parse_args(["bestmove"])
    assert args.depth == 1
    assert args.turn == "light"
    assert args.moves == []
    assert args.log_level == "WARNING"


def test_rich_logging(capsys):
    """--rich-log routes logging through rich without changing the output."""
    assert main(["--rich-log", "--log-level", "INFO", "show"]) == 0
    assert "LIGHT to move" in capsys.readouterr().out


def test_display_messages():
    """BoardDisplay writes its messages and diagrams to the given console."""
    output = Console(file=io.StringIO(), width=100)
    display = BoardDisplay(output)
    display.log_info("thinking")
    display.log_success("done")
    display.log_error("stuck")
    display.show_board(Board())

    text = output.file.getvalue()
    assert "thinking" in text
    assert "done" in text
    assert "stuck" in text
    assert "LIGHT to move" in text
    assert not hasattr(display, "log")
