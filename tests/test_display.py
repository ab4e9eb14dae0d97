import io

import pytest

from velha.display import Console, describe_contenders, render_analysis, render_board
from velha.game_basics import O, X, deserialize_board, new_board
from velha.solver import search


def test_render_empty_and_filled_board():
    text = render_board(new_board())
    lines = text.splitlines()
    assert "   1   2   3 " in lines
    assert "A    |   |   " in lines
    assert lines.count("  -----------") == 2
    filled = render_board(deserialize_board("XO......X"))
    assert "A  X | O |   " in filled
    assert "C    |   | X " in filled


def test_render_analysis_groups_moves():
    res = search(deserialize_board("XX.OO...."), X)
    text = render_analysis(res, X)
    assert "Analysis for player X:" in text
    assert "  Winning moves: A3(1)" in text
    assert "  Drawing moves: B3(5)" in text
    assert "  Losing moves: C1(2), C2(2), C3(2)" in text
    assert f"  Total analysed moves: {res.move_count}" in text


def test_render_analysis_none_when_group_empty():
    res = search(deserialize_board("XX.O....."), O)
    text = render_analysis(res, O)
    assert "  Winning moves: None" in text
    assert "  Drawing moves: None" in text


def test_contenders_text():
    assert describe_contenders(True, True).startswith("Computer plays both X and O")
    assert "You play as X" in describe_contenders(False, True)
    assert "Computer plays as X" in describe_contenders(True, False)
    assert "analysis mode" in describe_contenders(False, False)


def test_console_reads_first_token_and_signals_eof():
    out = io.StringIO()
    con = Console(out=out, inp=io.StringIO("  b2 extra\n\n"))
    assert con.read_token("Move> ") == "b2"
    assert con.read_token() == ""
    with pytest.raises(EOFError):
        con.read_token()
    assert out.getvalue() == "Move> "


def test_console_pauses_after_each_newline(monkeypatch):
    naps = []
    monkeypatch.setattr("velha.display.time.sleep", naps.append)
    out = io.StringIO()
    Console(out=out, line_delay=0.05).write("one\ntwo\nthree")
    assert out.getvalue() == "one\ntwo\nthree"
    assert naps == [0.05, 0.05]
