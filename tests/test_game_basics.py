import pytest

from velha.game_basics import (
    DRAW,
    EMPTY,
    UNDECIDED,
    O,
    X,
    Outcome,
    OutcomeKind,
    current_player,
    deserialize_board,
    empty_cells,
    evaluate_outcome,
    get_piece_counts,
    is_valid_state,
    new_board,
    opponent,
    serialize_board,
)


def test_completed_line_wins_even_with_empty_cells():
    assert evaluate_outcome(deserialize_board("XXXOO....")) == Outcome.win_for(X)
    assert evaluate_outcome(deserialize_board("X.OXO.XO.")) == Outcome.win_for(X)
    assert evaluate_outcome(deserialize_board("XXO.O.OX.")) == Outcome.win_for(O)


@pytest.mark.parametrize("raw,winner", [
    ("XXX......", X), ("...OOO...", O), ("......XXX", X),
    ("O..O..O..", O), (".X..X..X.", X), ("..O..O..O", O),
    ("X...X...X", X), ("..O.O.O..", O),
])
def test_all_eight_lines(raw, winner):
    assert evaluate_outcome(deserialize_board(raw)) == Outcome.win_for(winner)


def test_full_board_without_line_is_draw():
    b = deserialize_board("XXOOOXXOX")
    assert evaluate_outcome(b) == DRAW
    assert evaluate_outcome(b).winner is None


def test_open_board_without_line_is_undecided():
    assert evaluate_outcome(new_board()) == UNDECIDED
    assert evaluate_outcome(deserialize_board("XXOOOXXO.")) == UNDECIDED
    assert not UNDECIDED.is_terminal


def test_outcome_values_order_win_draw_loss():
    assert Outcome.win_for(X).value_for(X) == 1
    assert DRAW.value_for(X) == 0
    assert Outcome.win_for(O).value_for(X) == -1
    with pytest.raises(ValueError):
        UNDECIDED.value_for(X)
    assert Outcome.win_for(O).kind is OutcomeKind.WIN


def test_bad_marks_rejected():
    with pytest.raises(ValueError):
        opponent("Z")
    with pytest.raises(ValueError):
        Outcome.win_for(EMPTY)
    assert opponent(X) == O and opponent(O) == X


def test_serialization_roundtrip_and_errors():
    b = deserialize_board("x.o......")
    assert b[0] == [X, EMPTY, O]
    assert serialize_board(b) == "X.O......"
    for bad in ["", "XO", "XXXXXXXXXX", "XO-......", "123456789"]:
        with pytest.raises(ValueError):
            deserialize_board(bad)


def test_counts_side_to_move_and_validity():
    b = deserialize_board("XX.O.....")
    assert get_piece_counts(b) == (2, 1)
    assert current_player(b) == O
    assert current_player(new_board()) == X
    assert len(empty_cells(b)) == 6
    assert is_valid_state(b)
    assert not is_valid_state(deserialize_board("OO......."))
    # both sides have a line
    assert not is_valid_state(deserialize_board("XXXOOO..."))
    # X won but O moved afterwards
    assert not is_valid_state(deserialize_board("XXXOO.O.."))
