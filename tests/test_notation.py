import pytest

from velha.notation import decode_move, encode_move


@pytest.mark.parametrize("text,cell", [
    ("A1", (0, 0)), ("a3", (0, 2)), ("B2", (1, 1)), ("c1", (2, 0)), (" C3 ", (2, 2)),
])
def test_decode_valid(text, cell):
    assert decode_move(text) == cell


@pytest.mark.parametrize("text", ["", "A", "A4", "D1", "1A", "B22", "b 2", "A0"])
def test_decode_invalid(text):
    assert decode_move(text) is None


def test_encode_covers_grid():
    names = [encode_move(r, c) for r in range(3) for c in range(3)]
    assert names == ["A1", "A2", "A3", "B1", "B2", "B3", "C1", "C2", "C3"]
    assert all(decode_move(n) == divmod(i, 3) for i, n in enumerate(names))
