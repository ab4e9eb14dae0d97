"""Move notation: rows A-C top to bottom, columns 1-3 left to right (e.g. B2 is the center)."""
from typing import Optional, Tuple

ROWS = "ABC"
COLS = "123"


def decode_move(text: str) -> Optional[Tuple[int, int]]:
    s = text.strip().upper()
    if len(s) != 2 or s[0] not in ROWS or s[1] not in COLS:
        return None
    return ROWS.index(s[0]), COLS.index(s[1])


def encode_move(row: int, col: int) -> str:
    return f"{ROWS[row]}{COLS[col]}"
