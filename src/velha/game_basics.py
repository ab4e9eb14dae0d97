"""
Game basics: marks, board representation, outcomes, serialization, validity.
Teaching notes:
- The board is a 3x3 grid of cells: " " (empty), "X" or "O". X always starts.
- An Outcome is a tagged value: undecided, draw, or a win for one mark.
- Valid states have counts either equal (X to move) or X has one more (O to move).
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

X = "X"
O = "O"
EMPTY = " "
MARKS = (X, O)

Board = List[List[str]]

WIN_LINES = [
    [(0, 0), (0, 1), (0, 2)], [(1, 0), (1, 1), (1, 2)], [(2, 0), (2, 1), (2, 2)],
    [(0, 0), (1, 0), (2, 0)], [(0, 1), (1, 1), (2, 1)], [(0, 2), (1, 2), (2, 2)],
    [(0, 0), (1, 1), (2, 2)], [(0, 2), (1, 1), (2, 0)],
]


class OutcomeKind(Enum):
    UNDECIDED = "undecided"
    DRAW = "draw"
    WIN = "win"


@dataclass(frozen=True)
class Outcome:
    """Immediate or game-theoretic status of a position."""
    kind: OutcomeKind
    winner: Optional[str] = None

    @classmethod
    def win_for(cls, mark: str) -> "Outcome":
        try:
            return _WINS[mark]
        except KeyError:
            raise ValueError(f"Unknown mark: {mark!r}") from None

    @property
    def is_terminal(self) -> bool:
        return self.kind is not OutcomeKind.UNDECIDED

    def value_for(self, player: str) -> int:
        """+1 for a win of player, 0 for a draw, -1 for a win of the opponent."""
        if self.kind is OutcomeKind.WIN:
            return 1 if self.winner == player else -1
        if self.kind is OutcomeKind.DRAW:
            return 0
        raise ValueError("An undecided outcome has no value")

    def __str__(self) -> str:
        if self.kind is OutcomeKind.WIN:
            return f"{self.winner} wins"
        return self.kind.value


UNDECIDED = Outcome(OutcomeKind.UNDECIDED)
DRAW = Outcome(OutcomeKind.DRAW)
_WINS = {m: Outcome(OutcomeKind.WIN, m) for m in MARKS}


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    outcome: Outcome
    # plies until the outcome is reached, this move included
    depth: int


def opponent(mark: str) -> str:
    if mark == X:
        return O
    if mark == O:
        return X
    raise ValueError(f"Unknown mark: {mark!r}")


def new_board() -> Board:
    return [[EMPTY] * 3 for _ in range(3)]


def copy_board(board: Board) -> Board:
    return [row[:] for row in board]


def empty_cells(board: Board) -> List[Tuple[int, int]]:
    return [(r, c) for r in range(3) for c in range(3) if board[r][c] == EMPTY]


def get_winner(board: Board) -> Optional[str]:
    for line in WIN_LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        m = board[r0][c0]
        if m != EMPTY and m == board[r1][c1] and m == board[r2][c2]:
            return m
    return None


def evaluate_outcome(board: Board) -> Outcome:
    """Immediate status of the board, no look-ahead.

    A completed line wins even when other cells are still empty. Boards
    holding two winning marks cannot arise from alternating play and are
    not checked here.
    """
    w = get_winner(board)
    if w is not None:
        return Outcome.win_for(w)
    for row in board:
        if EMPTY in row:
            return UNDECIDED
    return DRAW


def serialize_board(board: Board) -> str:
    return ''.join('.' if cell == EMPTY else cell for row in board for cell in row)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip().upper()
    if len(raw) != 9 or any(ch not in "XO." for ch in raw):
        raise ValueError(f"Invalid board string {board_str!r}: need 9 chars of X, O or '.'")
    cells = [EMPTY if ch == '.' else ch for ch in raw]
    return [cells[0:3], cells[3:6], cells[6:9]]


def get_piece_counts(board: Board) -> Tuple[int, int]:
    flat = [cell for row in board for cell in row]
    return flat.count(X), flat.count(O)


def current_player(board: Board) -> str:
    x, o = get_piece_counts(board)
    return X if x == o else O


def is_valid_state(board: Board) -> bool:
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(p: str) -> int:
        return sum(1 for line in WIN_LINES if all(board[r][c] == p for r, c in line))

    x_wins, o_wins = count_wins(X), count_wins(O)
    if x_wins > 0 and o_wins > 0:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True
