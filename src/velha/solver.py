"""
Exhaustive game-tree search (plain minimax), from the side-to-move perspective.
Tie-break policy:
- Prefer win over draw over loss; the first move reaching the best value sets it.
- Among moves tied for a win, report the shortest distance (plies) to the end.
- Among tied draws or losses, report the longest distance (delay the end).
The board is searched in place: every tentative mark is retracted before the
next candidate is tried, so the caller gets its board back unchanged.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .game_basics import (
    EMPTY,
    MARKS,
    Board,
    Move,
    Outcome,
    evaluate_outcome,
    opponent,
)


@dataclass(frozen=True)
class SearchResult:
    outcome: Outcome
    # plies until outcome under optimal play by both sides
    depth: int
    # hypothetical moves examined in the whole subtree
    move_count: int
    moves: Tuple[Move, ...] = ()


def _think(board: Board, player: str, moves: Optional[List[Move]]) -> Tuple[Outcome, int, int]:
    opp = opponent(player)
    best: Optional[Outcome] = None
    best_val = -2
    best_depth = 0
    move_count = 0

    for row in range(3):
        for col in range(3):
            if board[row][col] != EMPTY:
                continue
            move_count += 1

            board[row][col] = player
            try:
                status = evaluate_outcome(board)
                if status.is_terminal:
                    depth = 1
                else:
                    status, sub_depth, sub_count = _think(board, opp, None)
                    move_count += sub_count
                    depth = sub_depth + 1
            finally:
                board[row][col] = EMPTY

            if moves is not None:
                moves.append(Move(row, col, status, depth))

            val = status.value_for(player)
            if val > best_val:
                best, best_val, best_depth = status, val, depth
            elif val == best_val:
                if val == 1:
                    best_depth = min(best_depth, depth)
                else:
                    best_depth = max(best_depth, depth)

    assert best is not None, "search reached a board without empty cells"
    return best, best_depth, move_count


def search(board: Board, player: str, collect_moves: bool = True) -> SearchResult:
    """Solve the position for `player` to move.

    The board must hold at least one empty cell and no completed line; the
    game loop checks `evaluate_outcome` before asking for a search.
    """
    if player not in MARKS:
        raise ValueError(f"Unknown mark: {player!r}")
    status = evaluate_outcome(board)
    if status.is_terminal:
        raise ValueError(f"Cannot search a finished position ({status})")

    moves: Optional[List[Move]] = [] if collect_moves else None
    outcome, depth, move_count = _think(board, player, moves)
    logging.debug("search player=%s outcome=%s depth=%d nodes=%d", player, outcome, depth, move_count)
    return SearchResult(
        outcome=outcome,
        depth=depth,
        move_count=move_count,
        moves=tuple(moves) if moves is not None else (),
    )
