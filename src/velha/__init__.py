"""velha package.

Tic-tac-toe with an exhaustive game-tree search, a move-selection policy,
and a terminal game for zero, one or two human players.

Convenience imports are exposed for common workflows.
"""

from .game_basics import DRAW, UNDECIDED, Move, Outcome, evaluate_outcome, new_board, opponent
from .solver import SearchResult, search

__all__ = [
    "evaluate_outcome",
    "search",
    "SearchResult",
    "Outcome",
    "Move",
    "DRAW",
    "UNDECIDED",
    "new_board",
    "opponent",
]
