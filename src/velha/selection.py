"""
Computer personality: which of the analysed moves to actually play.
Teaching notes:
- The search only labels moves; choosing among equally good ones is a policy.
- Winning side: take the fastest win. Otherwise: make the draw or loss last.
- Ties left after that are broken uniformly at random for variety.
"""
from typing import Dict, List, Optional, Sequence

import numpy as np

from .game_basics import DRAW, Move, Outcome
from .solver import SearchResult


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def best_moves(result: SearchResult, player: str) -> List[Move]:
    candidates = [m for m in result.moves if m.outcome == result.outcome]
    if not candidates:
        return []
    if result.outcome == Outcome.win_for(player):
        target = min(m.depth for m in candidates)
    else:
        target = max(m.depth for m in candidates)
    return [m for m in candidates if m.depth == target]


def choose_move(moves: Sequence[Move], rng: np.random.Generator) -> Move:
    if not moves:
        raise ValueError("No candidate moves to choose from")
    return moves[int(rng.integers(len(moves)))]


def partition_moves(moves: Sequence[Move], player: str) -> Dict[str, List[Move]]:
    """Split moves into winning, drawing and losing ones for player."""
    win = Outcome.win_for(player)
    parts: Dict[str, List[Move]] = {'winning': [], 'drawing': [], 'losing': []}
    for m in moves:
        if m.outcome == win:
            parts['winning'].append(m)
        elif m.outcome == DRAW:
            parts['drawing'].append(m)
        else:
            parts['losing'].append(m)
    return parts
