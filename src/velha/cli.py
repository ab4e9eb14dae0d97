from __future__ import annotations

import argparse
import csv
import logging
import sys
from collections import Counter
from typing import Optional

from .display import Console, render_analysis, render_board
from .game import GameSession, play_silent_game
from .game_basics import (
    Board,
    current_player,
    deserialize_board,
    evaluate_outcome,
    is_valid_state,
    serialize_board,
)
from .notation import encode_move
from .selection import make_rng
from .settings import load_settings
from .solver import search


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="velha", description="Tic-tac-toe player with full game-tree analysis")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's choice among equal moves")
    p.add_argument("--fast", action="store_true", help="No output pacing and no pause before computer moves")

    p_play = sub.add_parser("play", help="Play interactively (default command)")
    p_play.add_argument(
        "-n",
        "--players",
        type=int,
        choices=[0, 1, 2],
        default=None,
        help="0: computer against itself, 1: you against the computer (default), 2: two humans (analysis mode)",
    )

    p_an = sub.add_parser("analyze", help="Analyse every move of a position (9 chars of X, O or '.')")
    p_an.add_argument("--board", help="Board string, rows top to bottom, e.g. XX.OO.... (omit with --stdin)")
    p_an.add_argument("--player", choices=["X", "O", "x", "o"], help="Side to move (default: inferred from counts)")
    p_an.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_self = sub.add_parser("selfplay", help="Let the computer play itself and tally the results")
    p_self.add_argument("--games", type=int, default=10, help="Number of games (default: 10)")

    return p


def _parse_position(raw: str) -> Optional[Board]:
    try:
        board = deserialize_board(raw)
    except ValueError:
        return None
    if not is_valid_state(board) or evaluate_outcome(board).is_terminal:
        return None
    return board


def _analyze(ns: argparse.Namespace) -> int:
    if ns.stdin:
        w = csv.writer(sys.stdout)
        w.writerow(["board", "player", "outcome", "depth", "move_count", "moves"])
        for line in sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            board = _parse_position(raw)
            if board is None:
                continue
            player = ns.player.upper() if ns.player else current_player(board)
            res = search(board, player)
            w.writerow([
                serialize_board(board),
                player,
                str(res.outcome),
                res.depth,
                res.move_count,
                ' '.join(f"{encode_move(m.row, m.col)}:{m.outcome}:{m.depth}" for m in res.moves),
            ])
        return 0

    board = _parse_position(ns.board or "")
    if board is None:
        logging.error("Invalid board. Must be 9 chars of X/O/. describing a reachable, unfinished game.")
        return 2
    player = ns.player.upper() if ns.player else current_player(board)
    res = search(board, player)
    out = Console()
    out.write(render_board(board))
    out.write(render_analysis(res, player))
    logging.info("outcome=%s depth=%d nodes=%d", res.outcome, res.depth, res.move_count)
    return 0


def _selfplay(ns: argparse.Namespace, seed: Optional[int]) -> int:
    if ns.games < 1:
        logging.error("--games must be positive: %s", ns.games)
        return 2
    rng = make_rng(seed)
    tally: Counter = Counter()
    for i in range(ns.games):
        outcome = play_silent_game(rng)
        tally[str(outcome)] += 1
        logging.debug("game %d: %s", i + 1, outcome)
    logging.info(
        "games=%d x_wins=%d o_wins=%d draws=%d",
        ns.games,
        tally["X wins"],
        tally["O wins"],
        tally["draw"],
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("velha"))
        except Exception:
            print("unknown")
        return 0

    try:
        settings = load_settings(
            players=getattr(ns, "players", None),
            seed=ns.seed,
            fast=ns.fast,
        )
    except ValueError as e:
        logging.error("%s", e)
        return 2

    if ns.cmd == "analyze":
        if not ns.stdin and not ns.board:
            logging.error("analyze needs --board or --stdin")
            return 2
        return _analyze(ns)

    if ns.cmd == "selfplay":
        return _selfplay(ns, settings.seed)

    GameSession(settings).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
