"""
Terminal output: the board grid, move analysis, and a paced console.

Output is slowed down a little after every newline so a human can follow
computer-vs-computer games; tests construct the console with zero delay.
"""
from __future__ import annotations

import sys
import time
from typing import List, Optional, Sequence, TextIO

from .game_basics import Board
from .notation import ROWS, encode_move
from .selection import partition_moves
from .solver import SearchResult


class Console:
    def __init__(
        self,
        out: Optional[TextIO] = None,
        inp: Optional[TextIO] = None,
        line_delay: float = 0.0,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.inp = inp if inp is not None else sys.stdin
        self.line_delay = line_delay

    def write(self, text: str) -> None:
        for line in text.splitlines(keepends=True):
            self.out.write(line)
            if line.endswith("\n") and self.line_delay > 0:
                self.out.flush()
                time.sleep(self.line_delay)
        self.out.flush()

    def read_token(self, prompt: str = "") -> str:
        """First whitespace-delimited word of the next input line ('' if blank)."""
        if prompt:
            self.write(prompt)
        line = self.inp.readline()
        if not line:
            raise EOFError("end of input")
        parts = line.split()
        return parts[0] if parts else ""


def render_board(board: Board) -> str:
    lines = ["", "   1   2   3 "]
    for i, row in enumerate(board):
        lines.append(f"{ROWS[i]}  " + " | ".join(row) + " ")
        if i != 2:
            lines.append("  -----------")
    lines.append("")
    return "\n".join(lines) + "\n\n"


def _format_moves(moves: Sequence) -> str:
    if not moves:
        return "None"
    return ", ".join(f"{encode_move(m.row, m.col)}({m.depth})" for m in moves)


def render_analysis(result: SearchResult, player: str) -> str:
    parts = partition_moves(result.moves, player)
    lines: List[str] = [
        "",
        f"Analysis for player {player}:",
        "Number of moves until game end are between parentheses.",
        f"  Winning moves: {_format_moves(parts['winning'])}",
        f"  Drawing moves: {_format_moves(parts['drawing'])}",
        f"  Losing moves: {_format_moves(parts['losing'])}",
        f"  Total analysed moves: {result.move_count}",
        "",
    ]
    return "\n".join(lines) + "\n"


def describe_contenders(computer_x: bool, computer_o: bool) -> str:
    if computer_x and computer_o:
        text = "Computer plays both X and O\n"
    elif computer_x:
        text = "Computer plays as X\nYou play as O\n"
    elif computer_o:
        text = "You play as X\nComputer plays as O\n"
    else:
        text = "You play both X and O -- analysis mode\n"
    return text + "\n"


COMMAND_HELP = (
    "Move commands are A1, A2, A3, B1, B2, B3, C1, C2 or C3\n"
    "The player can also enter the commands:\n"
    "  A for game analysis,\n"
    "  C for computer generated move.\n"
    "  G to give up the game.\n"
    "  Q to quit the program.\n"
    "\n"
)

BANNER = "\n                --- Tic-Tac-Toe ---\n\n"
