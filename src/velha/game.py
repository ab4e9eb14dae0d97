"""
Game flow: turns, human commands, computer moves, end of game, sessions.

Human commands (case-insensitive):
- A1..C3: place a mark.
- A: analysis of the current position (does not consume the turn).
- C: let the computer choose the move.
- G: give up the current game.
- Q: quit the program.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import numpy as np

from .display import BANNER, COMMAND_HELP, Console, describe_contenders, render_analysis, render_board
from .game_basics import EMPTY, X, Board, Move, Outcome, evaluate_outcome, new_board, opponent
from .notation import decode_move, encode_move
from .selection import best_moves, choose_move, make_rng
from .settings import Settings
from .solver import search


class QuitRequested(Exception):
    """The user asked to leave the program (Q command or end of input)."""


def pick_computer_move(board: Board, player: str, rng: np.random.Generator) -> Move:
    result = search(board, player)
    move = choose_move(best_moves(result, player), rng)
    logging.debug(
        "computer %s picks %s expecting %s in %d",
        player, encode_move(move.row, move.col), move.outcome, move.depth,
    )
    return move


def play_silent_game(rng: np.random.Generator) -> Outcome:
    """Computer against itself with no output; returns the final outcome."""
    board = new_board()
    player = X
    while True:
        move = pick_computer_move(board, player, rng)
        board[move.row][move.col] = player
        status = evaluate_outcome(board)
        if status.is_terminal:
            return status
        player = opponent(player)


class GameSession:
    def __init__(
        self,
        settings: Settings,
        console: Optional[Console] = None,
        rng: Optional[np.random.Generator] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings
        self.console = console if console is not None else Console(line_delay=settings.line_delay)
        self.rng = rng if rng is not None else make_rng(settings.seed)
        self.sleep = sleep
        self.computer_x = settings.computer_plays_x
        self.computer_o = settings.computer_plays_o

    def run(self) -> None:
        out = self.console
        out.write(BANNER)
        if not (self.computer_x and self.computer_o):
            out.write(COMMAND_HELP)
        try:
            while True:
                out.write(describe_contenders(self.computer_x, self.computer_o))
                self.play_game()
                if self._ask_options("YyNn", "Play again? (Y/N) ").lower() == "n":
                    break
                out.write("\nNew game.\n\n")
                if self.computer_x != self.computer_o:
                    self.computer_x, self.computer_o = self.computer_o, self.computer_x
        except QuitRequested:
            logging.debug("quit requested")
            return
        out.write("Good bye.\n")

    def play_game(self) -> Optional[Outcome]:
        """Play one game from the empty board; None when a player gives up."""
        board = new_board()
        player = X
        self.console.write(render_board(board))
        while True:
            if self._is_computer(player):
                self.sleep(self.settings.computer_delay)
                self.computer_plays(board, player)
            else:
                cmd = self._read_command(player).upper()
                if cmd == "G":
                    logging.debug("player %s gave up", player)
                    return None
                if cmd == "Q":
                    raise QuitRequested()
                if cmd == "A":
                    self.console.write(render_analysis(search(board, player), player))
                    continue
                if cmd == "C":
                    self.computer_plays(board, player)
                elif not self.human_plays(cmd, board, player):
                    continue

            self.console.write(render_board(board))
            status = evaluate_outcome(board)
            if status.is_terminal:
                self.console.write("Draw.\n" if status.winner is None else f"{status.winner} wins.\n")
                return status
            player = opponent(player)

    def computer_plays(self, board: Board, player: str) -> None:
        self.console.write(f"Computer playing as {player}.\n")
        move = pick_computer_move(board, player, self.rng)
        self.console.write(f"Move for player {player}> {encode_move(move.row, move.col)}\n")
        board[move.row][move.col] = player

    def human_plays(self, cmd: str, board: Board, player: str) -> bool:
        cell = decode_move(cmd)
        if cell is None:
            self.console.write("Syntax error, try again.\n")
            return False
        row, col = cell
        if board[row][col] != EMPTY:
            self.console.write("Invalid move, try again.\n")
            return False
        board[row][col] = player
        return True

    def _is_computer(self, player: str) -> bool:
        return self.computer_x if player == X else self.computer_o

    def _read_command(self, player: str) -> str:
        try:
            return self.console.read_token(f"Move for player {player}> ")
        except EOFError:
            raise QuitRequested() from None

    def _ask_options(self, options: str, prompt: str) -> str:
        while True:
            try:
                answer = self.console.read_token(prompt)
            except EOFError:
                raise QuitRequested() from None
            if len(answer) == 1 and answer in options:
                return answer
            self.console.write("Invalid option.\n")
