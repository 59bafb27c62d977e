"""CLI entrypoint for playing Noughts and Crosses against the minimax AI."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

from ai.base_ai import BaseAI
from ai.minimax_ai import MinimaxAI
from engine.board import Board
from engine.cells import Cell
from engine.rules import BOARD_SIZE

LOGGER = logging.getLogger("noughts.cli")

KEY_QUIT = "q"
KEY_YES = "y"
KEY_NO = "n"

MSG_ORDER = "Do you want to go first (Y or N)?"
MSG_MOVE = "What is your move (0 to {last})?"
MSG_WIN = "You WON! Play again (Y or N)?"
MSG_LOSE = "You LOSE! Play again (Y or N)?"
MSG_DRAW = "You DREW! Play again (Y or N)?"
MSG_REPLAY = "Play another game (Y or N)?"

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Noughts and Crosses against an optimal AI.")
    parser.add_argument("--size", type=int, default=BOARD_SIZE, help="Board width and height")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args(argv)


class GameSession:
    """Human-vs-AI games on one board until the user quits. Nought moves first."""

    def __init__(
        self,
        board: Board,
        ai: BaseAI,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.board = board
        self.ai = ai
        self.input_fn = input_fn
        self.output_fn = output_fn

    def run(self) -> None:
        symbol_user = self.ask_symbol()
        while symbol_user is not None:
            end_message = self.play_game(symbol_user)
            if not self.ask_yes_no(end_message):
                break
            symbol_user = self.ask_symbol()

    def ask_symbol(self) -> Optional[Cell]:
        """Going first means playing noughts. None means the user quit."""
        answer = self.ask_yes_no(MSG_ORDER)
        if answer is None:
            return None
        return Cell.NOUGHT if answer else Cell.CROSS

    def ask_yes_no(self, message: str) -> Optional[bool]:
        while True:
            key = self.input_fn(f"{message} ").strip().lower()
            if key == KEY_QUIT:
                return None
            if key == KEY_YES:
                return True
            if key == KEY_NO:
                return False

    def play_game(self, symbol_user: Cell) -> str:
        """Play one game and return the message that ends it."""
        symbol_ai = symbol_user.opponent()
        self.board.reset()
        self.output_fn(self.board.render_ascii())
        LOGGER.info("Starting game. Human=%s AI=%s", symbol_user.name, symbol_ai.name)

        current = Cell.NOUGHT
        while True:
            if current is symbol_user:
                cell = self.read_user_move(symbol_user)
                if cell is None:
                    return MSG_REPLAY
            else:
                cell = self.ai.choose_move(self.board, symbol_ai)
                self.output_fn(f"AI plays {cell}")
            self.board.set_cell(cell, current)
            self.output_fn(self.board.render_ascii())

            end_message = self.end_message(symbol_user, symbol_ai)
            if end_message is not None:
                return end_message
            current = current.opponent()

    def read_user_move(self, symbol_user: Cell) -> Optional[int]:
        """Prompt until a valid cell is entered. None means the user quit."""
        prompt = MSG_MOVE.format(last=self.board.cell_count - 1)
        while True:
            raw = self.input_fn(f"{prompt} ").strip().lower()
            if raw == KEY_QUIT:
                return None
            try:
                cell = int(raw)
            except ValueError:
                self.output_fn("Please type a cell number.")
                continue
            if self.board.is_valid_move(cell, symbol_user):
                return cell
            self.output_fn("Illegal move. Try again.")

    def end_message(self, symbol_user: Cell, symbol_ai: Cell) -> Optional[str]:
        if self.board.is_win(symbol_user):
            return MSG_WIN
        if self.board.is_win(symbol_ai):
            return MSG_LOSE
        if self.board.is_draw():
            return MSG_DRAW
        return None


def run_cli(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    session = GameSession(Board(args.size), MinimaxAI())
    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        print()
    print("Exiting game.")


if __name__ == "__main__":
    run_cli()
