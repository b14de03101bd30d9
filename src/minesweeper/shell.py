"""
Interactive command shell for the Minesweeper board.

Reads `<x> <y> <free|mine>` commands, applies them to a Board, and prints
the field after each move until the game is won or lost.
"""
import argparse
import logging
import random
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .board import Board, BoardConfig
from .errors import (
    ConfigurationError,
    InvalidOperation,
    MinesweeperError,
    OutOfRange,
)

logger = logging.getLogger(__name__)

MINES_PROMPT = "How many mines do you want on the field? > "
MOVE_PROMPT = "Set/unset mine marks or claim a cell as free: > "
WIN_MESSAGE = "Congratulations! You found all the mines!"
LOSS_MESSAGE = "You stepped on a mine and failed!"


# ============================================================================
# Command Parsing
# ============================================================================

class CommandError(MinesweeperError):
    """Command text could not be understood."""


class Action(Enum):
    """What a command asks the board to do."""

    FREE = "free"
    MINE = "mine"


@dataclass(frozen=True)
class Command:
    """
    A parsed player command.

    Attributes:
        row: Zero-based row index.
        col: Zero-based column index.
        action: Reveal (free) or toggle a flag (mine).
    """

    row: int
    col: int
    action: Action


def parse_command(text: str) -> Command:
    """
    Parse `<x> <y> <free|mine>` into a Command.

    x is the 1-based column and y the 1-based row, as shown in the
    rendered header and row labels.

    Raises:
        CommandError: If the text does not match the grammar.
    """
    tokens = text.split()
    if len(tokens) != 3:
        raise CommandError("Unknown Command try again")

    x_token, y_token, action_token = tokens
    try:
        x, y = int(x_token), int(y_token)
    except ValueError:
        raise CommandError("Unknown Command try again") from None

    try:
        action = Action(action_token.lower())
    except ValueError:
        raise CommandError("Unknown Command try again") from None

    return Command(row=y - 1, col=x - 1, action=action)


# ============================================================================
# Game Loop
# ============================================================================

class GameShell:
    """
    Drives one game: read a command, apply it, print the field.

    Input and output are injectable so the loop can be scripted.
    """

    def __init__(
        self,
        board: Board,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.board = board
        self._input = input_fn or input
        self._output = output_fn or print

    def apply(self, command: Command) -> None:
        """
        Apply a parsed command to the board.

        Raises:
            OutOfRange: If the command points outside the field.
            InvalidOperation: If the board rejects the move.
        """
        if command.action is Action.MINE:
            self.board.toggle_flag(command.row, command.col)
        else:
            self.board.reveal(command.row, command.col)

    def handle(self, text: str) -> bool:
        """
        Parse and apply one line of input, reporting errors to the player.

        Returns:
            True if the board changed, False if the command was rejected.
        """
        try:
            self.apply(parse_command(text))
        except OutOfRange:
            self._output("Those coordinates are outside the field. Try another")
            return False
        except (CommandError, InvalidOperation) as exc:
            self._output(str(exc))
            return False
        return True

    def run(self) -> Optional[bool]:
        """
        Play until the game ends or input runs out.

        Returns:
            True on a win, False on a loss, None if input ended first.
        """
        self._output(self.board.render_text())
        while self.board.is_active:
            try:
                text = self._input(MOVE_PROMPT)
            except EOFError:
                logger.debug("Input closed; leaving the game")
                return None
            if not self.handle(text):
                continue
            self._output(self.board.render_text())

        if self.board.is_won:
            self._output(WIN_MESSAGE)
            return True
        self._output(LOSS_MESSAGE)
        return False


# ============================================================================
# Entry Point
# ============================================================================

def prompt_mine_count(input_fn: Optional[Callable[[str], str]] = None) -> int:
    """Ask the player for a mine count until they type a number."""
    input_fn = input_fn or input
    while True:
        text = input_fn(MINES_PROMPT)
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number")


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Clear the field without stepping on a mine"
    )
    parser.add_argument(
        "--rows", type=int, default=9, help="Number of rows on the field"
    )
    parser.add_argument(
        "--columns", type=int, default=9, help="Number of columns on the field"
    )
    parser.add_argument(
        "--mines",
        type=int,
        default=None,
        help="Number of mines (prompted when omitted)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible fields"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, build the board and play one game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        mines = args.mines if args.mines is not None else prompt_mine_count()
    except EOFError:
        return 1

    try:
        config = BoardConfig(rows=args.rows, columns=args.columns, num_mines=mines)
    except ConfigurationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    board = Board(config, random.Random(args.seed))
    GameShell(board).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
