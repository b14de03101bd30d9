"""
Minesweeper game module.

Provides the board state machine, cell state, text rendering, the
interactive shell and a Gymnasium environment.
"""
from .cell import Cell, CellState, Position
from .errors import (
    ConfigurationError,
    InvalidOperation,
    MinesweeperError,
    OutOfRange,
)
from .board import Board, BoardConfig, GameState
from .render import render_text
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Position",
    "Board",
    "BoardConfig",
    "GameState",
    "ConfigurationError",
    "InvalidOperation",
    "MinesweeperError",
    "OutOfRange",
    "render_text",
    "MinesweeperEnv",
]
