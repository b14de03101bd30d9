"""
Error types raised by the Minesweeper engine.

Every in-game error is recoverable: the board state is untouched and the
player may issue another command. Only ConfigurationError is fatal, and only
at construction time.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class OutOfRange(MinesweeperError, IndexError):
    """Coordinates fall outside the grid."""

    def __init__(self, row: int, col: int, rows: int, columns: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{columns} field"
        )
        self.row = row
        self.col = col


class InvalidOperation(MinesweeperError):
    """A move violates a precondition (revealed, flagged, or game over)."""


class ConfigurationError(MinesweeperError, ValueError):
    """Board dimensions or mine count are unusable."""
