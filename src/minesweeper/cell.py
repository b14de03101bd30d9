"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
state (hidden/revealed/flagged) and display symbol.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import NamedTuple, Optional


# ============================================================================
# Constants
# ============================================================================

HIDDEN_MARKER = "."
FLAG_MARKER = "*"
OPEN_MARKER = "/"
MINE_MARKER = "X"


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class Position(NamedTuple):
    """Zero-based grid coordinates, used as the lookup key for cells."""

    row: int
    col: int


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    The cell does not know whether it holds a mine; the board owns the
    mine layout and tells the cell what to show.

    Attributes:
        row: Row index, fixed at creation.
        col: Column index, fixed at creation.
        state: Current visual state (hidden, revealed, or flagged).
        adjacent_mines: Count of mines in neighboring cells, set on reveal.
        disclosed: True once the cell is shown as a mine at game end.
    """

    row: int
    col: int
    state: CellState = CellState.HIDDEN
    adjacent_mines: Optional[int] = None
    disclosed: bool = False

    @property
    def position(self) -> Position:
        """Grid coordinates of this cell."""
        return Position(self.row, self.col)

    def reveal(self, adjacent_mines: int) -> bool:
        """
        Reveal this cell with its neighbor mine count.

        Returns:
            True if cell was revealed, False if already revealed or
            flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        self.adjacent_mines = adjacent_mines
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def disclose(self) -> None:
        """Mark this cell as a mine to show at end of game."""
        self.disclosed = True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def symbol(self) -> str:
        """
        Single character shown for this cell.

        Returns:
            X: Mine disclosed at game end
            *: Flagged cell
            .: Hidden cell
            /: Revealed cell with no adjacent mines
            1-8: Revealed cell with adjacent mine count
        """
        if self.disclosed:
            return MINE_MARKER
        if self.state == CellState.FLAGGED:
            return FLAG_MARKER
        if self.state == CellState.HIDDEN:
            return HIDDEN_MARKER
        if not self.adjacent_mines:
            return OPEN_MARKER
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for programmatic players.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Disclosed mine (game over state)
        """
        if self.disclosed:
            return 9
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.adjacent_mines or 0
