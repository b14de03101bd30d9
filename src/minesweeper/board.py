"""
Board module for Minesweeper game.

Implements the game board with mine placement, first-move safety,
flood-fill revealing, flag bookkeeping and game state management.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Deque, FrozenSet, Iterable, List, Optional, Set

import numpy as np

from .cell import Cell, Position
from .errors import ConfigurationError, InvalidOperation, OutOfRange
from .render import render_text

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    ACTIVE = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    columns: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        if self.num_mines > self.total_cells:
            raise ConfigurationError(
                f"Too many mines (max {self.total_cells})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the field."""
        return self.rows * self.columns


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Cells are stored row-major and looked up
    by position; mines are a set of positions owned by the board.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)
    _mines: Set[Position] = field(default_factory=set, init=False, repr=False)
    _flagged_count: int = field(default=0, init=False)
    _revealed_count: int = field(default=0, init=False)
    _first_move: bool = field(default=True, init=False)
    _game_state: GameState = field(default=GameState.ACTIVE, init=False)

    def __post_init__(self) -> None:
        """Initialize the grid and lay out the mines."""
        self._init_grid()
        self.place_mines()

    @classmethod
    def with_mines(
        cls,
        config: BoardConfig,
        positions: Iterable[Position],
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a board with a fixed mine layout.

        Args:
            config: Board configuration; num_mines must match the layout.
            positions: (row, col) pairs holding mines.
            rng: Random source used if the first move needs a re-seed.

        Raises:
            ConfigurationError: If the layout does not fit the config.
        """
        mines = {Position(*position) for position in positions}
        if len(mines) != config.num_mines:
            raise ConfigurationError(
                f"Expected {config.num_mines} distinct mines, got {len(mines)}"
            )
        for row, col in mines:
            if not (0 <= row < config.rows and 0 <= col < config.columns):
                raise ConfigurationError(
                    f"Mine ({row}, {col}) is outside the field"
                )

        board = cls(config, rng or random.Random())
        board._mines = mines
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._cells = [
            Cell(row, col)
            for row in range(self.config.rows)
            for col in range(self.config.columns)
        ]

    def place_mines(self) -> None:
        """
        Place mines at distinct random positions.

        Draws positions uniformly and rejects duplicates until the
        configured number of mines is laid out.

        Raises:
            InvalidOperation: If mines are already placed.
        """
        if self._mines:
            raise InvalidOperation("Mines are already placed")
        while len(self._mines) < self.config.num_mines:
            position = Position(
                self.rng.randrange(self.config.rows),
                self.rng.randrange(self.config.columns),
            )
            self._mines.add(position)
        logger.debug("Placed %d mines", len(self._mines))

    def _reseed_avoiding(self, position: Position) -> None:
        """Re-place every mine until the given position is safe."""
        attempts = 0
        while position in self._mines:
            self._mines.clear()
            self.place_mines()
            attempts += 1
        logger.debug(
            "First move hit a mine at %s; re-placed mines %d time(s)",
            position,
            attempts,
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of positions for the up to 8 in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append(Position(new_row, new_col))
        return neighbors

    def _count_adjacent_mines(self, position: Position) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for neighbor in self.neighbors(*position)
            if neighbor in self._mines
        )

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def _cell_at(self, position: Position) -> Cell:
        """Look up the live cell at a position."""
        return self._cells[position.row * self.config.columns + position.col]

    def _require_cell(self, row: int, col: int) -> Cell:
        """Look up a cell, raising OutOfRange for bad coordinates."""
        if not self._is_valid_position(row, col):
            raise OutOfRange(row, col, self.config.rows, self.config.columns)
        return self._cell_at(Position(row, col))

    def _require_active(self) -> None:
        """Raise InvalidOperation once the game has ended."""
        if self._game_state != GameState.ACTIVE:
            raise InvalidOperation(
                f"The game is over ({self._game_state.name.lower()})"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> int:
        """
        Reveal a cell at the given position.

        On the first reveal a mine under the cell is moved away by
        re-placing all mines. An empty cell (0 adjacent mines) opens its
        whole connected region breadth-first. A mine on any later move
        loses the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Number of cells revealed by this move (0 when a mine goes off).

        Raises:
            OutOfRange: If the position is outside the field.
            InvalidOperation: If the cell is revealed or flagged, or the
                game is over.
        """
        cell = self._require_cell(row, col)
        self._require_active()
        if cell.is_revealed:
            raise InvalidOperation("That cell is already explored. Try another")
        if cell.is_flagged:
            raise InvalidOperation(
                "That cell is marked. First unmark it or try another"
            )

        position = cell.position
        if position in self._mines:
            if self._first_move and self._has_safe_cell():
                self._reseed_avoiding(position)
            else:
                self._first_move = False
                self._lose()
                return 0

        self._first_move = False
        revealed = self._flood_fill(position)
        self._check_win_condition()
        return revealed

    def _has_safe_cell(self) -> bool:
        """Check if at least one cell is free of mines."""
        return self.config.num_mines < self.config.total_cells

    def _open(self, cell: Cell) -> None:
        """Reveal a single safe cell and count it."""
        cell.reveal(self._count_adjacent_mines(cell.position))
        self._revealed_count += 1

    def _flood_fill(self, start: Position) -> int:
        """
        Reveal the start cell and spread through zero-count neighbors.

        Cells are marked revealed when enqueued, so each is processed at
        most once. Flags on opened cells are cleared.
        """
        queue: Deque[Position] = deque([start])
        self._open(self._cell_at(start))
        revealed = 1

        while queue:
            position = queue.popleft()
            if self._cell_at(position).adjacent_mines:
                continue
            for neighbor in self.neighbors(*position):
                cell = self._cell_at(neighbor)
                if cell.is_revealed or neighbor in self._mines:
                    continue
                if cell.is_flagged:
                    cell.toggle_flag()
                    self._flagged_count -= 1
                self._open(cell)
                queue.append(neighbor)
                revealed += 1

        return revealed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the cell is now flagged, False if it was unflagged.

        Raises:
            OutOfRange: If the position is outside the field.
            InvalidOperation: If the cell is revealed or the game is over.
        """
        cell = self._require_cell(row, col)
        self._require_active()
        if cell.is_revealed:
            raise InvalidOperation("That cell is already explored. Try another")

        cell.toggle_flag()
        self._flagged_count += 1 if cell.is_flagged else -1
        self._check_win_condition()
        return cell.is_flagged

    def _lose(self) -> None:
        """End the game and disclose every mine."""
        self._game_state = GameState.LOST
        for position in self._mines:
            self._cell_at(position).disclose()
        logger.debug("Mine detonated; game lost")

    def _check_win_condition(self) -> None:
        """Win when flags sit exactly on the mines or all safe cells are open."""
        total_cells = self.config.total_cells
        exhausted = self._revealed_count + self.config.num_mines == total_cells
        if self._all_mines_flagged() or exhausted:
            self._game_state = GameState.WON
            logger.debug(
                "Game won (flagged=%d, revealed=%d)",
                self._flagged_count,
                self._revealed_count,
            )

    def _all_mines_flagged(self) -> bool:
        """Check if the flags sit exactly on the mines."""
        # A mine-free field is only won by revealing
        if self.config.num_mines == 0:
            return False
        if self._flagged_count != self.config.num_mines:
            return False
        return all(
            cell.position in self._mines
            for cell in self._cells
            if cell.is_flagged
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def status(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_active(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.ACTIVE

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def flagged_count(self) -> int:
        """Number of cells currently flagged."""
        return self._flagged_count

    @property
    def revealed_count(self) -> int:
        """Number of cells revealed so far."""
        return self._revealed_count

    @property
    def first_move_pending(self) -> bool:
        """True until the first successful reveal."""
        return self._first_move

    @property
    def mine_positions(self) -> FrozenSet[Position]:
        """Snapshot of the current mine layout."""
        return frozenset(self._mines)

    def is_mine(self, row: int, col: int) -> bool:
        """Check whether a mine sits at the given position."""
        return self._require_cell(row, col).position in self._mines

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get a copy of the cell at position.

        Changing the copy does not affect the board.

        Raises:
            OutOfRange: If the position is outside the field.
        """
        return replace(self._require_cell(row, col))

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = disclosed mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int8,
            count=len(self._cells),
        )
        return obs.reshape(self.config.rows, self.config.columns)

    def get_valid_actions(self) -> List[Position]:
        """
        Get positions that are not yet revealed.

        Returns:
            List of positions that can still be revealed or flagged.
        """
        return [cell.position for cell in self._cells if not cell.is_revealed]

    def render_text(self) -> str:
        """Render the field as text."""
        return render_text(self)

    def __str__(self) -> str:
        return self.render_text()
