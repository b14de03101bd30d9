"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(BoardConfig(), rng)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_board() -> Board:
    """
    Create a 2x2 board with a single mine in the top-left corner.

        X 1
        1 1
    """
    return Board.with_mines(BoardConfig(2, 2, 1), [(0, 0)])


@pytest.fixture
def wall_board() -> Board:
    """
    Create a 5x5 board whose middle column is all mines.

    The left and right sides are separate safe regions:

        / 2 X 2 /
        / 3 X 3 /
        / 3 X 3 /
        / 3 X 3 /
        / 2 X 2 /
    """
    mines = [(row, 2) for row in range(5)]
    return Board.with_mines(BoardConfig(5, 5, 5), mines)


@pytest.fixture
def open_board() -> Board:
    """
    Create a 4x4 board with one mine in the bottom-right corner.

    Revealing (0, 0) opens every cell except the mine.
    """
    return Board.with_mines(BoardConfig(4, 4, 1), [(3, 3)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(1, 2)
    cell.reveal(3)
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)

