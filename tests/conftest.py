"""
Pytest configuration and shared fixtures.
"""
import io
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termsweeper import Board, BoardConfig, Cell, GameController, MINE


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 30x30 board with 30 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def corner_mine_board() -> Board:
    """4x4 board with a single mine at (0, 0)."""
    return Board(BoardConfig(4, 4, 1), mine_positions=[(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood fill testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a vertical wall of mines in column 2.

    Columns 0 and 4 are zero regions separated by the wall.
    """
    return Board(
        BoardConfig(5, 5, 5),
        mine_positions=[(2, y) for y in range(5)],
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(adjacency=MINE)


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_game(corner_mine_board: Board) -> GameController:
    """Controller playing the 4x4 single corner mine board."""
    return GameController(board=corner_mine_board)


@pytest.fixture
def wall_game(wall_board: Board) -> GameController:
    """Controller playing the mine wall board."""
    return GameController(board=wall_board)


@pytest.fixture
def output() -> io.StringIO:
    """Captured terminal output."""
    return io.StringIO()
