"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counting,
cell revealing with flood fill, and flagging.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple, FrozenSet

import numpy as np

from .cell import MINE, Cell, CellState, CellView
from .errors import InvalidConfigError, OutOfBoundsError

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class RevealOutcome(Enum):
    """What a single reveal did to the board."""

    REVEALED = auto()
    UNCHANGED = auto()
    BLOCKED = auto()
    HIT_MINE = auto()


class FlagResult(Enum):
    """What a single flag toggle did to the board."""

    FLAGGED = auto()
    UNFLAGGED = auto()
    REJECTED = auto()


@dataclass(frozen=True)
class RevealResult:
    """
    Result of Board.reveal.

    Attributes:
        outcome: Kind of result.
        adjacency: Adjacency of the target cell, when it was revealed.
        revealed: Coordinates newly revealed by this call, in reveal order.
    """

    outcome: RevealOutcome
    adjacency: Optional[int] = None
    revealed: Tuple[Coordinate, ...] = ()

    @property
    def hit_mine(self) -> bool:
        return self.outcome == RevealOutcome.HIT_MINE

    @property
    def changed(self) -> bool:
        return bool(self.revealed)


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 30
    height: int = 30
    num_mines: int = 30

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfigError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfigError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidConfigError(f"Too many mines (max {max_mines})")

    @classmethod
    def from_density(cls, width: int, height: int, density: float) -> "BoardConfig":
        """Build a config whose mine count is a fraction of the cell count."""
        if not 0.0 <= density < 1.0:
            raise InvalidConfigError("Mine density must be in [0, 1)")
        return cls(width, height, round(width * height * density))

    @property
    def total_cells(self) -> int:
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the mine layout. Cells are addressed by
    (x, y) with x the column and y the row; storage is grid[y][x].
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        mine_positions: Optional[Iterable[Coordinate]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Build the grid and lay out mines.

        Args:
            config: Board dimensions and mine count (default 30x30, 30 mines).
            mine_positions: Explicit mine coordinates. Overrides the config's
                mine count with the number of distinct positions given.
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        self._rng = rng or random.Random()
        self._init_grid()

        if mine_positions is None:
            mines = self._choose_mine_positions()
        else:
            mines = self._validate_mine_positions(mine_positions)
            self.config = BoardConfig(
                self.config.width, self.config.height, len(mines)
            )

        self._mines: FrozenSet[Coordinate] = mines
        self._place_mines()
        logger.debug(
            "Board %dx%d laid out with %d mines",
            self.width, self.height, len(self._mines),
        )

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _choose_mine_positions(self) -> FrozenSet[Coordinate]:
        """Sample distinct mine coordinates without replacement."""
        positions = [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
        ]
        return frozenset(self._rng.sample(positions, self.config.num_mines))

    def _validate_mine_positions(
        self, mine_positions: Iterable[Coordinate]
    ) -> FrozenSet[Coordinate]:
        """Check explicit mine coordinates against the grid."""
        mines = frozenset((int(x), int(y)) for x, y in mine_positions)
        for x, y in mines:
            if not self.in_bounds(x, y):
                raise InvalidConfigError(
                    f"Mine at ({x}, {y}) is outside the "
                    f"{self.config.width}x{self.config.height} board"
                )
        if len(mines) >= self.config.total_cells:
            raise InvalidConfigError(
                f"Too many mines (max {self.config.total_cells - 1})"
            )
        return mines

    def _place_mines(self) -> None:
        """Mark mine cells and calculate adjacent counts for the rest."""
        for x, y in self._mines:
            self._grid[y][x].adjacency = MINE
        for y in range(self.config.height):
            for x in range(self.config.width):
                if not self._grid[y][x].is_mine:
                    self._grid[y][x].adjacency = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_x, neighbor_y in self.neighbors(x, y):
            if (neighbor_x, neighbor_y) in self._mines:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for in-bounds neighbors, at most 8.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _cell_at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.config.width, self.config.height)
        return self._grid[y][x]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        Flagged cells are blocked until unflagged. A zero cell flood-fills
        its connected zero region plus that region's numbered border.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            RevealResult describing what changed.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        cell = self._cell_at(x, y)

        if cell.is_revealed:
            return RevealResult(RevealOutcome.UNCHANGED, cell.adjacency)
        if cell.is_flagged:
            return RevealResult(RevealOutcome.BLOCKED)

        cell.reveal()
        if cell.is_mine:
            return RevealResult(RevealOutcome.HIT_MINE, MINE, ((x, y),))

        revealed = [(x, y)]
        if cell.adjacency == 0:
            revealed.extend(self._flood_fill(x, y))

        return RevealResult(RevealOutcome.REVEALED, cell.adjacency, tuple(revealed))

    def _flood_fill(self, x: int, y: int) -> List[Coordinate]:
        """
        Reveal the zero region around an already revealed zero cell.

        Cells are marked revealed as they are pushed, so each one enters
        the stack at most once.
        """
        revealed = []
        stack = [(x, y)]
        while stack:
            current_x, current_y = stack.pop()
            for neighbor_x, neighbor_y in self.neighbors(current_x, current_y):
                neighbor = self._grid[neighbor_y][neighbor_x]
                if not neighbor.is_hidden or neighbor.is_mine:
                    continue
                neighbor.reveal()
                revealed.append((neighbor_x, neighbor_y))
                if neighbor.adjacency == 0:
                    stack.append((neighbor_x, neighbor_y))
        return revealed

    def flag(self, x: int, y: int) -> FlagResult:
        """
        Toggle flag on a cell.

        Args:
            x: Column.
            y: Row.

        Returns:
            FLAGGED or UNFLAGGED on a toggle, REJECTED on a revealed cell.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        cell = self._cell_at(x, y)
        if not cell.toggle_flag():
            return FlagResult.REJECTED
        return FlagResult.FLAGGED if cell.is_flagged else FlagResult.UNFLAGGED

    def reveal_mines(self) -> None:
        """Reveal every mine, for the end-of-game display."""
        for x, y in self._mines:
            self._grid[y][x].state = CellState.REVEALED

    def is_won(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return all(
            cell.is_revealed
            for row in self._grid
            for cell in row
            if not cell.is_mine
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def mine_positions(self) -> FrozenSet[Coordinate]:
        """Coordinates of every mine."""
        return self._mines

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells, mines included."""
        return sum(cell.is_revealed for row in self._grid for cell in row)

    @property
    def flag_count(self) -> int:
        return sum(cell.is_flagged for row in self._grid for cell in row)

    @property
    def remaining_mines(self) -> int:
        """Mines not yet accounted for by a flag; may go negative."""
        return self.num_mines - self.flag_count

    def get_cell(self, x: int, y: int) -> CellView:
        """
        Get a snapshot of the cell at a position.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        return self._cell_at(x, y).snapshot()

    def cells(self) -> Iterator[Tuple[int, int, CellView]]:
        """Iterate over (x, y, view) for every cell in row-major order."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                yield x, y, cell.snapshot()

    def hidden_positions(self) -> List[Coordinate]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (x, y) positions whose cell is hidden.
        """
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._grid[y][x].is_hidden
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                obs[y, x] = self._grid[y][x].to_observation()
        return obs
