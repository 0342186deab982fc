"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and adjacency value (mine count or mine marker).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# Adjacency value reserved for a cell that is itself a mine
MINE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Classes
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Read-only snapshot of a cell, handed out by the board.

    Attributes:
        state: Visual state at the time of the snapshot.
        adjacency: Adjacent mine count (0-8), or MINE.
    """

    state: CellState
    adjacency: int

    @property
    def is_mine(self) -> bool:
        return self.adjacency == MINE

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED


@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Only the board mutates cells; everything outside it sees CellView.

    Attributes:
        adjacency: Count of mines in neighboring cells (0-8), or MINE.
        state: Current visual state (hidden, revealed, or flagged).
    """

    adjacency: int = 0
    state: CellState = CellState.HIDDEN

    def __post_init__(self) -> None:
        if not 0 <= self.adjacency <= MINE:
            raise ValueError(f"Adjacency must be in 0..{MINE}, got {self.adjacency}")

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
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

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.adjacency == MINE

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

    def snapshot(self) -> CellView:
        """Copy state and adjacency into an immutable view."""
        return CellView(self.state, self.adjacency)

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.adjacency
