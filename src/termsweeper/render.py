"""
Text rendering of the board and game status.

Works only from CellView snapshots, so renderers never touch board storage.
"""
from typing import TYPE_CHECKING

from .board import Board
from .cell import CellView

if TYPE_CHECKING:
    from .controller import GameController


HIDDEN_GLYPH = "#"
FLAG_GLYPH = "?"
MINE_GLYPH = "*"
EMPTY_GLYPH = " "


def cell_glyph(view: CellView) -> str:
    """Single character shown for a cell."""
    if view.is_hidden:
        return HIDDEN_GLYPH
    if view.is_flagged:
        return FLAG_GLYPH
    if view.is_mine:
        return MINE_GLYPH
    if view.adjacency == 0:
        return EMPTY_GLYPH
    return str(view.adjacency)


def render_board(board: Board) -> str:
    """
    Render the board as a grid with coordinate labels.

    Columns are labelled across the top and rows down the left, each
    right-aligned to the widest index so multi-digit boards stay aligned.
    """
    col_width = len(str(board.width - 1))
    row_width = len(str(board.height - 1))

    header = " " * (row_width + 1) + " ".join(
        str(x).rjust(col_width) for x in range(board.width)
    )
    lines = [header]

    rows = [[] for _ in range(board.height)]
    for _, y, view in board.cells():
        rows[y].append(cell_glyph(view).rjust(col_width))
    for y, glyphs in enumerate(rows):
        lines.append(f"{str(y).rjust(row_width)}[" + " ".join(glyphs) + "]")

    return "\n".join(lines)


def render_status(controller: "GameController") -> str:
    """One-line summary of the game and session counters."""
    return (
        f"Status: {controller.status.name} | "
        f"Mines left: {controller.board.remaining_mines} | "
        f"Score: {controller.score} | "
        f"Wins: {controller.wins} | "
        f"Losses: {controller.losses}"
    )
