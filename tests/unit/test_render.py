"""
Unit tests for text rendering.
"""
from termsweeper import Board, BoardConfig, GameController, render_board, render_status


class TestRenderBoard:
    """Test grid rendering."""

    def test_hidden_board(self, corner_mine_board: Board) -> None:
        """Fresh board shows only hidden glyphs with coordinates."""
        lines = render_board(corner_mine_board).splitlines()
        assert lines[0] == "  0 1 2 3"
        assert lines[1] == "0[# # # #]"
        assert len(lines) == 5

    def test_revealed_glyphs(self, corner_mine_board: Board) -> None:
        """Digits for numbers, blank for zero, ? for flags, * for mines."""
        corner_mine_board.reveal(3, 3)
        corner_mine_board.flag(0, 0)
        lines = render_board(corner_mine_board).splitlines()
        assert lines[1] == "0[? 1    ]"
        assert lines[2] == "1[1 1    ]"

        corner_mine_board.flag(0, 0)
        corner_mine_board.reveal_mines()
        assert render_board(corner_mine_board).splitlines()[1] == "0[* 1    ]"

    def test_wide_board_alignment(self) -> None:
        """Two-digit indices keep every row the same width."""
        board = Board(BoardConfig(12, 11, 0))
        lines = render_board(board).splitlines()
        assert lines[0].startswith("    0  1")
        assert lines[-1].startswith("10[ #  #")
        assert len({len(line) for line in lines[1:]}) == 1


class TestRenderStatus:
    """Test status line."""

    def test_status_line(self, corner_mine_game: GameController) -> None:
        """Status line reports state and counters."""
        corner_mine_game.submit(["0", "0", "flag"])
        line = render_status(corner_mine_game)
        assert "PLAYING" in line
        assert "Mines left: 0" in line
        assert "Wins: 0" in line
