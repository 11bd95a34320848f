"""
Unit tests for plain-text rendering.
"""
from minesweeper import Difficulty, GameSession, SessionController
from minesweeper.render import cell_symbol, format_best_time, render, render_grid, render_status


class TestRenderGrid:
    """Test board rendering from a snapshot."""

    def test_symbols(self) -> None:
        assert cell_symbol(-1) == "."
        assert cell_symbol(-2) == "F"
        assert cell_symbol(9) == "*"
        assert cell_symbol(0) == " "
        assert cell_symbol(3) == "3"

    def test_render_small_grid(self, two_mine_grid) -> None:
        """Header row plus one line per board row."""
        two_mine_grid.cell(0, 0).toggle_flag()
        two_mine_grid.cell(1, 1).open()
        two_mine_grid.cell(0, 2).open()
        assert render_grid(two_mine_grid.get_observation()) == "\n".join([
            "  0 1 2",
            "0 F .  ",
            "1 . 2 .",
            "2 . . .",
        ])

    def test_wide_grid_pads_columns(self) -> None:
        """Two-digit column indices keep cells aligned."""
        session = GameSession.new(Difficulty.EXPERT)
        lines = render_grid(session.grid.get_observation()).splitlines()
        assert len(lines) == 17
        assert lines[0].endswith("28 29")
        assert all(len(line) == len(lines[0]) for line in lines)


class TestRenderStatus:
    """Test the status line."""

    def test_format_best_time(self) -> None:
        assert format_best_time(None) == "-"
        assert format_best_time(95) == "95s"

    def test_status_line(self, controller: SessionController) -> None:
        controller.toggle_flag(0, 0)
        assert render_status(controller) == (
            "Beginner | Mines: 9 | Time: 0s | Best: - | Open a cell to start"
        )

    def test_render_includes_board(self, controller: SessionController) -> None:
        lines = render(controller).splitlines()
        assert lines[0].startswith("Beginner")
        assert len(lines) == 1 + 1 + 9
