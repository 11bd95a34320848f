"""
Unit tests for Grid class.

Tests construction, neighbor iteration at corners/edges/interior,
and the rendering snapshot.
"""
import numpy as np
import pytest
from minesweeper import Grid


# ============================================================================
# Construction Tests
# ============================================================================

class TestGridConstruction:
    """Test grid creation and initial cell values."""

    def test_dimensions(self) -> None:
        """Grid should report the dimensions it was built with."""
        grid = Grid(16, 30)
        assert grid.rows == 16
        assert grid.cols == 30
        assert grid.shape == (16, 30)
        assert grid.size == 480

    def test_all_cells_start_blank(self) -> None:
        """Every cell starts closed, unflagged, mine-free with count 0."""
        grid = Grid(4, 6)
        cells = list(grid.cells())
        assert len(cells) == 24
        for cell in cells:
            assert cell.is_mine is False
            assert cell.is_opened is False
            assert cell.is_flagged is False
            assert cell.neighbor_mines == 0

    def test_cells_know_their_positions(self) -> None:
        """Cell positions should match their grid index."""
        grid = Grid(3, 4)
        for row in range(3):
            for col in range(4):
                assert grid.cell(row, col).position == (row, col)

    def test_new_grid_has_no_mines(self) -> None:
        """Mine count starts at zero."""
        assert Grid(9, 9).mine_count == 0


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestNeighbors:
    """Test bounds-checked neighbor iteration."""

    @pytest.mark.parametrize("position", [(0, 0), (0, 4), (4, 0), (4, 4)])
    def test_corner_has_three_neighbors(self, position) -> None:
        """Corner cells have exactly 3 neighbors."""
        grid = Grid(5, 5)
        assert len(grid.neighbors_of(*position)) == 3

    @pytest.mark.parametrize("position", [(0, 2), (2, 0), (4, 2), (2, 4)])
    def test_edge_has_five_neighbors(self, position) -> None:
        """Edge cells have exactly 5 neighbors."""
        grid = Grid(5, 5)
        assert len(grid.neighbors_of(*position)) == 5

    def test_interior_has_eight_neighbors(self) -> None:
        """Interior cells have all 8 neighbors."""
        grid = Grid(5, 5)
        neighbors = grid.neighbors_of(2, 2)
        assert sorted(neighbors) == [
            (1, 1), (1, 2), (1, 3),
            (2, 1), (2, 3),
            (3, 1), (3, 2), (3, 3),
        ]

    def test_neighbors_never_include_self(self) -> None:
        """A cell is never its own neighbor."""
        grid = Grid(3, 3)
        for row in range(3):
            for col in range(3):
                assert (row, col) not in grid.neighbors_of(row, col)

    def test_single_cell_grid_has_no_neighbors(self) -> None:
        """A 1x1 grid has nothing around its only cell."""
        assert Grid(1, 1).neighbors_of(0, 0) == []

    def test_valid_position_bounds(self) -> None:
        """Positions are valid only inside [0, rows) x [0, cols)."""
        grid = Grid(2, 3)
        assert grid.is_valid_position(1, 2) is True
        assert grid.is_valid_position(-1, 0) is False
        assert grid.is_valid_position(0, 3) is False
        assert grid.is_valid_position(2, 0) is False


# ============================================================================
# Snapshot Tests
# ============================================================================

class TestObservation:
    """Test the numpy snapshot used for rendering."""

    def test_observation_shape_matches_grid(self) -> None:
        """Observation should match grid dimensions."""
        assert Grid(9, 7).get_observation().shape == (9, 7)

    def test_new_grid_observation_all_hidden(self) -> None:
        """New grid observation should be all -1."""
        assert np.all(Grid(4, 4).get_observation() == -1)

    def test_observation_dtype_is_int8(self) -> None:
        """Observation should be int8."""
        assert Grid(2, 2).get_observation().dtype == np.int8

    def test_observation_is_read_only(self) -> None:
        """Rendering cannot write through the snapshot."""
        obs = Grid(2, 2).get_observation()
        with pytest.raises(ValueError):
            obs[0, 0] = 5

    def test_observation_reflects_cell_states(self, two_mine_grid: Grid) -> None:
        """Flags, opened numbers and opened mines are all encoded."""
        two_mine_grid.cell(0, 0).toggle_flag()
        two_mine_grid.cell(1, 1).open()
        two_mine_grid.cell(2, 2).open()
        obs = two_mine_grid.get_observation()
        assert obs[0, 0] == -2
        assert obs[1, 1] == 2
        assert obs[2, 2] == 9
        assert obs[0, 2] == -1

    def test_mine_mask(self, two_mine_grid: Grid) -> None:
        """Mine mask marks exactly the mine positions."""
        mask = two_mine_grid.get_mine_mask()
        assert mask.sum() == 2
        assert mask[0, 0] and mask[2, 2]
