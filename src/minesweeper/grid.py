"""
Grid module for Minesweeper.

Fixed-size 2D storage of cells with bounds-checked neighbor iteration.
The grid carries no game rules; the generator and reveal engine act on it.
"""
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]

NEIGHBOR_OFFSETS = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Rectangular grid of cells indexed [0, rows) x [0, cols).

    Dimensions are fixed at construction. A new game always builds a
    new grid rather than resizing an existing one.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Create a grid with every cell closed, unflagged and mine-free.

        Args:
            rows: Number of rows.
            cols: Number of columns.
        """
        self._rows = rows
        self._cols = cols
        self._cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(cols)]
            for row in range(rows)
        ]

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._rows * self._cols

    # ========================================================================
    # Cell Access
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell(self, row: int, col: int) -> Cell:
        """Get cell at position. Callers only pass in-bounds positions."""
        return self._cells[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for grid_row in self._cells:
            yield from grid_row

    def neighbors_of(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors, excluding
            the center cell itself. Corners have 3, edges 5, interior 8.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Aggregate Queries
    # ========================================================================

    @property
    def mine_count(self) -> int:
        """Number of cells holding a mine."""
        return sum(1 for cell in self.cells() if cell.is_mine)

    def mine_positions(self) -> List[Position]:
        return [cell.position for cell in self.cells() if cell.is_mine]

    def opened_positions(self) -> List[Position]:
        return [cell.position for cell in self.cells() if cell.is_opened]

    def flagged_positions(self) -> List[Position]:
        return [cell.position for cell in self.cells() if cell.is_flagged]

    def get_observation(self) -> np.ndarray:
        """
        Get a read-only snapshot of the grid for rendering.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = opened with neighbor count
                9 = opened mine
        """
        obs = np.zeros((self._rows, self._cols), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        obs.flags.writeable = False
        return obs

    def get_mine_mask(self) -> np.ndarray:
        """Boolean array marking every mine."""
        mask = np.zeros((self._rows, self._cols), dtype=bool)
        for row, col in self.mine_positions():
            mask[row, col] = True
        return mask
