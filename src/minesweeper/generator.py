"""
Board generator for Minesweeper.

Places mines uniformly at random and computes neighbor mine counts.
Randomness comes from a numpy Generator so a seed reproduces a board.
"""
import logging
from typing import Optional

import numpy as np

from .difficulty import BoardConfig
from .grid import Grid


logger = logging.getLogger(__name__)


# ============================================================================
# Mine Placement
# ============================================================================

def place_mines(
    grid: Grid,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
) -> None:
    """
    Place mines at uniformly random positions, without replacement.

    A drawn position that already holds a mine is rejected and drawn
    again. The caller guarantees mine_count < grid.size; BoardConfig
    enforces this at construction.

    Args:
        grid: Grid to mutate in place.
        mine_count: Number of distinct mines to place.
        rng: Random generator (default: fresh unseeded generator).
    """
    rng = rng if rng is not None else np.random.default_rng()
    placed = 0
    while placed < mine_count:
        row = int(rng.integers(grid.rows))
        col = int(rng.integers(grid.cols))
        cell = grid.cell(row, col)
        if not cell.is_mine:
            cell.is_mine = True
            placed += 1


def compute_neighbor_counts(grid: Grid) -> None:
    """Set neighbor_mines on every non-mine cell."""
    for cell in grid.cells():
        if cell.is_mine:
            continue
        cell.neighbor_mines = sum(
            1
            for neighbor_row, neighbor_col in grid.neighbors_of(cell.row, cell.col)
            if grid.cell(neighbor_row, neighbor_col).is_mine
        )


# ============================================================================
# Full Board Generation
# ============================================================================

def generate_grid(
    config: BoardConfig,
    rng: Optional[np.random.Generator] = None,
) -> Grid:
    """
    Build a ready-to-play grid for a configuration.

    Args:
        config: Validated board configuration.
        rng: Random generator used for mine placement.

    Returns:
        Grid with mines placed and neighbor counts computed.
    """
    grid = Grid(config.rows, config.cols)
    place_mines(grid, config.num_mines, rng)
    compute_neighbor_counts(grid)
    logger.debug(
        "Generated %dx%d grid with %d mines",
        config.rows, config.cols, config.num_mines,
    )
    return grid
