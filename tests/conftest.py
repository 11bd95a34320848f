"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import numpy as np

# Add src and the project root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    BestTimesStore,
    Cell,
    Difficulty,
    GameSession,
    Grid,
    SessionController,
    compute_neighbor_counts,
)


GridFactory = Callable[[int, int, Iterable[Tuple[int, int]]], Grid]


def make_grid(rows: int, cols: int, mines: Iterable[Tuple[int, int]]) -> Grid:
    """Build a grid with mines at fixed positions and counts computed."""
    grid = Grid(rows, cols)
    for row, col in mines:
        grid.cell(row, col).is_mine = True
    compute_neighbor_counts(grid)
    return grid


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def grid_factory() -> GridFactory:
    """Factory for grids with hand-placed mines."""
    return make_grid


@pytest.fixture
def empty_grid() -> Grid:
    """A 5x5 grid with no mines for cascade testing."""
    return make_grid(5, 5, [])


@pytest.fixture
def corner_mine_grid() -> Grid:
    """
    4x4 grid with a single mine in the bottom-right corner.

        0 0 0 0
        0 0 0 0
        0 0 1 1
        0 0 1 *
    """
    return make_grid(4, 4, [(3, 3)])


@pytest.fixture
def two_mine_grid() -> Grid:
    """
    3x3 grid with mines on the main diagonal corners.

        * 1 0
        1 2 1
        0 1 *
    """
    return make_grid(3, 3, [(0, 0), (2, 2)])


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible boards."""
    return np.random.default_rng(12345)


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
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an opened cell with neighboring mines."""
    cell = Cell(neighbor_mines=3)
    cell.open()
    return cell


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_session(corner_mine_grid: Grid) -> GameSession:
    """Session over the 4x4 corner-mine grid."""
    return GameSession(Difficulty.BEGINNER, corner_mine_grid)


@pytest.fixture
def store(tmp_path: Path) -> BestTimesStore:
    """Best times store in a temporary directory."""
    return BestTimesStore(tmp_path / "best_times.json")


@pytest.fixture
def controller(store: BestTimesStore, rng: np.random.Generator) -> SessionController:
    """Controller on beginner difficulty with a temporary store."""
    return SessionController(store, Difficulty.BEGINNER, rng)
