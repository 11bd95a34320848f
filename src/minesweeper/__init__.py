"""
Minesweeper game package.

Provides the board engine (grid, mine generation, reveal rules), the
game session lifecycle and best-time persistence.
"""
from .cell import Cell
from .grid import Grid
from .difficulty import BoardConfig, Difficulty, DEFAULT_DIFFICULTY
from .generator import place_mines, compute_neighbor_counts, generate_grid
from .engine import (
    OpenResult,
    ChordResult,
    FlagResult,
    open_cell,
    chord,
    toggle_flag,
    check_win,
    reveal_all_mines,
)
from .best_times import BestTimes, BestTimesStore, STORAGE_KEY
from .config import GameConfig
from .session import GameClock, GameSession, SessionController, SessionState

__all__ = [
    "Cell",
    "Grid",
    "BoardConfig",
    "Difficulty",
    "DEFAULT_DIFFICULTY",
    "place_mines",
    "compute_neighbor_counts",
    "generate_grid",
    "OpenResult",
    "ChordResult",
    "FlagResult",
    "open_cell",
    "chord",
    "toggle_flag",
    "check_win",
    "reveal_all_mines",
    "BestTimes",
    "BestTimesStore",
    "STORAGE_KEY",
    "GameConfig",
    "GameClock",
    "GameSession",
    "SessionController",
    "SessionState",
]
