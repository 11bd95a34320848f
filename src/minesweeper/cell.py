"""
Cell module for Minesweeper.

A cell is a plain record: whether it holds a mine, whether it has been
opened or flagged, and how many mines surround it. The open/flag guards
live here so the opened/flagged exclusivity holds no matter who mutates it.
"""
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Observation Codes
# ============================================================================

HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index of the cell.
        col: Column index of the cell.
        is_mine: Whether this cell contains a mine.
        is_opened: Whether the player has opened this cell.
        is_flagged: Whether the player has flagged this cell.
        neighbor_mines: Count of mines in neighboring cells (0-8).
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    is_opened: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell was opened, False if it was already
            opened or is flagged.
        """
        if self.is_opened or self.is_flagged:
            return False
        self.is_opened = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is opened.
        """
        if self.is_opened:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither opened nor flagged."""
        return not self.is_opened and not self.is_flagged

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    def to_observation(self) -> int:
        """
        Convert cell to its snapshot value for rendering.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Opened cell with neighbor mine count
            9: Opened mine (game over state)
        """
        if self.is_flagged:
            return FLAGGED_CODE
        if not self.is_opened:
            return HIDDEN_CODE
        if self.is_mine:
            return MINE_CODE
        return self.neighbor_mines
