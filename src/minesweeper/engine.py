"""
Reveal engine for Minesweeper.

Implements the board rules: opening a cell with flood-fill cascade,
chord opening, flag toggling, the win check and the end-of-game mine
reveal. The engine knows nothing about sessions; gating actions on a
finished game is the session's job.
"""
from enum import Enum, auto
from typing import List

from .grid import Grid, Position


# ============================================================================
# Action Results
# ============================================================================

class OpenResult(Enum):
    """Outcome of opening a cell."""

    UNCHANGED = auto()
    OPENED = auto()
    HIT_MINE = auto()


class ChordResult(Enum):
    """Outcome of a chord action."""

    UNCHANGED = auto()
    OPENED = auto()
    HIT_MINE = auto()


class FlagResult(Enum):
    """Outcome of a flag toggle."""

    UNCHANGED = auto()
    FLAGGED = auto()
    UNFLAGGED = auto()

    @property
    def delta(self) -> int:
        """Change to apply to the flags-placed counter."""
        if self is FlagResult.FLAGGED:
            return 1
        if self is FlagResult.UNFLAGGED:
            return -1
        return 0


# ============================================================================
# Opening
# ============================================================================

def open_cell(grid: Grid, row: int, col: int) -> OpenResult:
    """
    Open a cell, cascading through zero-count regions.

    Opened and flagged cells are left alone. Opening a cell with no
    neighboring mines opens every neighbor that is neither opened nor
    flagged, repeating for each zero cell reached. The opened state is
    the visited marker, so the cascade terminates on any board.

    Args:
        grid: Grid to act on.
        row: Row index.
        col: Column index.

    Returns:
        UNCHANGED, OPENED, or HIT_MINE.
    """
    cell = grid.cell(row, col)
    if not cell.open():
        return OpenResult.UNCHANGED

    if cell.is_mine:
        return OpenResult.HIT_MINE

    if cell.neighbor_mines == 0:
        _cascade(grid, row, col)

    return OpenResult.OPENED


def _cascade(grid: Grid, row: int, col: int) -> None:
    """Open the zero region around an already-opened zero cell."""
    stack: List[Position] = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        for neighbor_row, neighbor_col in grid.neighbors_of(current_row, current_col):
            neighbor = grid.cell(neighbor_row, neighbor_col)
            if not neighbor.open():
                continue
            if neighbor.neighbor_mines == 0 and not neighbor.is_mine:
                stack.append((neighbor_row, neighbor_col))


# ============================================================================
# Chord
# ============================================================================

def count_adjacent_flags(grid: Grid, row: int, col: int) -> int:
    """Count flagged cells adjacent to position."""
    return sum(
        1
        for neighbor_row, neighbor_col in grid.neighbors_of(row, col)
        if grid.cell(neighbor_row, neighbor_col).is_flagged
    )


def chord(grid: Grid, row: int, col: int) -> ChordResult:
    """
    Open every unflagged neighbor of a satisfied numbered cell.

    The target must be opened and show a number. When the number of
    flagged neighbors equals that number, every neighbor that is neither
    opened nor flagged is opened with full cascade. Flags are trusted as
    placed: a wrong flag lets the chord open a mine.

    Args:
        grid: Grid to act on.
        row: Row index.
        col: Column index.

    Returns:
        UNCHANGED if nothing was opened, HIT_MINE if any opened
        neighbor was a mine, otherwise OPENED.
    """
    cell = grid.cell(row, col)
    if not cell.is_opened or cell.neighbor_mines == 0:
        return ChordResult.UNCHANGED
    if count_adjacent_flags(grid, row, col) != cell.neighbor_mines:
        return ChordResult.UNCHANGED

    result = ChordResult.UNCHANGED
    for neighbor_row, neighbor_col in grid.neighbors_of(row, col):
        outcome = open_cell(grid, neighbor_row, neighbor_col)
        if outcome is OpenResult.HIT_MINE:
            result = ChordResult.HIT_MINE
        elif outcome is OpenResult.OPENED and result is ChordResult.UNCHANGED:
            result = ChordResult.OPENED
    return result


# ============================================================================
# Flags
# ============================================================================

def toggle_flag(grid: Grid, row: int, col: int) -> FlagResult:
    """
    Toggle the flag on an unopened cell.

    There is no cap on flags; the caller's counter may exceed the
    number of mines.

    Returns:
        UNCHANGED for opened cells, otherwise FLAGGED or UNFLAGGED.
    """
    cell = grid.cell(row, col)
    if not cell.toggle_flag():
        return FlagResult.UNCHANGED
    return FlagResult.FLAGGED if cell.is_flagged else FlagResult.UNFLAGGED


# ============================================================================
# Terminal Conditions
# ============================================================================

def check_win(grid: Grid) -> bool:
    """True iff every non-mine cell is opened. Flags are irrelevant."""
    return all(cell.is_opened for cell in grid.cells() if not cell.is_mine)


def reveal_all_mines(grid: Grid) -> None:
    """
    Open every mine for the end-of-game display.

    A flagged mine drops its flag as it opens so no cell is ever both
    opened and flagged.
    """
    for cell in grid.cells():
        if cell.is_mine:
            cell.is_flagged = False
            cell.is_opened = True
