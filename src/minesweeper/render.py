"""
Plain-text rendering of a Minesweeper game.

Rendering works from the grid's read-only numpy snapshot and never
touches cells directly.
"""
from typing import Optional

import numpy as np

from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .session import SessionController, SessionState


_SYMBOLS = {
    HIDDEN_CODE: ".",
    FLAGGED_CODE: "F",
    MINE_CODE: "*",
    0: " ",
}

_STATE_MESSAGES = {
    SessionState.NOT_STARTED: "Open a cell to start",
    SessionState.RUNNING: "Playing",
    SessionState.WON: "You won!",
    SessionState.LOST: "Boom! Game over",
}


def cell_symbol(value: int) -> str:
    """Single-character symbol for a snapshot value."""
    return _SYMBOLS.get(int(value), str(int(value)))


def render_grid(observation: np.ndarray) -> str:
    """
    Render a grid snapshot as ASCII with row and column indices.

    Args:
        observation: Snapshot from Grid.get_observation().

    Returns:
        Multi-line string, one board row per line.
    """
    rows, cols = observation.shape
    row_width = len(str(rows - 1))
    col_width = len(str(cols - 1))

    header = " " * (row_width + 1) + " ".join(
        str(col).rjust(col_width) for col in range(cols)
    )
    lines = [header]
    for row in range(rows):
        cells = " ".join(
            cell_symbol(observation[row, col]).rjust(col_width)
            for col in range(cols)
        )
        lines.append(f"{str(row).rjust(row_width)} {cells}")
    return "\n".join(lines)


def format_best_time(seconds: Optional[int]) -> str:
    return "-" if seconds is None else f"{seconds}s"


def render_status(controller: SessionController) -> str:
    """One-line summary: difficulty, mines left, time, best, state."""
    session = controller.session
    return (
        f"{controller.difficulty.label} | "
        f"Mines: {session.mines_remaining} | "
        f"Time: {session.elapsed}s | "
        f"Best: {format_best_time(controller.best_time)} | "
        f"{_STATE_MESSAGES[session.state]}"
    )


def render(controller: SessionController) -> str:
    """Status line followed by the board."""
    return "\n".join([
        render_status(controller),
        render_grid(controller.session.grid.get_observation()),
    ])
