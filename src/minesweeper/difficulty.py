"""
Difficulty presets for Minesweeper.

Each difficulty maps to a validated board configuration. Validation
happens when the configuration is built, so an impossible board (more
mines than cells can hold) never reaches mine placement.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be opened to win."""
        return self.total_cells - self.num_mines


# ============================================================================
# Difficulty Variants
# ============================================================================

class Difficulty(Enum):
    """Named difficulty levels. Values are the persisted names."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"

    @property
    def config(self) -> BoardConfig:
        return _PRESETS[self]

    @property
    def label(self) -> str:
        """Display name, e.g. 'Intermediate'."""
        return self.value.capitalize()

    @classmethod
    def from_name(cls, name: Union[str, "Difficulty"]) -> "Difficulty":
        """
        Look up a difficulty by its name.

        Args:
            name: Case-insensitive difficulty name, or a Difficulty.

        Returns:
            Matching Difficulty.

        Raises:
            ValueError: If the name is not a known difficulty.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(
                f"Unknown difficulty {name!r} (choose from {choices})"
            ) from None


_PRESETS = {
    Difficulty.BEGINNER: BoardConfig(9, 9, 10),
    Difficulty.INTERMEDIATE: BoardConfig(16, 16, 40),
    Difficulty.EXPERT: BoardConfig(16, 30, 99),
}

DEFAULT_DIFFICULTY = Difficulty.INTERMEDIATE
