"""
Runtime configuration for the Minesweeper game.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .difficulty import DEFAULT_DIFFICULTY, Difficulty


DEFAULT_DATA_FILE = Path.home() / ".minesweeper" / "best_times.json"


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass
class GameConfig:
    """Settings for a play session."""

    # Board settings
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    seed: Optional[int] = None

    # Persistence
    data_file: Path = field(default_factory=lambda: DEFAULT_DATA_FILE)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """
        Build a configuration from environment variables.

        Reads MINESWEEPER_DIFFICULTY, MINESWEEPER_SEED and
        MINESWEEPER_DATA_FILE; unset variables keep their defaults.

        Raises:
            ValueError: If the difficulty is unknown or the seed is not
                an integer.
        """
        environ = os.environ if environ is None else environ
        config = cls()

        difficulty = environ.get("MINESWEEPER_DIFFICULTY")
        if difficulty:
            config.difficulty = Difficulty.from_name(difficulty)

        seed = environ.get("MINESWEEPER_SEED")
        if seed:
            try:
                config.seed = int(seed)
            except ValueError:
                raise ValueError(f"MINESWEEPER_SEED must be an integer, got {seed!r}") from None

        data_file = environ.get("MINESWEEPER_DATA_FILE")
        if data_file:
            config.data_file = Path(data_file).expanduser()

        return config
