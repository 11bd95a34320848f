"""
Best-time records for Minesweeper.

BestTimes is the in-memory mapping from difficulty to the fastest win in
whole seconds. BestTimesStore is the only persistence touchpoint: it reads
and writes a small JSON document under a fixed storage key, and a missing
or damaged file loads as an empty record instead of raising.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .difficulty import Difficulty


logger = logging.getLogger(__name__)

STORAGE_KEY = "minesweeper-best-times"


# ============================================================================
# Best Times Mapping
# ============================================================================

def _empty_times() -> Dict[Difficulty, Optional[int]]:
    return {difficulty: None for difficulty in Difficulty}


@dataclass
class BestTimes:
    """
    Fastest winning time per difficulty.

    Attributes:
        times: Best elapsed seconds per difficulty, None if never won.
    """

    times: Dict[Difficulty, Optional[int]] = field(default_factory=_empty_times)

    def get(self, difficulty: Difficulty) -> Optional[int]:
        """Get best time for a difficulty, or None if absent."""
        return self.times.get(difficulty)

    def record(self, difficulty: Difficulty, seconds: int) -> bool:
        """
        Record a winning time.

        Args:
            difficulty: Difficulty the game was won on.
            seconds: Elapsed whole seconds.

        Returns:
            True if this beat (strictly) the stored time or none existed.
        """
        current = self.times.get(difficulty)
        if current is not None and seconds >= current:
            return False
        self.times[difficulty] = seconds
        return True

    def to_dict(self) -> Dict[str, Optional[int]]:
        """Convert to name-keyed dictionary for JSON serialization."""
        return {
            difficulty.value: self.times.get(difficulty)
            for difficulty in Difficulty
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BestTimes":
        """
        Create from a name-keyed dictionary.

        Unknown names are ignored; values that are not non-negative
        integers are treated as absent.
        """
        best = cls()
        for difficulty in Difficulty:
            value = data.get(difficulty.value)
            if _is_valid_time(value):
                best.times[difficulty] = value
            elif value is not None:
                logger.warning(
                    "Ignoring invalid best time for %s: %r",
                    difficulty.value, value,
                )
        return best


def _is_valid_time(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


# ============================================================================
# JSON Store
# ============================================================================

class BestTimesStore:
    """Loads and saves BestTimes as a JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize the store.

        Args:
            path: JSON file to read and write. Parent directories are
                created on save.
        """
        self.path = Path(path).expanduser()

    def load(self) -> BestTimes:
        """
        Load best times from disk.

        Returns:
            Stored best times, or an all-absent record when the file is
            missing, unreadable or malformed.
        """
        if not self.path.exists():
            logger.info("No best times at %s, starting fresh", self.path)
            return BestTimes()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as error:
            logger.warning("Could not read best times from %s: %s", self.path, error)
            return BestTimes()

        if not isinstance(data, dict) or not isinstance(data.get(STORAGE_KEY), dict):
            logger.warning("Malformed best times file %s, ignoring it", self.path)
            return BestTimes()

        return BestTimes.from_dict(data[STORAGE_KEY])

    def save(self, best_times: BestTimes) -> bool:
        """
        Write best times to disk.

        Returns:
            True if written, False if the write failed (logged).
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({STORAGE_KEY: best_times.to_dict()}, f, indent=2)
        except OSError as error:
            logger.error("Could not save best times to %s: %s", self.path, error)
            return False
        logger.info("Saved best times to %s", self.path)
        return True
