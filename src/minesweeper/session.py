"""
Session controller for Minesweeper.

A GameSession is one game: a grid, its lifecycle state, the flag counter
and the clock. The SessionController owns exactly one active session and
handles new games, difficulty changes and best-time bookkeeping.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

import numpy as np

from . import engine
from .best_times import BestTimes, BestTimesStore
from .config import GameConfig
from .difficulty import DEFAULT_DIFFICULTY, Difficulty
from .engine import ChordResult, FlagResult, OpenResult
from .generator import generate_grid
from .grid import Grid


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class SessionState(Enum):
    """Lifecycle states of a game session."""

    NOT_STARTED = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.WON, SessionState.LOST)


# ============================================================================
# Game Clock
# ============================================================================

class GameClock:
    """
    Whole-second game timer driven by external once-per-second ticks.

    Ticks only count while the clock is running; stopping the clock
    cancels further counting until it is started again.
    """

    def __init__(self) -> None:
        self._elapsed = 0
        self._running = False

    @property
    def elapsed(self) -> int:
        return self._elapsed

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False

    def reset(self) -> None:
        """Stop the clock and zero the elapsed time."""
        self._running = False
        self._elapsed = 0

    def tick(self) -> bool:
        """
        Advance the clock by one second.

        Returns:
            True if the tick was counted.
        """
        if not self._running:
            return False
        self._elapsed += 1
        return True


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    A single game from first click to win or loss.

    Once the session is WON or LOST, open, chord and flag toggles are
    no-ops that return UNCHANGED.
    """

    difficulty: Difficulty
    grid: Grid
    state: SessionState = SessionState.NOT_STARTED
    flags_placed: int = 0
    clock: GameClock = field(default_factory=GameClock, repr=False)
    _mine_count: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # Mines never move after generation
        self._mine_count = self.grid.mine_count

    @classmethod
    def new(
        cls,
        difficulty: Difficulty,
        rng: Optional[np.random.Generator] = None,
    ) -> "GameSession":
        """Create a NOT_STARTED session with a freshly generated grid."""
        return cls(difficulty, generate_grid(difficulty.config, rng))

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    @property
    def elapsed(self) -> int:
        """Elapsed whole seconds since the first open."""
        return self.clock.elapsed

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed. Negative when over-flagged."""
        return self.mine_count - self.flags_placed

    # ========================================================================
    # Player Actions
    # ========================================================================

    def open(self, row: int, col: int) -> OpenResult:
        """
        Open a cell.

        The first accepted open starts the session and its clock.

        Returns:
            Engine result, or UNCHANGED once the game is over.
        """
        if self.is_terminal:
            return OpenResult.UNCHANGED

        result = engine.open_cell(self.grid, row, col)
        if result is OpenResult.UNCHANGED:
            return result

        if self.state is SessionState.NOT_STARTED:
            self.state = SessionState.RUNNING
            self.clock.start()

        if result is OpenResult.HIT_MINE:
            self._lose(row, col)
        else:
            self._check_win()
        return result

    def chord(self, row: int, col: int) -> ChordResult:
        """Chord on an opened numbered cell. No-op once the game is over."""
        if self.is_terminal:
            return ChordResult.UNCHANGED

        result = engine.chord(self.grid, row, col)
        if result is ChordResult.HIT_MINE:
            self._lose(row, col)
        elif result is ChordResult.OPENED:
            self._check_win()
        return result

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """Toggle a flag and update the flag counter."""
        if self.is_terminal:
            return FlagResult.UNCHANGED

        result = engine.toggle_flag(self.grid, row, col)
        self.flags_placed += result.delta
        return result

    def tick(self) -> bool:
        """One-second timer tick. Only counts while RUNNING."""
        if self.state is not SessionState.RUNNING:
            return False
        return self.clock.tick()

    # ========================================================================
    # Transitions
    # ========================================================================

    def _lose(self, row: int, col: int) -> None:
        self.state = SessionState.LOST
        self.clock.stop()
        engine.reveal_all_mines(self.grid)
        logger.info(
            "Game lost on %s at (%d, %d) after %ds",
            self.difficulty.value, row, col, self.elapsed,
        )

    def _check_win(self) -> None:
        if engine.check_win(self.grid):
            self.state = SessionState.WON
            self.clock.stop()
            logger.info("Game won on %s in %ds", self.difficulty.value, self.elapsed)


# ============================================================================
# Session Controller
# ============================================================================

class SessionController:
    """
    Owns the active game session and the best-time records.

    All player input goes through the controller, which forwards it to
    the session and records a best time whenever a game is won.
    """

    def __init__(
        self,
        store: Optional[BestTimesStore] = None,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the controller and start a fresh session.

        Args:
            store: Persistence for best times. Without one, best times
                are kept in memory only.
            difficulty: Starting difficulty.
            rng: Random generator for mine placement.
        """
        self.store = store
        self.best_times = store.load() if store is not None else BestTimes()
        self.rng = rng if rng is not None else np.random.default_rng()
        self._difficulty = difficulty
        self.session = GameSession.new(difficulty, self.rng)

    @classmethod
    def from_config(cls, config: GameConfig) -> "SessionController":
        """Build a controller from runtime configuration."""
        return cls(
            store=BestTimesStore(config.data_file),
            difficulty=config.difficulty,
            rng=np.random.default_rng(config.seed),
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def best_time(self) -> Optional[int]:
        """Best time for the current difficulty, or None."""
        return self.best_times.get(self._difficulty)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def open(self, row: int, col: int) -> OpenResult:
        was_terminal = self.session.is_terminal
        result = self.session.open(row, col)
        if not was_terminal:
            self._record_if_won()
        return result

    def chord(self, row: int, col: int) -> ChordResult:
        was_terminal = self.session.is_terminal
        result = self.session.chord(row, col)
        if not was_terminal:
            self._record_if_won()
        return result

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        return self.session.toggle_flag(row, col)

    def tick(self) -> bool:
        return self.session.tick()

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(self) -> GameSession:
        """Discard the current session and start a fresh one."""
        self.session.clock.reset()
        self.session = GameSession.new(self._difficulty, self.rng)
        logger.info("New %s game", self._difficulty.value)
        return self.session

    def change_difficulty(self, difficulty: Union[str, Difficulty]) -> bool:
        """
        Switch difficulty and start a fresh session.

        Args:
            difficulty: Difficulty or its name.

        Returns:
            False if already on that difficulty (nothing changes).

        Raises:
            ValueError: If the name is not a known difficulty.
        """
        difficulty = Difficulty.from_name(difficulty)
        if difficulty is self._difficulty:
            return False
        self._difficulty = difficulty
        self.new_game()
        return True

    def _record_if_won(self) -> None:
        """Record the elapsed time if the last action won the game."""
        session = self.session
        if session.state is not SessionState.WON:
            return
        if self.best_times.record(session.difficulty, session.elapsed):
            logger.info(
                "New best time for %s: %ds", session.difficulty.value, session.elapsed
            )
            if self.store is not None:
                self.store.save(self.best_times)
