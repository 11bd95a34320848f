"""
Text commands for driving a game from a terminal.

Parses lines such as "o 3 4" or "d expert" into Command values and
applies them to a SessionController. Coordinates are checked against
the active grid here, before anything reaches the engine.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .engine import ChordResult, FlagResult, OpenResult
from .session import SessionController, SessionState


HELP_TEXT = """\
Commands:
  o ROW COL   open a cell
  f ROW COL   toggle a flag
  c ROW COL   chord on an opened number
  n           new game
  d NAME      change difficulty (beginner, intermediate, expert)
  h           show this help
  q           quit"""


class CommandError(ValueError):
    """Raised for input that cannot be turned into a valid command."""


class Action(Enum):
    """Actions a player can request."""

    OPEN = "o"
    FLAG = "f"
    CHORD = "c"
    NEW_GAME = "n"
    DIFFICULTY = "d"
    HELP = "h"
    QUIT = "q"


_CELL_ACTIONS = (Action.OPEN, Action.FLAG, Action.CHORD)

_ALIASES = {
    "open": Action.OPEN,
    "flag": Action.FLAG,
    "chord": Action.CHORD,
    "new": Action.NEW_GAME,
    "difficulty": Action.DIFFICULTY,
    "help": Action.HELP,
    "?": Action.HELP,
    "quit": Action.QUIT,
    "exit": Action.QUIT,
}


@dataclass(frozen=True)
class Command:
    """A parsed player command."""

    action: Action
    row: Optional[int] = None
    col: Optional[int] = None
    argument: Optional[str] = None


# ============================================================================
# Parsing
# ============================================================================

def parse_command(text: str) -> Command:
    """
    Parse one line of player input.

    Raises:
        CommandError: If the line is empty, unknown or malformed.
    """
    parts = text.strip().split()
    if not parts:
        raise CommandError("Empty command (h for help)")

    keyword = parts[0].lower()
    try:
        action = _ALIASES.get(keyword) or Action(keyword)
    except ValueError:
        raise CommandError(f"Unknown command {parts[0]!r} (h for help)") from None

    args = parts[1:]
    if action in _CELL_ACTIONS:
        if len(args) != 2:
            raise CommandError(f"Usage: {action.value} ROW COL")
        try:
            row, col = int(args[0]), int(args[1])
        except ValueError:
            raise CommandError("ROW and COL must be integers") from None
        return Command(action, row=row, col=col)

    if action is Action.DIFFICULTY:
        if len(args) != 1:
            raise CommandError("Usage: d NAME")
        return Command(action, argument=args[0])

    if args:
        raise CommandError(f"{action.value} takes no arguments")
    return Command(action)


# ============================================================================
# Execution
# ============================================================================

def execute(controller: SessionController, command: Command) -> str:
    """
    Apply a command to the controller.

    Returns:
        Message to show the player; empty when there is nothing to say.

    Raises:
        CommandError: If coordinates are off the board or the
            difficulty name is unknown.
    """
    if command.action is Action.HELP:
        return HELP_TEXT
    if command.action is Action.QUIT:
        return ""
    if command.action is Action.NEW_GAME:
        controller.new_game()
        return "New game"
    if command.action is Action.DIFFICULTY:
        try:
            changed = controller.change_difficulty(command.argument)
        except ValueError as error:
            raise CommandError(str(error)) from None
        if not changed:
            return f"Already playing {controller.difficulty.label}"
        return f"Switched to {controller.difficulty.label}"

    grid = controller.session.grid
    if not grid.is_valid_position(command.row, command.col):
        raise CommandError(
            f"({command.row}, {command.col}) is off the board "
            f"({grid.rows}x{grid.cols})"
        )

    previous_best = controller.best_time
    if command.action is Action.FLAG:
        if controller.toggle_flag(command.row, command.col) is FlagResult.UNCHANGED:
            return "Nothing to flag there"
        return ""

    if command.action is Action.OPEN:
        changed = controller.open(command.row, command.col) is not OpenResult.UNCHANGED
    else:
        changed = controller.chord(command.row, command.col) is not ChordResult.UNCHANGED
    if not changed:
        return "Nothing happened"
    return _outcome_message(controller, previous_best)


def _outcome_message(controller: SessionController, previous_best: Optional[int]) -> str:
    state = controller.state
    if state is SessionState.LOST:
        return "Boom! You hit a mine."
    if state is SessionState.WON:
        message = f"You won in {controller.session.elapsed}s!"
        if controller.best_time != previous_best:
            message += " New best time!"
        return message
    return ""


def is_quit(command: Command) -> bool:
    return command.action is Action.QUIT
