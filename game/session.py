"""
Game session - one maze, one player, one timer
"""

import numbers
import time
from enum import Enum, auto

from maze.generator import generate_maze
from game.moves import (
    Direction, Control, Outcome, REJECTED, RESET_REQUESTED, QUIT_REQUESTED, resolve
)
from utils.constants import MIN_MAZE_SIZE, MAX_MAZE_SIZE


class ValidationError(ValueError):
    """Requested maze size is not usable"""


class Phase(Enum):
    PLAYING = auto()
    WON = auto()


class TimerStatus(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    STOPPED = auto()


class TimerState:
    """
    Completion timer: NOT_STARTED -> RUNNING(start) -> STOPPED(elapsed)

    Args:
        clock: Callable returning monotonic seconds
    """
    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self.status = TimerStatus.NOT_STARTED
        self.start_instant = None
        self.frozen = None

    def start(self):
        self.status = TimerStatus.RUNNING
        self.start_instant = self.clock()
        self.frozen = None

    def stop(self):
        """Freeze the elapsed time; returns the frozen duration"""
        if self.status is TimerStatus.RUNNING:
            self.frozen = self.clock() - self.start_instant
            self.status = TimerStatus.STOPPED
        return self.frozen

    def clear(self):
        self.status = TimerStatus.NOT_STARTED
        self.start_instant = None
        self.frozen = None

    def elapsed(self):
        """Seconds since the first move, frozen after a win, 0 before starting"""
        if self.status is TimerStatus.RUNNING:
            return self.clock() - self.start_instant
        if self.status is TimerStatus.STOPPED:
            return self.frozen
        return 0.0

    @property
    def started(self):
        return self.status is not TimerStatus.NOT_STARTED

    def __repr__(self):
        return f"TimerState({self.status.name}, elapsed={self.elapsed():.2f})"


def resolve_size(size):
    """
    Validate a requested maze size and round it up to odd

    The range check applies to the value as entered, so 50 becomes 51.

    Raises:
        ValidationError: size is not an integer in MIN_MAZE_SIZE..MAX_MAZE_SIZE
    """
    if isinstance(size, str):
        size = size.strip()
    elif isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise ValidationError(f"Size must be a whole number, got {size!r}")
    try:
        n = int(size)
    except (TypeError, ValueError):
        raise ValidationError(f"Size must be a whole number, got {size!r}") from None

    if n < MIN_MAZE_SIZE or n > MAX_MAZE_SIZE:
        raise ValidationError(f"Size must be between {MIN_MAZE_SIZE} and {MAX_MAZE_SIZE}, got {n}")

    return n if n % 2 else n + 1


class GameSession:
    """
    Owns a generated grid plus the player's position, timer and phase.

    The grid is shared with nobody; reset() keeps it, new_maze() replaces
    the whole session.
    """
    def __init__(self, grid, clock=time.monotonic):
        self.grid = grid
        self.position = grid.start_pos
        self.prev_position = grid.start_pos
        self.timer = TimerState(clock)
        self.phase = Phase.PLAYING
        self.moves = 0

    # ----- Accessors -----

    @property
    def rows(self):
        return self.grid.rows

    @property
    def cols(self):
        return self.grid.cols

    @property
    def size(self):
        return self.grid.size

    @property
    def start_pos(self):
        return self.grid.start_pos

    @property
    def end_pos(self):
        return self.grid.end_pos

    @property
    def is_won(self):
        return self.phase is Phase.WON

    def cell_at(self, row, col):
        return self.grid.get(row, col)

    def elapsed(self):
        return self.timer.elapsed()

    # ----- Transitions -----

    def apply_move(self, direction):
        """
        Try to move one step

        Rejected moves (walls, grid edge, or any move after a win)
        leave position, timer and phase untouched.
        """
        if self.phase is Phase.WON:
            return REJECTED

        outcome = resolve(self.grid, self.position, direction)
        if not outcome.moved:
            return outcome

        if not self.timer.started:
            self.timer.start()

        self.prev_position = self.position
        self.position = outcome.position
        self.moves += 1

        if outcome.kind is Outcome.WON:
            self.timer.stop()
            self.phase = Phase.WON

        return outcome

    def reset(self):
        """Back to Start on the same maze with a cleared timer"""
        self.prev_position = self.position
        self.position = self.grid.start_pos
        self.timer.clear()
        self.phase = Phase.PLAYING
        self.moves = 0

    def handle(self, intent):
        """
        Dispatch a keyboard intent

        Returns:
            MoveOutcome for directions, RESET_REQUESTED after a reset,
            QUIT_REQUESTED for quit, Control.NEW_MAZE unchanged (the
            owner of the session replaces it), REJECTED for None
        """
        if isinstance(intent, Direction):
            return self.apply_move(intent)
        if intent is Control.RESET:
            self.reset()
            return RESET_REQUESTED
        if intent is Control.QUIT:
            return QUIT_REQUESTED
        if intent is Control.NEW_MAZE:
            return intent
        return REJECTED

    def __repr__(self):
        return (f"GameSession({self.rows}x{self.cols}, pos={self.position}, "
                f"phase={self.phase.name}, timer={self.timer.status.name})")


# ========== MODULE-LEVEL OPERATIONS ==========

def new_session(size, seed=None, clock=time.monotonic):
    """Validate `size`, generate a maze and start a session on it"""
    n = resolve_size(size)
    return GameSession(generate_maze(n, seed=seed), clock=clock)


def apply_move(session, direction):
    return session.apply_move(direction)


def reset(session):
    session.reset()


def new_maze(session, size=None, seed=None):
    """
    Replace the session's maze with a freshly generated one

    Args:
        session: Current GameSession (its grid is dropped)
        size: Requested size, or None to keep the current dimensions
        seed: Optional generation seed
    """
    n = session.size if size is None else resolve_size(size)
    clock = session.timer.clock
    session.grid = None
    return GameSession(generate_maze(n, seed=seed), clock=clock)
