"""
Move resolution - directional intents, control signals and move outcomes
"""

from enum import Enum, auto

from maze.grid import Cell


class Direction(Enum):
    """Directional intent as a (dr, dc) unit vector"""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dr(self):
        return self.value[0]

    @property
    def dc(self):
        return self.value[1]


class Control(Enum):
    """Non-movement requests coming from the keyboard"""
    RESET = auto()
    NEW_MAZE = auto()
    QUIT = auto()


class Outcome(Enum):
    REJECTED = auto()
    ACCEPTED = auto()
    WON = auto()
    RESET_REQUESTED = auto()
    QUIT_REQUESTED = auto()


class MoveOutcome:
    """
    Tagged result of handling one intent.
    `position` is set only for ACCEPTED and WON.
    """
    def __init__(self, kind, position=None):
        self.kind = kind
        self.position = position

    @classmethod
    def accepted(cls, position):
        return cls(Outcome.ACCEPTED, position)

    @classmethod
    def won(cls, position):
        return cls(Outcome.WON, position)

    @property
    def moved(self):
        """True when the player position changed"""
        return self.kind in (Outcome.ACCEPTED, Outcome.WON)

    def __eq__(self, other):
        if not isinstance(other, MoveOutcome):
            return NotImplemented
        return self.kind == other.kind and self.position == other.position

    def __hash__(self):
        return hash((self.kind, self.position))

    def __repr__(self):
        if self.position is None:
            return f"MoveOutcome({self.kind.name})"
        return f"MoveOutcome({self.kind.name}, {self.position})"


REJECTED = MoveOutcome(Outcome.REJECTED)
RESET_REQUESTED = MoveOutcome(Outcome.RESET_REQUESTED)
QUIT_REQUESTED = MoveOutcome(Outcome.QUIT_REQUESTED)


def resolve(grid, position, direction):
    """
    Resolve one step from `position` without mutating anything

    Returns:
        REJECTED for walls and out-of-grid targets,
        MoveOutcome.won(target) for the End cell,
        MoveOutcome.accepted(target) otherwise
    """
    row, col = position
    nr, nc = row + direction.dr, col + direction.dc

    if not grid.in_bounds(nr, nc):
        return REJECTED

    cell = grid.get(nr, nc)
    if cell is Cell.WALL:
        return REJECTED
    if cell is Cell.END:
        return MoveOutcome.won((nr, nc))
    return MoveOutcome.accepted((nr, nc))
