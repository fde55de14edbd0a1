"""
Game Module - session state, move resolution and screen flow
"""

from .moves import Direction, Control, Outcome, MoveOutcome, resolve
from .session import (
    GameSession, Phase, TimerState, TimerStatus, ValidationError,
    resolve_size, new_session, apply_move, reset, new_maze
)

__all__ = ['Direction', 'Control', 'Outcome', 'MoveOutcome', 'resolve',
           'GameSession', 'Phase', 'TimerState', 'TimerStatus', 'ValidationError',
           'resolve_size', 'new_session', 'apply_move', 'reset', 'new_maze']
