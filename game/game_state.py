"""
Game State Machine - manages screens and the active maze session
"""

import random
import time
from enum import Enum, auto

from maze.grid import allocate
from maze.generator import gen_recursive_backtracker, mark_endpoints
from maze.maze_core import bfs_shortest_path, dead_ends
from game.moves import Control, Outcome
from game.session import GameSession, ValidationError, resolve_size
from utils.constants import SIZE_INPUT_MAX_DIGITS
from utils.helpers import format_elapsed


class GameState(Enum):
    """Screens"""
    MENU = auto()
    SIZE_PROMPT = auto()
    GENERATING = auto()
    PLAYING = auto()
    WON = auto()


class GameStateManager:
    """
    Manages game state transitions and flow
    """
    def __init__(self):
        self.current_state = GameState.MENU
        self.state_data = {}  # For passing data between states

    def transition_to(self, new_state, **kwargs):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value
            **kwargs: Additional data to pass to new state
        """
        self.current_state = new_state
        self.state_data = kwargs

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"


class GameFlow:
    """
    High-level game flow controller

    Owns the single GameSession and the pending generator while a maze is
    being carved. Works with GameStateManager; knows nothing about pygame.
    """
    def __init__(self, state_manager, clock=time.monotonic, seed=None):
        """
        Args:
            state_manager: GameStateManager instance
            clock: Monotonic clock handed to every session
            seed: Optional seed for reproducible mazes
        """
        self.state_manager = state_manager
        self.clock = clock
        self.rng = random.Random(seed)

        self.session = None
        self.generator = None
        self.pending_grid = None
        self.gen_head = None

        # Size prompt
        self.size_input = ""
        self.size_error = None
        self.last_size = None
        self.last_input = ""

        # Shortest route, filled in after a win
        self.solution = []

    # ----- Menu / size prompt -----

    def open_size_prompt(self, prefill=""):
        """Ask for a maze size, optionally starting from a previous entry"""
        self.size_input = prefill
        self.size_error = None
        self.state_manager.transition_to(GameState.SIZE_PROMPT)

    def type_size_char(self, char):
        """Append a digit typed at the size prompt"""
        if char.isdigit() and len(self.size_input) < SIZE_INPUT_MAX_DIGITS:
            self.size_input += char
            self.size_error = None

    def erase_size_char(self):
        self.size_input = self.size_input[:-1]

    def submit_size(self, animated=True):
        """
        Validate the typed size and start generating

        Returns:
            True if generation started, False if the prompt stays open
        """
        try:
            n = resolve_size(self.size_input)
        except ValidationError as e:
            self.size_error = str(e)
            self.size_input = ""
            return False

        self.last_input = self.size_input
        self.start_new_game(n, animated=animated)
        return True

    # ----- Generation -----

    def start_new_game(self, n, animated=True):
        """
        Allocate an n x n grid and begin carving it

        Args:
            n: Odd side length from resolve_size()
            animated: If False, carve the whole maze immediately
        """
        self.session = None
        self.solution = []
        self.last_size = n
        self.pending_grid = allocate(n)
        self.generator = gen_recursive_backtracker(self.pending_grid, rng=self.rng)
        self.gen_head = None

        self.state_manager.transition_to(GameState.GENERATING, size=n)

        if not animated:
            self.finish_generation()

    def step_generation(self, steps):
        """
        Advance carving by up to `steps` cells

        Returns:
            True once the maze is finished and play has begun
        """
        if not self.generator:
            return True

        for _ in range(steps):
            state = next(self.generator)
            self.gen_head = state['current']
            if state['done']:
                self._generation_complete()
                return True
        return False

    def finish_generation(self):
        """Skip the rest of the animation"""
        if not self.generator:
            return
        for state in self.generator:
            if state['done']:
                break
        self._generation_complete()

    def _generation_complete(self):
        grid = self.pending_grid
        mark_endpoints(grid)

        self.session = GameSession(grid, clock=self.clock)
        self.generator = None
        self.pending_grid = None
        self.gen_head = None

        print(f"Generated {grid.rows}x{grid.cols} maze ({len(dead_ends(grid))} dead ends)")
        self.state_manager.transition_to(GameState.PLAYING)

    @property
    def grid(self):
        """Grid on screen: the one being carved, else the session's"""
        if self.pending_grid is not None:
            return self.pending_grid
        if self.session is not None:
            return self.session.grid
        return None

    # ----- Playing -----

    def handle_intent(self, intent, animated=True):
        """
        Feed one keyboard intent to the session

        Returns:
            The session's MoveOutcome (or Control.NEW_MAZE), None when
            there is no session to receive it
        """
        if self.session is None:
            return None

        outcome = self.session.handle(intent)

        if outcome is Control.NEW_MAZE:
            self.play_again(animated=animated)
            return outcome

        if outcome.kind is Outcome.WON:
            self.player_won()
        elif outcome.kind is Outcome.RESET_REQUESTED:
            print("Player reset to start")
            self.state_manager.transition_to(GameState.PLAYING)
        elif outcome.kind is Outcome.QUIT_REQUESTED:
            self.return_to_menu()

        return outcome

    def player_won(self):
        session = self.session
        self.solution = bfs_shortest_path(session.grid, session.start_pos, session.end_pos)
        elapsed = session.elapsed()

        print(f"Maze solved in {format_elapsed(elapsed)} ({session.moves} moves)")
        self.state_manager.transition_to(
            GameState.WON,
            time=elapsed,
            moves=session.moves,
            shortest=len(self.solution) - 1
        )

    def play_again(self, animated=True):
        """New maze with the same dimensions"""
        n = self.session.size if self.session is not None else self.last_size
        self.start_new_game(n, animated=animated)

    def choose_new_size(self):
        """Back to the size prompt after a win, pre-filled with the last entry"""
        self.session = None
        self.solution = []
        self.open_size_prompt(prefill=self.last_input)

    def return_to_menu(self):
        """End the session and go back to the main menu"""
        self.session = None
        self.generator = None
        self.pending_grid = None
        self.solution = []
        self.state_manager.transition_to(GameState.MENU)

    def __repr__(self):
        return f"GameFlow(state={self.state_manager.get_state_name()}, session={self.session})"
