import pytest

from maze.grid import Cell
from maze.maze_core import bfs_shortest_path, path_to_moves
from game.moves import Direction, Control, Outcome, REJECTED, RESET_REQUESTED, QUIT_REQUESTED
from game.session import (
    GameSession, Phase, TimerState, TimerStatus, ValidationError,
    resolve_size, new_session, apply_move, reset, new_maze
)


def route(session):
    """Directions along the shortest route from Start to End"""
    path = bfs_shortest_path(session.grid, session.start_pos, session.end_pos)
    return [Direction(step) for step in path_to_moves(path)]


def wall_direction(session):
    """A direction that is blocked from the current position"""
    row, col = session.position
    for direction in Direction:
        if not session.grid.is_open(row + direction.dr, col + direction.dc):
            return direction
    raise AssertionError("no blocked direction")


# ----- Size validation -----

@pytest.mark.parametrize("size, expected", [
    (10, 11), (11, 11), (12, 13), (49, 49), (50, 51), ("20", 21), (" 15 ", 15),
])
def test_resolve_size_rounds_up_to_odd(size, expected):
    assert resolve_size(size) == expected


@pytest.mark.parametrize("size", [
    9, 51, 0, -4, 100, "abc", "", None, "1.5", 10.5, 49.9, 12.7, 20.0, True,
])
def test_resolve_size_rejects(size):
    with pytest.raises(ValidationError):
        resolve_size(size)


def test_validation_error_is_value_error():
    assert issubclass(ValidationError, ValueError)


@pytest.mark.parametrize("size, n", [(10, 11), (49, 49), (50, 51)])
def test_new_session_dimensions(size, n):
    session = new_session(size, seed=0)

    assert (session.rows, session.cols, session.size) == (n, n, n)
    assert session.start_pos == (1, 1)
    assert session.end_pos == (n - 2, n - 2)
    assert session.cell_at(1, 1) is Cell.START
    assert session.cell_at(n - 2, n - 2) is Cell.END


def test_new_session_initial_state(fake_clock):
    session = new_session(10, seed=0, clock=fake_clock)

    assert session.position == (1, 1)
    assert session.prev_position == (1, 1)
    assert session.phase is Phase.PLAYING
    assert session.timer.status is TimerStatus.NOT_STARTED
    assert session.elapsed() == 0.0
    assert session.moves == 0


def test_new_session_invalid_size():
    with pytest.raises(ValidationError):
        new_session(8)
    with pytest.raises(ValidationError):
        new_session(10.5, seed=0)


# ----- Timer -----

def test_timer_state_lifecycle(fake_clock):
    timer = TimerState(fake_clock)
    assert not timer.started
    assert timer.stop() is None

    timer.start()
    fake_clock.advance(2.5)
    assert timer.status is TimerStatus.RUNNING
    assert timer.elapsed() == pytest.approx(2.5)

    assert timer.stop() == pytest.approx(2.5)
    fake_clock.advance(10)
    assert timer.status is TimerStatus.STOPPED
    assert timer.elapsed() == pytest.approx(2.5)
    # Stopping again keeps the first frozen value
    assert timer.stop() == pytest.approx(2.5)

    timer.clear()
    assert timer.status is TimerStatus.NOT_STARTED
    assert timer.elapsed() == 0.0


def test_rejected_move_changes_nothing(fake_clock):
    session = new_session(21, seed=4, clock=fake_clock)

    outcome = session.apply_move(wall_direction(session))

    assert outcome == REJECTED
    assert session.position == (1, 1)
    assert session.timer.status is TimerStatus.NOT_STARTED
    assert session.phase is Phase.PLAYING
    assert session.moves == 0


def test_first_accepted_move_starts_timer(fake_clock):
    session = new_session(21, seed=4, clock=fake_clock)
    first = route(session)[0]

    outcome = apply_move(session, first)

    assert outcome.kind is Outcome.ACCEPTED
    assert session.timer.status is TimerStatus.RUNNING
    assert session.timer.start_instant == fake_clock.now
    assert session.prev_position == (1, 1)
    assert session.position == outcome.position
    assert session.moves == 1


def test_later_moves_do_not_restart_timer(fake_clock):
    session = new_session(21, seed=4, clock=fake_clock)
    steps = route(session)

    session.apply_move(steps[0])
    started = session.timer.start_instant
    fake_clock.advance(3)
    session.apply_move(steps[1])

    assert session.timer.start_instant == started
    assert session.elapsed() == pytest.approx(3)


def test_win_freezes_timer(fake_clock):
    session = new_session(21, seed=4, clock=fake_clock)
    steps = route(session)

    for direction in steps[:-1]:
        fake_clock.advance(0.5)
        assert session.apply_move(direction).kind is Outcome.ACCEPTED

    fake_clock.advance(0.5)
    outcome = session.apply_move(steps[-1])

    assert outcome == outcome.won(session.end_pos)
    assert session.phase is Phase.WON
    assert session.is_won
    assert session.position == session.end_pos
    assert session.timer.status is TimerStatus.STOPPED

    frozen = session.elapsed()
    assert frozen == pytest.approx(0.5 * (len(steps) - 1))
    fake_clock.advance(60)
    assert session.elapsed() == frozen


def test_moves_after_win_are_rejected(fake_clock):
    session = new_session(11, seed=2, clock=fake_clock)
    for direction in route(session):
        session.apply_move(direction)

    moves = session.moves
    for direction in Direction:
        assert session.apply_move(direction) == REJECTED

    assert session.position == session.end_pos
    assert session.phase is Phase.WON
    assert session.moves == moves


# ----- Reset -----

def play_some(session, count):
    for direction in route(session)[:count]:
        session.apply_move(direction)


@pytest.mark.parametrize("won", [False, True])
def test_reset_keeps_grid_and_clears_state(fake_clock, won):
    session = new_session(21, seed=9, clock=fake_clock)
    grid = session.grid
    cells = list(grid.cells)

    play_some(session, None if won else 3)
    assert session.is_won == won
    before = session.position

    reset(session)

    assert session.phase is Phase.PLAYING
    assert session.position == session.start_pos
    assert session.prev_position == before
    assert session.timer.status is TimerStatus.NOT_STARTED
    assert session.elapsed() == 0.0
    assert session.moves == 0
    assert session.grid is grid
    assert grid.cells == cells


def test_reset_is_idempotent(fake_clock):
    session = new_session(11, seed=1, clock=fake_clock)
    play_some(session, 2)

    session.reset()
    session.reset()

    assert session.position == (1, 1)
    assert session.prev_position == (1, 1)
    assert session.timer.status is TimerStatus.NOT_STARTED


def test_timer_restarts_after_reset(fake_clock):
    session = new_session(11, seed=1, clock=fake_clock)
    play_some(session, 2)
    session.reset()

    fake_clock.advance(5)
    session.apply_move(route(session)[0])

    assert session.timer.status is TimerStatus.RUNNING
    assert session.timer.start_instant == fake_clock.now


# ----- Intents -----

def test_handle_dispatches_intents(fake_clock):
    session = new_session(11, seed=3, clock=fake_clock)
    step = route(session)[0]

    assert session.handle(step).kind is Outcome.ACCEPTED
    assert session.handle(Control.RESET) == RESET_REQUESTED
    assert session.position == (1, 1)
    assert session.handle(Control.QUIT) == QUIT_REQUESTED
    assert session.handle(Control.NEW_MAZE) is Control.NEW_MAZE
    assert session.handle(None) == REJECTED


# ----- New maze -----

def test_new_maze_replaces_session(fake_clock):
    session = new_session(21, seed=5, clock=fake_clock)
    play_some(session, 3)

    fresh = new_maze(session, seed=6)

    assert fresh is not session
    assert session.grid is None
    assert fresh.size == 21
    assert fresh.position == (1, 1)
    assert fresh.timer.status is TimerStatus.NOT_STARTED
    assert fresh.timer.clock is fake_clock
    assert fresh.phase is Phase.PLAYING


def test_new_maze_with_new_size():
    session = new_session(11, seed=5)

    assert new_maze(session, 20).size == 21


def test_new_maze_invalid_size_keeps_session():
    session = new_session(11, seed=5)
    grid = session.grid

    with pytest.raises(ValidationError):
        new_maze(session, 99)
    assert session.grid is grid


# ----- End to end -----

def test_walk_11x11_maze_to_the_end(fake_clock):
    session = new_session(10, seed=2024, clock=fake_clock)
    assert (session.rows, session.cols) == (11, 11)
    assert session.end_pos == (9, 9)

    steps = route(session)
    outcomes = []
    for i, direction in enumerate(steps):
        fake_clock.advance(0.25)
        outcomes.append(session.apply_move(direction))
        if i == 0:
            assert session.timer.status is TimerStatus.RUNNING

    assert REJECTED not in outcomes
    assert all(o.kind is Outcome.ACCEPTED for o in outcomes[:-1])
    assert outcomes[-1] == outcomes[-1].won((9, 9))
    assert session.timer.status is TimerStatus.STOPPED
    assert session.moves == len(steps)


def test_session_from_existing_grid(corridor_grid, fake_clock):
    session = GameSession(corridor_grid, clock=fake_clock)

    assert session.apply_move(Direction.DOWN) == REJECTED
    for direction in (Direction.RIGHT, Direction.RIGHT, Direction.DOWN):
        assert session.apply_move(direction).kind is Outcome.ACCEPTED
    assert session.apply_move(Direction.DOWN).kind is Outcome.WON
    assert "WON" in repr(session)
