import os

# Headless pygame for renderer and window tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from maze.grid import Cell, MazeGrid


class FakeClock:
    """Manually advanced monotonic clock"""
    def __init__(self, start=100.0):
        self.now = start

    def advance(self, seconds):
        self.now += seconds

    def __call__(self):
        return self.now


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def corridor_grid():
    """
    5x5 grid with one bent corridor:

        #####
        #S  #
        ### #
        ###E#
        #####
    """
    grid = MazeGrid(5, 5)
    grid.set(1, 1, Cell.START)
    grid.set(1, 2, Cell.PATH)
    grid.set(1, 3, Cell.PATH)
    grid.set(2, 3, Cell.PATH)
    grid.set(3, 3, Cell.END)
    return grid
