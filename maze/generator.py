"""
Maze generation - randomized recursive backtracker on an odd block grid
"""

import random

from maze.grid import Cell, allocate
from utils.constants import CARVE_DIRS, START_ROW, START_COL


def _shuffled_dirs(rng):
    """Fresh iterator over the four carving strides in random order"""
    dirs = list(CARVE_DIRS)
    rng.shuffle(dirs)
    return iter(dirs)


# ========== GENERATOR: RECURSIVE BACKTRACKER ==========

def gen_recursive_backtracker(grid, start_row=START_ROW, start_col=START_COL, rng=None):
    """
    Depth-first carving with an explicit stack - animated generator

    Each stack frame is (row, col, directions) where `directions` is an
    iterator over that cell's shuffled strides. Resuming the iterator after
    a child frame is popped continues with the next untried direction, the
    same order a recursive version would follow.

    Yields a step dict after every carved cell and a final dict with
    done=True once the whole interior is carved.
    """
    if rng is None:
        rng = random.Random()

    grid.set(start_row, start_col, Cell.PATH)
    stack = [(start_row, start_col, _shuffled_dirs(rng))]

    yield {"grid": grid, "current": (start_row, start_col), "carved": None, "depth": 1, "done": False}

    while stack:
        r, c, dirs = stack[-1]

        for dr, dc in dirs:
            nr, nc = r + dr, c + dc
            if grid.is_interior(nr, nc) and grid.get(nr, nc) is Cell.WALL:
                wall = (r + dr // 2, c + dc // 2)
                grid.set(wall[0], wall[1], Cell.PATH)
                grid.set(nr, nc, Cell.PATH)
                stack.append((nr, nc, _shuffled_dirs(rng)))

                yield {"grid": grid, "current": (nr, nc), "carved": (wall, (nr, nc)), "depth": len(stack), "done": False}
                break
        else:
            # All four directions tried: backtrack
            stack.pop()

    yield {"grid": grid, "current": (start_row, start_col), "carved": None, "depth": 0, "done": True}


def carve(grid, start_row=START_ROW, start_col=START_COL, rng=None):
    """Carve a perfect maze into `grid` in place"""
    for _ in gen_recursive_backtracker(grid, start_row, start_col, rng):
        pass


def mark_endpoints(grid):
    """Place Start and End once carving is complete"""
    grid.set(*grid.start_pos, Cell.START)
    grid.set(*grid.end_pos, Cell.END)


def generate_maze(n, seed=None, rng=None):
    """
    Allocate, carve and mark an n x n maze

    Args:
        n: Odd side length (already validated)
        seed: Optional seed for a reproducible maze
        rng: Optional random.Random to draw from instead of `seed`

    Returns:
        MazeGrid with Start at (1, 1) and End at (n-2, n-2)
    """
    if rng is None:
        rng = random.Random(seed)

    grid = allocate(n)
    carve(grid, rng=rng)
    mark_endpoints(grid)
    return grid
