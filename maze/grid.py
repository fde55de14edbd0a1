"""
Maze grid - owned flat buffer of cells with bounds-checked access
"""

from enum import Enum

from utils.constants import WALL_CHAR, PATH_CHAR, START_CHAR, END_CHAR, PLAYER_CHAR


class Cell(Enum):
    """Cell contents"""
    WALL = WALL_CHAR
    PATH = PATH_CHAR
    START = START_CHAR
    END = END_CHAR

    @property
    def is_open(self):
        return self is not Cell.WALL


class MazeGrid:
    """
    Rectangular block grid stored row-major in a flat list.
    Every access goes through idx(), which rejects coordinates
    outside the grid.
    """
    def __init__(self, rows, cols):
        self.rows = rows
        self.cols = cols
        # Initialize every cell as wall
        self.cells = [Cell.WALL] * (rows * cols)

    @property
    def size(self):
        """Side length N of a square grid"""
        return self.rows

    @property
    def start_pos(self):
        return (1, 1)

    @property
    def end_pos(self):
        return (self.rows - 2, self.cols - 2)

    def idx(self, row, col):
        """Convert 2D coordinates to 1D index"""
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return row * self.cols + col

    def in_bounds(self, row, col):
        """Check if coordinates are within grid bounds"""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_interior(self, row, col):
        """Check if coordinates are strictly inside the outer wall ring"""
        return 0 < row < self.rows - 1 and 0 < col < self.cols - 1

    def get(self, row, col):
        return self.cells[self.idx(row, col)]

    def set(self, row, col, cell):
        self.cells[self.idx(row, col)] = cell

    def __getitem__(self, pos):
        return self.get(*pos)

    def __setitem__(self, pos, cell):
        self.set(pos[0], pos[1], cell)

    def is_open(self, row, col):
        """True for in-bounds non-wall cells; never raises"""
        return self.in_bounds(row, col) and self.cells[row * self.cols + col].is_open

    def open_cells(self):
        """Yield (row, col) of every non-wall cell"""
        for row in range(self.rows):
            for col in range(self.cols):
                if self.cells[row * self.cols + col].is_open:
                    yield (row, col)

    def find(self, cell):
        """List positions holding `cell`"""
        return [
            (i // self.cols, i % self.cols)
            for i, c in enumerate(self.cells) if c is cell
        ]

    def to_text(self, player=None):
        """Render the grid as text lines, optionally marking the player"""
        lines = []
        for row in range(self.rows):
            chars = []
            for col in range(self.cols):
                if player == (row, col):
                    chars.append(PLAYER_CHAR)
                else:
                    chars.append(self.cells[row * self.cols + col].value)
            lines.append(''.join(chars))
        return '\n'.join(lines)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"MazeGrid({self.rows}x{self.cols})"


def allocate(n):
    """Allocate an n x n grid filled with walls (n is validated by the caller)"""
    return MazeGrid(n, n)
