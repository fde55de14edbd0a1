"""
Helper utility functions for Maze Runner
"""

from utils.constants import CELL_SIZE, MIN_CELL_SIZE, MAX_BOARD_PX


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def format_elapsed(seconds):
    """Format seconds with two decimals, e.g. 12.34s"""
    return f"{seconds:.2f}s"


def board_cell_size(cells):
    """Pixel size of one cell so a board of `cells` fits on screen"""
    return clamp(MAX_BOARD_PX // cells, MIN_CELL_SIZE, CELL_SIZE)
