"""
Maze Module - block grid, recursive backtracker and maze queries
"""

from .grid import Cell, MazeGrid, allocate
from .generator import gen_recursive_backtracker, carve, mark_endpoints, generate_maze

__all__ = ['Cell', 'MazeGrid', 'allocate',
           'gen_recursive_backtracker', 'carve', 'mark_endpoints', 'generate_maze']
