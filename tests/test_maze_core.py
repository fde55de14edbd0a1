from maze.grid import Cell, allocate
from maze.maze_core import (
    neighbors_open, bfs_shortest_path, path_to_moves, connected_cells,
    count_passages, is_perfect, dead_ends
)


def test_neighbors_open(corridor_grid):
    assert neighbors_open(corridor_grid, 1, 1) == [(1, 2)]
    assert sorted(neighbors_open(corridor_grid, 1, 3)) == [(1, 2), (2, 3)]


def test_bfs_shortest_path(corridor_grid):
    path = bfs_shortest_path(corridor_grid, (1, 1), (3, 3))

    assert path == [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)]
    assert path_to_moves(path) == [(0, 1), (0, 1), (1, 0), (1, 0)]


def test_bfs_same_cell_and_unreachable(corridor_grid):
    assert bfs_shortest_path(corridor_grid, (1, 1), (1, 1)) == [(1, 1)]

    corridor_grid.set(2, 3, Cell.WALL)
    assert bfs_shortest_path(corridor_grid, (1, 1), (3, 3)) == []


def test_corridor_is_perfect(corridor_grid):
    assert count_passages(corridor_grid) == 4
    assert connected_cells(corridor_grid, (1, 1)) == set(corridor_grid.open_cells())
    assert is_perfect(corridor_grid)
    assert sorted(dead_ends(corridor_grid)) == [(1, 1), (3, 3)]


def test_loop_is_not_perfect():
    grid = allocate(5)
    for r in range(1, 4):
        for c in range(1, 4):
            if (r, c) != (2, 2):
                grid.set(r, c, Cell.PATH)

    assert count_passages(grid) == 8
    assert not is_perfect(grid)


def test_disconnected_is_not_perfect(corridor_grid):
    corridor_grid.set(2, 3, Cell.WALL)

    assert not is_perfect(corridor_grid)


def test_all_walls_is_not_perfect():
    assert not is_perfect(allocate(11))
