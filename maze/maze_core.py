"""
Core maze queries - neighbours, pathfinding and structure checks
"""

from collections import deque

# Unit steps (dr, dc)
STEPS = [
    (-1, 0),    # up
    (0, 1),     # right
    (1, 0),     # down
    (0, -1),    # left
]


def neighbors_open(grid, row, col):
    """Get list of open cells one step away"""
    res = []
    for dr, dc in STEPS:
        nr, nc = row + dr, col + dc
        if grid.is_open(nr, nc):
            res.append((nr, nc))
    return res


# ========== PATHFINDING ==========

def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def bfs_shortest_path(grid, start, goal):
    """BFS shortest path finder, [] when goal is unreachable"""
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        r, c = q.popleft()
        for n in neighbors_open(grid, r, c):
            if n not in prev:
                prev[n] = (r, c)
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []


def path_to_moves(path):
    """Convert a cell path to the (dr, dc) steps that walk it"""
    return [(b[0] - a[0], b[1] - a[1]) for a, b in zip(path, path[1:])]


# ========== STRUCTURE ==========

def connected_cells(grid, start):
    """Set of open cells reachable from start"""
    q = deque([start])
    seen = {start}

    while q:
        r, c = q.popleft()
        for n in neighbors_open(grid, r, c):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def count_passages(grid):
    """Count adjacent open-open pairs (each pair once)"""
    total = 0
    for r, c in grid.open_cells():
        if grid.is_open(r, c + 1):
            total += 1
        if grid.is_open(r + 1, c):
            total += 1
    return total


def is_perfect(grid):
    """
    A maze is perfect when its open cells form a spanning tree:
    one connected component with exactly (cells - 1) passages.
    """
    cells = list(grid.open_cells())
    if not cells:
        return False
    if len(connected_cells(grid, cells[0])) != len(cells):
        return False
    return count_passages(grid) == len(cells) - 1


def dead_ends(grid):
    """Open cells with a single open neighbour"""
    return [(r, c) for r, c in grid.open_cells() if len(neighbors_open(grid, r, c)) == 1]
