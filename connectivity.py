from collections import deque
from typing import List, Set

import numpy as np

from lattice import Vec3
from maze_gen import Maze
from neighbors import lattice_neighbors


def open_neighbors(maze: Maze, cell: Vec3) -> List[Vec3]:
    """Cells reachable from cell in one move, i.e. with no wall in between."""
    upper = (maze.width - 1, maze.height - 1, maze.levels - 1)
    return [n for n in lattice_neighbors(cell, upper) if not maze.is_wall(cell, n)]


def reachable_cells(maze: Maze, start: Vec3 = (0, 0, 0)) -> Set[Vec3]:
    seen = np.zeros((maze.levels, maze.height, maze.width), dtype=bool)
    sx, sy, sz = start
    seen[sz, sy, sx] = True
    q = deque([start])
    while q:
        cur = q.popleft()
        for nxt in open_neighbors(maze, cur):
            nx, ny, nz = nxt
            if not seen[nz, ny, nx]:
                seen[nz, ny, nx] = True
                q.append(nxt)
    return {(int(x), int(y), int(z)) for z, y, x in np.argwhere(seen)}


def passage_count(maze: Maze) -> int:
    """Number of open walls between cells (the border can never be open)."""
    count = 0
    for x, y, z in maze.cells():
        if x + 1 < maze.width and not maze.is_wall((x, y, z), (x + 1, y, z)):
            count += 1
        if y + 1 < maze.height and not maze.is_wall((x, y, z), (x, y + 1, z)):
            count += 1
        if z + 1 < maze.levels and not maze.is_wall((x, y, z), (x, y, z + 1)):
            count += 1
    return count


def is_perfect(maze: Maze) -> bool:
    """A perfect maze is a spanning tree: everything connected, no loops."""
    return (
        len(reachable_cells(maze)) == maze.cell_count
        and passage_count(maze) == maze.cell_count - 1
    )
