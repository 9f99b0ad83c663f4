import logging
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from errors import MazeError, StepLimitExceeded
from lattice import Vec3, empty_wall_grid, wall_between
from neighbors import random_neighbor

# grid[bz][by][bx] = 1 wall, 0 passage (layout documented in lattice.py)
# We carve a "perfect maze" with Wilson's algorithm: loop-erased random walks
# that each end on the growing spanning tree.

logger = logging.getLogger(__name__)

UNVISITED = 0
IN_WALK = 1
IN_TREE = 2

DEFAULT_STEP_LIMIT = 1_000_000

Grid = List[List[List[int]]]


@dataclass(frozen=True)
class Maze:
    grid: Tuple[Tuple[Tuple[int, ...], ...], ...]
    width: int
    height: int
    levels: int

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[Sequence[int]]]) -> "Maze":
        """Freezes a raw wall grid, reading the dimensions off its first floor slice."""
        frozen = tuple(tuple(tuple(int(v) for v in row) for row in rows) for rows in grid)
        return cls(
            grid=frozen,
            width=len(frozen[0][0]),
            height=len(frozen[0]),
            levels=(len(frozen) - 1) // 2,
        )

    @property
    def cell_count(self) -> int:
        return self.width * self.height * self.levels

    def in_bounds(self, cell: Vec3) -> bool:
        x, y, z = cell
        return 0 <= x < self.width and 0 <= y < self.height and 0 <= z < self.levels

    def cells(self) -> Iterator[Vec3]:
        """All cells, z most significant."""
        for z in range(self.levels):
            for y in range(self.height):
                for x in range(self.width):
                    yield (x, y, z)

    def is_wall(self, a: Vec3, b: Vec3) -> bool:
        bz, by, bx = wall_between(a, b)
        return self.grid[bz][by][bx] == 1


def is_wall(maze: Maze, a: Vec3, b: Vec3) -> bool:
    return maze.is_wall(a, b)


def clamp_dimensions(width: int, height: int, levels: int) -> Tuple[int, int, int]:
    # a single row or column per level leaves too little room for the walks
    return max(2, width), max(2, height), max(1, levels)


def wilson_walls(
    width: int,
    height: int,
    levels: int,
    step_limit: int,
    rng: random.Random,
) -> Tuple[Grid, int, int]:
    """
    Returns:
      grid: wall grid with the spanning tree's passages cleared
      steps: random-walk steps taken
      free_cells: cells left outside the tree (0 unless the step limit hit)
    """
    grid = empty_wall_grid(width, height, levels)
    cells = np.zeros((levels, height, width), dtype=np.uint8)
    flat = cells.reshape(-1)
    upper = (width - 1, height - 1, levels - 1)

    cells[0, 0, 0] = IN_TREE
    free_cells = width * height * levels - 1
    cursor = 0
    steps = 0

    while free_cells > 0 and steps < step_limit:
        while cursor < flat.size and flat[cursor] != UNVISITED:
            cursor += 1
        if cursor == flat.size:
            raise MazeError(f"no unvisited cell left although {free_cells} cells are free")

        z, rem = divmod(cursor, width * height)
        y, x = divmod(rem, width)
        cur = (x, y, z)
        cells[z, y, x] = IN_WALK
        walk = [cur]
        index = {cur: 0}

        while steps < step_limit:
            cur = random_neighbor(cur, upper, rng)
            steps += 1
            x, y, z = cur
            state = cells[z, y, x]
            if state == IN_TREE:
                break
            if state == IN_WALK:
                # erase the loop, keeping the revisited cell on top
                keep = index[cur] + 1
                for bx, by, bz in walk[keep:]:
                    cells[bz, by, bx] = UNVISITED
                    del index[(bx, by, bz)]
                del walk[keep:]
            else:
                cells[z, y, x] = IN_WALK
                index[cur] = len(walk)
                walk.append(cur)
        else:
            # out of steps mid-walk; drop it so the partial maze stays a forest
            for bx, by, bz in walk:
                cells[bz, by, bx] = UNVISITED
            break

        walk.append(cur)
        for prev, nxt in zip(walk, walk[1:]):
            px, py, pz = prev
            cells[pz, py, px] = IN_TREE
            free_cells -= 1
            bz, by, bx = wall_between(prev, nxt)
            grid[bz][by][bx] = 0

    return grid, steps, free_cells


def generate_maze(
    width: int = 20,
    height: int = 20,
    levels: int = 1,
    step_limit: int = DEFAULT_STEP_LIMIT,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Maze:
    """
    Builds a uniformly sampled spanning-tree maze over width x height x levels cells.

    Pass either a ready rng or a seed; the same seed always yields the same maze.
    Raises StepLimitExceeded (with the partial maze attached) if step_limit random
    walk steps were not enough to connect every cell.
    """
    width, height, levels = clamp_dimensions(width, height, levels)
    if rng is None:
        rng = random.Random(seed)

    logger.debug("generating %dx%dx%d maze (step limit %d)", width, height, levels, step_limit)
    grid, steps, free_cells = wilson_walls(width, height, levels, step_limit, rng)
    maze = Maze.from_grid(grid)

    if free_cells > 0:
        logger.warning("step limit reached: %d cells unconnected after %d steps", free_cells, steps)
        raise StepLimitExceeded(steps, free_cells, maze=maze)

    logger.debug("maze complete after %d steps", steps)
    return maze
