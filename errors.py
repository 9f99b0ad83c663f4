from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from lattice import Vec3
    from maze_gen import Maze


class MazeError(Exception):
    """Base class for everything the maze generator raises."""


class InvalidAdjacency(MazeError, ValueError):
    def __init__(self, a: "Vec3", b: "Vec3", distance: int):
        self.a = a
        self.b = b
        self.distance = distance
        super().__init__(
            f"cells {a} and {b} have Manhattan distance {distance}, but only 1 allowed"
        )


class NoNeighbors(MazeError, RuntimeError):
    def __init__(self, cell: "Vec3"):
        self.cell = cell
        super().__init__(f"no neighboring cells for {cell}")


class StepLimitExceeded(MazeError):
    """
    Raised when the random walks run out of steps before every cell joined
    the tree.

    The partially built maze is attached as ``maze``: its passages still form
    a tree, but ``free_cells`` cells are walled off from it.
    """

    def __init__(self, steps: int, free_cells: int, maze: Optional["Maze"] = None):
        self.steps = steps
        self.free_cells = free_cells
        self.maze = maze
        super().__init__(
            f"step limit reached after {steps} steps with {free_cells} cells unconnected"
        )
