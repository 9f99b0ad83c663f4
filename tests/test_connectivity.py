from connectivity import is_perfect, open_neighbors, passage_count, reachable_cells
from lattice import empty_wall_grid, wall_between
from maze_gen import Maze


def carve(grid, *pairs):
    for a, b in pairs:
        bz, by, bx = wall_between(a, b)
        grid[bz][by][bx] = 0
    return Maze.from_grid(grid)


def test_all_walls():
    maze = Maze.from_grid(empty_wall_grid(3, 2, 1))
    assert passage_count(maze) == 0
    assert reachable_cells(maze) == {(0, 0, 0)}
    assert not is_perfect(maze)


def test_open_neighbors_follow_passages():
    maze = carve(empty_wall_grid(2, 2, 2), ((0, 0, 0), (0, 0, 1)), ((0, 0, 0), (1, 0, 0)))
    assert sorted(open_neighbors(maze, (0, 0, 0))) == [(0, 0, 1), (1, 0, 0)]
    assert open_neighbors(maze, (1, 1, 1)) == []


def test_cycle_is_not_perfect():
    maze = carve(
        empty_wall_grid(2, 2, 1),
        ((0, 0, 0), (1, 0, 0)),
        ((0, 1, 0), (1, 1, 0)),
        ((0, 0, 0), (0, 1, 0)),
        ((1, 0, 0), (1, 1, 0)),
    )
    assert len(reachable_cells(maze)) == 4
    assert passage_count(maze) == 4
    assert not is_perfect(maze)


def test_hand_built_tree():
    maze = carve(
        empty_wall_grid(2, 1, 2),
        ((0, 0, 0), (1, 0, 0)),
        ((1, 0, 0), (1, 0, 1)),
        ((1, 0, 1), (0, 0, 1)),
    )
    assert is_perfect(maze)
    assert reachable_cells(maze, (0, 0, 1)) == set(maze.cells())
