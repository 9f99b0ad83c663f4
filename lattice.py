from typing import List, Tuple

from errors import InvalidAdjacency

# grid[bz][by][bx] = 1 wall, 0 passage
#   bz even: floor/ceiling slice, height rows of width entries (trapdoors)
#   bz odd:  wall slice of one level, 2*height+1 rows
#     by even: walls between rows y-1 and y, width entries
#     by odd:  walls between columns of row (by-1)/2, width+1 entries

Vec3 = Tuple[int, int, int]
WallAddr = Tuple[int, int, int]


def manhattan(a: Vec3, b: Vec3) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) + abs(a[2] - b[2])


def wall_between(a: Vec3, b: Vec3) -> WallAddr:
    """
    Returns the (bz, by, bx) address of the wall separating two adjacent cells.
    The result does not depend on argument order.
    """
    d = manhattan(a, b)
    if d != 1:
        raise InvalidAdjacency(a, b, d)
    x1, y1, z1 = a
    x2, y2, z2 = b
    if x1 != x2:
        return 2 * z1 + 1, 2 * y1 + 1, max(x1, x2)
    if y1 != y2:
        return 2 * z1 + 1, 2 * max(y1, y2), x1
    return 2 * max(z1, z2), y1, x1


def wall_grid_shape(width: int, height: int, levels: int) -> List[List[int]]:
    """Row lengths of every slice, i.e. shape[bz][by] == len(grid[bz][by])."""
    shape = []
    for bz in range(2 * levels + 1):
        if bz % 2 == 0:
            shape.append([width] * height)
        else:
            shape.append([width if by % 2 == 0 else width + 1 for by in range(2 * height + 1)])
    return shape


def empty_wall_grid(width: int, height: int, levels: int) -> List[List[List[int]]]:
    return [[[1] * row for row in rows] for rows in wall_grid_shape(width, height, levels)]
