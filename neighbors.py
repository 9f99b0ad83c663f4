import random
from typing import List

from errors import NoNeighbors
from lattice import Vec3

DIRS: List[Vec3] = [
    (1, 0, 0),   # +X
    (-1, 0, 0),  # -X
    (0, 1, 0),   # +Y
    (0, -1, 0),  # -Y
    (0, 0, 1),   # +Z (level above)
    (0, 0, -1),  # -Z (level below)
]


def lattice_neighbors(cell: Vec3, upper: Vec3, lower: Vec3 = (0, 0, 0)) -> List[Vec3]:
    """Axis-aligned neighbors of cell inside the inclusive box [lower, upper]."""
    x, y, z = cell
    out = []
    for dx, dy, dz in DIRS:
        nx, ny, nz = x + dx, y + dy, z + dz
        if (lower[0] <= nx <= upper[0]
                and lower[1] <= ny <= upper[1]
                and lower[2] <= nz <= upper[2]):
            out.append((nx, ny, nz))
    return out


def random_neighbor(cell: Vec3, upper: Vec3, rng: random.Random, lower: Vec3 = (0, 0, 0)) -> Vec3:
    candidates = lattice_neighbors(cell, upper, lower)
    if not candidates:
        raise NoNeighbors(cell)
    return rng.choice(candidates)
