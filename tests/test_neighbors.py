import random
from collections import Counter

import pytest

from errors import NoNeighbors
from neighbors import lattice_neighbors, random_neighbor


def test_interior_has_six():
    assert len(lattice_neighbors((1, 1, 1), (2, 2, 2))) == 6


def test_corner_and_flat_bounds():
    assert sorted(lattice_neighbors((0, 0, 0), (2, 2, 2))) == [(0, 0, 1), (0, 1, 0), (1, 0, 0)]
    # single level: no vertical moves
    assert sorted(lattice_neighbors((1, 1, 0), (2, 2, 0))) == [(0, 1, 0), (1, 0, 0), (1, 2, 0), (2, 1, 0)]


def test_lower_bound_respected():
    out = lattice_neighbors((1, 1, 1), (3, 3, 3), lower=(1, 1, 1))
    assert sorted(out) == [(1, 1, 2), (1, 2, 1), (2, 1, 1)]


def test_single_cell_has_no_neighbors(rng):
    with pytest.raises(NoNeighbors) as err:
        random_neighbor((0, 0, 0), (0, 0, 0), rng)
    assert err.value.cell == (0, 0, 0)


def test_random_neighbor_is_adjacent_and_roughly_uniform():
    rng = random.Random(7)
    counts = Counter(random_neighbor((1, 1, 1), (2, 2, 2), rng) for _ in range(6000))
    assert set(counts) == set(lattice_neighbors((1, 1, 1), (2, 2, 2)))
    assert min(counts.values()) > 800


def test_seeded_sequence_repeats():
    a = [random_neighbor((1, 1, 0), (3, 3, 0), random.Random(99)) for _ in range(3)]
    b = [random_neighbor((1, 1, 0), (3, 3, 0), random.Random(99)) for _ in range(3)]
    assert a == b
