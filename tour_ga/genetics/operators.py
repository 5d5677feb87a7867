import random
from typing import Sequence, Tuple

from ..cities import City
from .base import Tour


def random_permutation(n: int, rng: random.Random) -> Tour:
    # Each position swaps with any position, itself included. Not an unbiased
    # Fisher-Yates shuffle.
    tour = list(range(n))
    for i in range(n):
        j = rng.randrange(n)
        tour[i], tour[j] = tour[j], tour[i]
    return tour


def nearest_neighbor_refine(tour: Tour, cities: Sequence[City]) -> Tour:
    """Greedily pull the closest remaining city into each next position, in place."""
    n = len(tour)
    for i in range(1, n):
        current = cities[tour[i - 1]]
        best = i
        best_dist = current.proximity(cities[tour[i]])
        for j in range(i + 1, n):
            dist = current.proximity(cities[tour[j]])
            if dist < best_dist:
                best = j
                best_dist = dist
        tour[i], tour[best] = tour[best], tour[i]
    return tour


def random_bounds(n: int, rng: random.Random) -> Tuple[int, int]:
    if n < 2:
        raise ValueError(f"Need at least two positions to pick bounds, got {n}.")
    lower = rng.randrange(n)
    upper = rng.randrange(n)
    while upper == lower:
        upper = rng.randrange(n)
    if lower > upper:
        lower, upper = upper, lower
    return lower, upper


def invert_segment(tour: Sequence[int], lower: int, upper: int) -> Tour:
    """Copy of ``tour`` with the closed slice ``[lower, upper]`` reversed."""
    segment = list(tour[lower : upper + 1])
    segment.reverse()
    return list(tour[:lower]) + segment + list(tour[upper + 1 :])
