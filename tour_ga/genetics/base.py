import operator
from typing import List, Sequence

from ..cities import City


Tour = List[int]


def tour_length(cities: Sequence[City], tour: Sequence[int]) -> float:
    n = len(tour)
    if n < 2:
        return 0.0
    dist = 0.0
    for i in range(n - 1):
        dist += cities[tour[i]].proximity(cities[tour[i + 1]])
    # Closing edge back to the start.
    dist += cities[tour[0]].proximity(cities[tour[n - 1]])
    return float(dist)


def city_index(value, n: int) -> int:
    """Return ``value`` as an int index into ``n`` cities."""
    try:
        index = operator.index(value)
    except TypeError:
        raise ValueError(f"City index must be an integer, got {value!r}.") from None
    if not 0 <= index < n:
        raise ValueError(f"City index {index} out of range for {n} cities.")
    return index


def validate_permutation(order: Sequence[int], n: int) -> Tour:
    """Return a fresh list copy of ``order`` after checking it is a permutation of ``range(n)``."""
    tour = [city_index(c, n) for c in order]
    if len(tour) != n:
        raise ValueError(f"Tour has {len(tour)} entries but there are {n} cities.")
    if len(set(tour)) != n:
        raise ValueError(f"Tour is not a permutation of 0..{n - 1}: {tour}")
    return tour
