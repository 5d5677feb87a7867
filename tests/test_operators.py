import random

import pytest

from tour_ga.cities import City
from tour_ga.genetics import (
    invert_segment,
    nearest_neighbor_refine,
    random_bounds,
    random_permutation,
    tour_length,
    validate_permutation,
)


def test_random_permutation_swaps_each_position(fixed_random):
    # [0,1,2] -> swap(0,2) [2,1,0] -> swap(1,0) [1,2,0] -> swap(2,1) [1,0,2]
    assert random_permutation(3, fixed_random([2, 0, 1])) == [1, 0, 2]


def test_random_permutation_is_permutation():
    rng = random.Random(11)
    for n in (0, 1, 2, 17, 100):
        assert sorted(random_permutation(n, rng)) == list(range(n))


def test_random_bounds_resamples_and_orders(fixed_random):
    assert random_bounds(5, fixed_random([3, 3, 1])) == (1, 3)
    assert random_bounds(5, fixed_random([0, 4])) == (0, 4)


def test_random_bounds_needs_two_positions():
    with pytest.raises(ValueError):
        random_bounds(1, random.Random(0))


def test_invert_segment_reverses_closed_range():
    tour = [0, 1, 2, 3, 4]
    assert invert_segment(tour, 1, 3) == [0, 3, 2, 1, 4]
    assert invert_segment(tour, 0, 4) == [4, 3, 2, 1, 0]
    assert invert_segment(tour, 3, 4) == [0, 1, 2, 4, 3]
    assert tour == [0, 1, 2, 3, 4]


def test_invert_segment_is_self_inverse():
    tour = [5, 2, 7, 0, 1, 3, 6, 4]
    assert invert_segment(invert_segment(tour, 2, 6), 2, 6) == tour


def test_nearest_neighbor_refine_follows_closest_city():
    cities = [City(0.0, 0.0), City(3.0, 0.0), City(1.0, 0.0), City(2.0, 0.0)]
    tour = [0, 1, 2, 3]
    assert nearest_neighbor_refine(tour, cities) == [0, 2, 3, 1]
    assert tour == [0, 2, 3, 1]
    assert tour_length(cities, tour) == pytest.approx(6.0)


def test_nearest_neighbor_refine_keeps_first_on_ties():
    cities = [City(0.0, 0.0), City(-1.0, 0.0), City(1.0, 0.0)]
    assert nearest_neighbor_refine([0, 1, 2], cities) == [0, 1, 2]


def test_tour_length_degenerate_tours(square):
    assert tour_length(square, []) == 0.0
    assert tour_length(square, [2]) == 0.0
    assert tour_length(square, [0, 2]) == pytest.approx(2 * 2 ** 0.5)


def test_validate_permutation_copies_and_rejects():
    source = [2, 0, 1]
    copied = validate_permutation(source, 3)
    assert copied == source and copied is not source
    with pytest.raises(ValueError):
        validate_permutation([0, 1], 3)
    with pytest.raises(ValueError):
        validate_permutation([0, 0, 1], 3)
    with pytest.raises(ValueError):
        validate_permutation([0, 1, 3], 3)
