from .base import Tour, city_index, tour_length, validate_permutation
from .chromosome import Chromosome
from .operators import (
    invert_segment,
    nearest_neighbor_refine,
    random_bounds,
    random_permutation,
)

__all__ = [
    "Tour",
    "tour_length",
    "city_index",
    "validate_permutation",
    "Chromosome",
    "invert_segment",
    "nearest_neighbor_refine",
    "random_bounds",
    "random_permutation",
]
