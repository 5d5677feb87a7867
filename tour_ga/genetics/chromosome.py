from random import Random
from typing import List, MutableSequence, Optional, Sequence

from ..cities import City
from .base import Tour, city_index, tour_length, validate_permutation
from .operators import invert_segment, nearest_neighbor_refine, random_bounds, random_permutation


class Chromosome:
    """
    One candidate tour: a permutation of city indices plus its cached cost.

    The order list is owned by the instance. Offspring are built from copies,
    and every write to the order recomputes the cost.
    """

    def __init__(
        self,
        cities: Sequence[City],
        order: Sequence[int],
        rng: Optional[Random] = None,
    ):
        self.cities = cities
        self.rng = rng or Random()
        self._order: Tour = validate_permutation(order, len(cities))
        self.cost = 0.0
        self.calculate_cost(cities)

    @staticmethod
    def random(
        cities: Sequence[City], rng: Optional[Random] = None, greedy: bool = False
    ) -> "Chromosome":
        rng = rng or Random()
        order = random_permutation(len(cities), rng)
        if greedy:
            nearest_neighbor_refine(order, cities)
        return Chromosome(cities, order, rng=rng)

    @staticmethod
    def from_order(
        cities: Sequence[City], order: Sequence[int], rng: Optional[Random] = None
    ) -> "Chromosome":
        return Chromosome(cities, order, rng=rng)

    def spawn(self, order: Sequence[int]) -> "Chromosome":
        """Offspring over the same cities with its own random source."""
        return Chromosome(self.cities, order, rng=Random(self.rng.getrandbits(32)))

    def calculate_cost(self, cities: Optional[Sequence[City]] = None) -> float:
        # Always measured on the cities this chromosome was built with.
        if cities is not None and cities is not self.cities and list(cities) != list(self.cities):
            raise ValueError("Cost must be computed on the cities this chromosome was built with.")
        self.cost = tour_length(self.cities, self._order)
        return self.cost

    def get_cost(self) -> float:
        return self.cost

    @property
    def order(self) -> Tour:
        return self._order[:]

    def get_city(self, i: int) -> int:
        self._check_position(i)
        return self._order[i]

    def set_cities(self, order: Sequence[int]) -> None:
        self._order = validate_permutation(order, len(self._order))
        self.calculate_cost()

    def set_city(self, i: int, value: int) -> None:
        # A single write can leave a duplicate until the matching write lands,
        # so only the value itself is checked here.
        self._check_position(i)
        self._order[i] = city_index(value, len(self._order))
        self.calculate_cost()

    def mutate(self) -> Tour:
        """
        Reverse a random closed segment ``[x1, x2]`` of the order.

        Returns the inverted order as a new list and leaves this chromosome
        unchanged. Tours with fewer than two cities come back as a plain copy.
        """
        if len(self._order) <= 1:
            return self._order[:]
        lower, upper = random_bounds(len(self._order), self.rng)
        return invert_segment(self._order, lower, upper)

    @staticmethod
    def sort_by_cost(chromosomes: MutableSequence["Chromosome"], k: Optional[int] = None) -> None:
        if k is None:
            k = len(chromosomes)
        if not 0 <= k <= len(chromosomes):
            raise ValueError(f"Cannot sort {k} of {len(chromosomes)} chromosomes.")
        chromosomes[:k] = sorted(chromosomes[:k], key=lambda c: c.cost)

    @property
    def signature(self) -> str:
        """
        Canonical form of the cycle, shared by all rotations and both directions.

        The order is rotated to start at its smallest index, so a half-edited
        order left by ``set_city`` still gets a signature.
        """
        n = len(self._order)
        if n == 0:
            return ""
        start = self._order.index(min(self._order))
        forward: List[int] = self._order[start:] + self._order[:start]
        backward = [forward[0]] + forward[:0:-1]
        return "-".join(str(c) for c in min(forward, backward))

    def _check_position(self, i: int) -> None:
        if not 0 <= i < len(self._order):
            raise IndexError(f"Position {i} out of range for a tour of {len(self._order)} cities.")

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"Chromosome(cities={len(self._order)}, cost={self.cost:.2f})"
