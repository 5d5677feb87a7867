from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .genetics.chromosome import Chromosome


@dataclass
class PopulationStats:
    best: float
    mean: float
    worst: float
    unique: int

    @property
    def spread(self) -> float:
        if not np.isfinite(self.best) or not np.isfinite(self.worst):
            return float("inf")
        return self.worst - self.best


def summarize_population(chromosomes: Sequence[Chromosome]) -> PopulationStats:
    if not chromosomes:
        return PopulationStats(best=float("inf"), mean=float("inf"), worst=float("inf"), unique=0)
    costs = np.array([c.cost for c in chromosomes], dtype=float)
    unique = len({c.signature for c in chromosomes})
    return PopulationStats(
        best=float(costs.min()),
        mean=float(costs.mean()),
        worst=float(costs.max()),
        unique=unique,
    )
