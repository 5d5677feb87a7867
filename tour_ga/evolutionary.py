import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .cities import City
from .evaluation import summarize_population
from .genetics.chromosome import Chromosome


logger = logging.getLogger(__name__)


@dataclass
class EvolutionConfig:
    population_size: int = 40
    elite_fraction: float = 0.1
    greedy_fraction: float = 0.0
    generations: int = 500
    log_interval: int = 50
    random_seed: int = 123


class EvolutionarySearch:
    def __init__(
        self,
        config: EvolutionConfig,
        cities: Sequence[City],
        rng: Optional[random.Random] = None,
    ):
        if config.population_size < 1:
            raise ValueError("Population size must be at least 1.")
        if not 0.0 < config.elite_fraction <= 1.0:
            raise ValueError("Elite fraction must be in (0, 1].")
        if not 0.0 <= config.greedy_fraction <= 1.0:
            raise ValueError("Greedy fraction must be in [0, 1].")
        if not cities:
            raise ValueError("Need at least one city to evolve a tour.")
        self.cfg = config
        self.cities = cities
        self.rng = rng or random.Random(config.random_seed)
        greedy_count = int(config.greedy_fraction * config.population_size)
        self.population: List[Chromosome] = [
            Chromosome.random(cities, rng=self._child_rng(), greedy=i < greedy_count)
            for i in range(config.population_size)
        ]
        Chromosome.sort_by_cost(self.population)
        self.generation = 0
        self.history: List[float] = [self.best.cost]

    @property
    def elite_count(self) -> int:
        return max(1, int(self.cfg.elite_fraction * len(self.population)))

    @property
    def best(self) -> Chromosome:
        return min(self.population, key=lambda c: c.cost)

    def _child_rng(self) -> random.Random:
        return random.Random(self.rng.getrandbits(32))

    def step(self) -> None:
        previous_best = self.history[-1]
        # Each individual tries one inversion; only a strictly cheaper offspring survives.
        for i, parent in enumerate(self.population):
            child = parent.spawn(parent.mutate())
            if child.cost < parent.cost:
                self.population[i] = child
        Chromosome.sort_by_cost(self.population)

        size = len(self.population)
        elites = self.population[: self.elite_count]
        replaced = min(self.elite_count, size - self.elite_count)
        for slot in range(size - replaced, size):
            elite = self.rng.choice(elites)
            self.population[slot] = elite.spawn(elite.mutate())
        Chromosome.sort_by_cost(self.population)

        self.generation += 1
        best_cost = self.population[0].cost
        self.history.append(best_cost)
        if best_cost < previous_best:
            logger.debug("gen %d: best improved %.4f -> %.4f", self.generation, previous_best, best_cost)

    def run(self, generations: Optional[int] = None) -> Chromosome:
        if generations is None:
            generations = self.cfg.generations
        for _ in range(generations):
            self.step()
            if self.cfg.log_interval and self.generation % self.cfg.log_interval == 0:
                self._log_progress()
        self._log_progress()
        return self.best

    def _log_progress(self) -> None:
        stats = summarize_population(self.population)
        logger.info(
            "gen %d: best=%.4f mean=%.4f worst=%.4f unique=%d",
            self.generation,
            stats.best,
            stats.mean,
            stats.worst,
            stats.unique,
        )
