import logging

from tour_ga.cities import random_cities
from tour_ga.evolutionary import EvolutionConfig, EvolutionarySearch


def main():
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(message)s", datefmt="%H:%M:%S")
    cities = random_cities(50, seed=7, scale=100.0)

    cfg = EvolutionConfig(
        population_size=30,
        elite_fraction=0.2,
        greedy_fraction=0.1,
        generations=2000,
        log_interval=250,
    )
    search = EvolutionarySearch(cfg, cities)
    best = search.run()
    print(f"best cost={best.cost:.2f} order={best.order}")


if __name__ == "__main__":
    main()
