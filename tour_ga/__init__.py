"""
Genetic-algorithm TSP heuristic: permutation chromosomes evolved by segment inversion.
"""

__all__ = [
    "cities",
    "evaluation",
    "evolutionary",
    "genetics",
]
