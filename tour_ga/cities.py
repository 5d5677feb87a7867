from dataclasses import dataclass
from typing import List, Optional

import numpy as np


@dataclass(frozen=True)
class City:
    x: float
    y: float

    def proximity(self, other: "City") -> float:
        """Euclidean distance to another city."""
        return float(np.hypot(self.x - other.x, self.y - other.y))


def random_cities(n: int, seed: Optional[int] = None, scale: float = 1.0) -> List[City]:
    if n < 0:
        raise ValueError(f"Number of cities must be non-negative, got {n}.")
    rng = np.random.default_rng(seed)
    coords = rng.random((n, 2)) * scale
    return [City(float(x), float(y)) for x, y in coords]
