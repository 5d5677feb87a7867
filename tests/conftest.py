import random

import pytest

from tour_ga.cities import City


class FixedRandom(random.Random):
    """Random source that replays a fixed sequence from ``randrange``."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.calls = 0

    def randrange(self, *args, **kwargs):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def square():
    return [City(0.0, 0.0), City(0.0, 1.0), City(1.0, 1.0), City(1.0, 0.0)]


@pytest.fixture
def fixed_random():
    return FixedRandom
