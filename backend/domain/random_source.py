"""
Random number capability used for food placement.
"""

import random
from typing import Optional


class RandomSource:
    """
    Interface for the injected random capability.

    Implementations must return every integer in ``[low, high]`` (both
    inclusive) with non-zero probability.
    """

    def uniform_in_range(self, low: int, high: int) -> int:
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    """Default source backed by :class:`random.Random`; pass a seed for reproducible games."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def uniform_in_range(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}].")
        return self._random.randint(low, high)

    def __repr__(self):
        return f"<SystemRandomSource seed={self.seed}>"
