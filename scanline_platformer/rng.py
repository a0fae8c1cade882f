"""Random streams consumed by the terrain generator.

Generation draws from a single sequential stream, so a level is reproduced
exactly by replaying the same draws in the same order.
"""
import random
from typing import Optional, Protocol


class RandomStream(Protocol):
    def roll(self, n: int) -> int:
        """Uniform integer in [1, n]."""

    def between(self, a: int, b: int) -> int:
        """Uniform integer in [a, b]."""


class SeededStream:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.randint(1, 1_000_000_000)
        self.seed = seed
        self.rng = random.Random(seed)

    def roll(self, n: int) -> int:
        return self.rng.randint(1, n)

    def between(self, a: int, b: int) -> int:
        return self.rng.randint(a, b)
