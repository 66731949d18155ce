"""Injectable randomness for the simulation engine."""

import math
import random
from typing import Optional, Protocol, runtime_checkable

from litsim.config import DEFAULT_RANDOM_SEED


@runtime_checkable
class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


class DiceRoller:
    """Seedable random source with the draws the engine needs."""

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the roller.

        Args:
            seed: Seed for repeatable runs; None seeds from OS entropy
        """
        self.seed = seed
        self._random = random.Random(seed)

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        return self._random.random()

    @staticmethod
    def percent(rng: RandomSource) -> float:
        """Draw u ~ Uniform(0, 100)."""
        return rng.random() * 100

    @staticmethod
    def uniform(rng: RandomSource, upper: float) -> float:
        """Draw r ~ Uniform(0, upper)."""
        return rng.random() * upper

    @staticmethod
    def randint(rng: RandomSource, low: int, high: int) -> int:
        """
        Draw an integer uniformly from [low, high] inclusive.

        Only the source's random() is used, so scripted sources work too.
        """
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")
        value = low + math.floor(rng.random() * (high - low + 1))
        # Guard against sources that return exactly 1.0
        return min(value, high)


def default_source(rng: Optional[RandomSource] = None) -> RandomSource:
    """Return rng, or a fresh DiceRoller seeded from configuration."""
    if rng is not None:
        return rng
    return DiceRoller(DEFAULT_RANDOM_SEED)
