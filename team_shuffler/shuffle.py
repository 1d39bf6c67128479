"""Shuffle strategies used while forming teams."""

import random
from typing import List, Optional


class ShuffleStrategy:
    """Reorders a list in place."""

    def shuffle(self, items: List) -> None:
        raise NotImplementedError


class NoShuffle(ShuffleStrategy):
    """Leaves the list untouched. Useful for deterministic runs and tests."""

    def shuffle(self, items: List) -> None:
        return None


class RandomShuffle(ShuffleStrategy):
    """Uniformly random permutation using Fisher-Yates.

    A fresh generator is created on every call, seeded from the operating
    system unless a seed was given.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed

    def shuffle(self, items: List) -> None:
        rng = random.Random(self.seed)
        rng.shuffle(items)


STRATEGIES = {
    'random': RandomShuffle,
    'none': NoShuffle,
}


def get_strategy(name: str, seed: Optional[int] = None) -> ShuffleStrategy:
    """Look up a strategy by name.

    Args:
        name: Either "random" or "none"
        seed: Seed for the random strategy, ignored otherwise

    Raises:
        ValueError: If the name is unknown
    """
    if name not in STRATEGIES:
        raise ValueError(
            f"Unknown shuffle strategy '{name}'. Expected one of {sorted(STRATEGIES)}"
        )
    if name == 'random':
        return RandomShuffle(seed)
    return NoShuffle()
