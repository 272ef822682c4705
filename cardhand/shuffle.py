"""Seeded Fisher-Yates shuffling."""

from random import Random
from typing import Sequence, TypeVar

T = TypeVar("T")

# Seed value that selects an entropy-seeded, non-reproducible ordering.
RANDOM_SEED = 0


def shuffle(sequence: Sequence[T], seed: int = RANDOM_SEED) -> list[T]:
    """
    Return a shuffled copy of a sequence.

    The input is never mutated. A non-zero seed fully determines the
    resulting permutation for a given input; seed 0 draws from system
    entropy.

    Args:
        sequence: Items to shuffle
        seed: Deterministic seed, or 0 for a non-deterministic ordering

    Returns:
        A new list holding a permutation of the input
    """
    rng = Random() if seed == RANDOM_SEED else Random(seed)
    items = list(sequence)
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items
