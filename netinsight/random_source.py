"""Injectable random source for the randomized generators.

Generators only ever call ``next_float()``; everything else (indices,
shuffles, weighted picks) is derived from it here so a seeded or scripted
source reproduces a construction exactly.
"""

from __future__ import annotations

from typing import Iterable, MutableSequence, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    """Uniform random floats in ``[0, 1)``."""

    def next_float(self) -> float: ...


class NumpyRandomSource:
    """Random source backed by ``numpy.random.default_rng``.

    Args:
        seed: Optional seed; ``None`` draws fresh OS entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_float(self) -> float:
        return float(self._rng.random())


class SequenceRandomSource:
    """Replays a fixed list of floats, cycling when exhausted.

    Intended for tests that need to script exact random draws.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(v) for v in values]
        if not self._values:
            raise ValueError("SequenceRandomSource requires at least one value")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"random value out of range [0, 1): {v}")
        self._pos = 0
        self.draws = 0

    def next_float(self) -> float:
        value = self._values[self._pos]
        self._pos = (self._pos + 1) % len(self._values)
        self.draws += 1
        return value


def default_source(rng: RandomSource | None) -> RandomSource:
    """Return ``rng`` or a fresh unseeded numpy source."""
    return rng if rng is not None else NumpyRandomSource()


def uniform(rng: RandomSource, low: float, high: float) -> float:
    return low + (high - low) * rng.next_float()


def random_index(rng: RandomSource, n: int) -> int:
    """Uniform integer in ``[0, n)``."""
    if n <= 0:
        raise ValueError("random_index requires n > 0")
    # Guard against float rounding landing exactly on n.
    return min(int(rng.next_float() * n), n - 1)


def shuffle(rng: RandomSource, items: MutableSequence[T]) -> None:
    """Fisher-Yates shuffle in place."""
    for i in range(len(items) - 1, 0, -1):
        j = random_index(rng, i + 1)
        items[i], items[j] = items[j], items[i]


def weighted_index(rng: RandomSource, weights: Sequence[float]) -> int:
    """Roulette-wheel selection proportional to ``weights``.

    Falls back to a uniform pick when every weight is zero.
    """
    if not weights:
        raise ValueError("weighted_index requires at least one weight")
    total = float(sum(weights))
    if total <= 0.0:
        return random_index(rng, len(weights))
    threshold = rng.next_float() * total
    cumulative = 0.0
    last_positive = 0
    for idx, w in enumerate(weights):
        if w <= 0:
            continue
        last_positive = idx
        cumulative += w
        if threshold < cumulative:
            return idx
    return last_positive
