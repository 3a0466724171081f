"""
Random number source.

RandomSource wraps a numpy Generator and exposes only the draws the study
needs: standard normal variates, Student-t variates and uniform sampling
without replacement. Independent child sources are derived with
SeedSequence.spawn, so parallel workers never share generator state.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

SeedLike = int | np.random.SeedSequence | None


class RandomSource:
    """
    Seedable source of the random draws used by the simulation.

    Args:
        seed: Integer seed, a SeedSequence, or None for fresh OS entropy.

    Example:
        >>> source = RandomSource(42)
        >>> z = source.normal(10)
        >>> workers = source.spawn(4)
    """

    def __init__(self, seed: SeedLike = None):
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self._rng = np.random.default_rng(self._seed_seq)

    @property
    def generator(self) -> np.random.Generator:
        """Underlying numpy Generator."""
        return self._rng

    @property
    def seed_sequence(self) -> np.random.SeedSequence:
        return self._seed_seq

    def normal(self, size: int) -> NDArray[np.floating[Any]]:
        """Draw standard normal variates (mean 0, variance 1)."""
        return self._rng.standard_normal(size)

    def student_t(self, dof: float, size: int) -> NDArray[np.floating[Any]]:
        """
        Draw Student-t variates with ``dof`` degrees of freedom.

        An infinite ``dof`` is the normal limit and draws standard normals.
        """
        if math.isinf(dof):
            return self.normal(size)
        return self._rng.standard_t(dof, size)

    def choose(self, population: ArrayLike, k: int) -> NDArray:
        """
        Sample ``k`` elements uniformly without replacement.

        The returned elements keep the order in which they were drawn.

        Raises:
            ValueError: If k is negative or exceeds the population size
        """
        population = np.asarray(population)
        n = population.shape[0]
        if k < 0 or k > n:
            raise ValueError(f"cannot choose {k} elements from a population of {n}")
        if k == 0:
            return population[:0]
        return self._rng.choice(population, size=k, replace=False)

    def spawn(self, n: int) -> list[RandomSource]:
        """Derive ``n`` statistically independent child sources."""
        return [RandomSource(child) for child in self._seed_seq.spawn(n)]

    def __repr__(self) -> str:
        return f"RandomSource(entropy={self._seed_seq.entropy!r})"


def as_random_source(source: RandomSource | SeedLike) -> RandomSource:
    """Return ``source`` unchanged if it is a RandomSource, else seed a new one."""
    if isinstance(source, RandomSource):
        return source
    return RandomSource(source)
