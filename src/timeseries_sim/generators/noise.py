"""
Random sources for the simulators.

Every generator draws its randomness through a GaussianSource, which in turn
reads uniform variates from a UniformSource. Passing a seeded or scripted
source makes a simulation reproducible.
"""

import math
from typing import Protocol

import numpy as np
from numpy.typing import NDArray

# Smallest positive normal double; keeps ln(u1) finite in Box-Muller.
_MIN_UNIFORM = float(np.finfo(np.float64).tiny)


class UniformSource(Protocol):
    """Anything that can hand out uniform variates in [0, 1)."""

    def next_uniform(self) -> float: ...


class NumpyUniformSource:
    """UniformSource backed by a numpy Generator."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_uniform(self) -> float:
        return float(self._rng.random())


class GaussianSource:
    """
    Normal variates built from a uniform source with the Box-Muller transform.

    Only the cosine output of each Box-Muller pair is used, so every sample
    costs two uniform draws.

    Args:
        uniform: Source of uniform variates. If None, a NumpyUniformSource
            seeded with ``seed`` is created.
        seed: Seed for the default uniform source.
    """

    def __init__(self, uniform: UniformSource | None = None, seed: int | None = None):
        self.uniform_source = uniform if uniform is not None else NumpyUniformSource(seed)

    def sample(self, sigma: float = 1.0) -> float:
        """Draw one value from N(0, sigma**2)."""
        u1 = max(self.uniform_source.next_uniform(), _MIN_UNIFORM)
        u2 = self.uniform_source.next_uniform()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return z * sigma

    def sample_many(self, n: int, sigma: float = 1.0) -> NDArray[np.float64]:
        """Draw ``n`` independent values from N(0, sigma**2)."""
        return np.array([self.sample(sigma) for _ in range(max(n, 0))], dtype=np.float64)

    def uniform(self, low: float, high: float) -> float:
        """Draw one value uniformly from [low, high)."""
        return low + (high - low) * self.uniform_source.next_uniform()


def as_gaussian_source(
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> GaussianSource:
    """
    Normalize the ``source``/``seed`` pair every generator accepts.

    An existing GaussianSource is returned as is, a bare UniformSource is
    wrapped, and None builds a fresh numpy-backed source from ``seed``.
    """
    if isinstance(source, GaussianSource):
        return source
    if source is not None:
        return GaussianSource(uniform=source)
    return GaussianSource(seed=seed)
