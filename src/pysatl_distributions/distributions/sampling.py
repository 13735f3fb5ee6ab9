"""
Sampling Interfaces
===================

Sample containers, the random-source protocol and the sampler object:

- :class:`UniformRandomProvider` – injected source of uniform variates.
- :class:`Sample` / :class:`ArraySample` – containers of drawn values.
- :class:`DistributionSampler` – binds a distribution, a sampling strategy
  and a random source.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_distributions.distributions.distribution import Distribution
    from pysatl_distributions.distributions.strategies import SamplingStrategy


@runtime_checkable
class UniformRandomProvider(Protocol):
    """
    Source of uniform pseudorandom values.

    :class:`numpy.random.Generator` satisfies this protocol.
    """

    def random(self) -> float:
        """Uniform double in ``[0, 1)``."""
        ...

    def integers(self, low: int, high: int | None = None) -> int:
        """Uniform integer in ``[low, high)``."""
        ...


def open_uniform(rng: UniformRandomProvider) -> float:
    """Uniform double in the open interval ``(0, 1)``."""
    u = rng.random()
    while u == 0.0:
        u = rng.random()
    return float(u)


def standard_normal(rng: UniformRandomProvider) -> float:
    """Standard normal deviate by the Marsaglia polar method."""
    while True:
        v1 = 2.0 * rng.random() - 1.0
        v2 = 2.0 * rng.random() - 1.0
        s = v1 * v1 + v2 * v2
        if 0.0 < s < 1.0:
            return v1 * math.sqrt(-2.0 * math.log(s) / s)


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Univariate sample stored as a float array of shape ``(n, 1)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape ``(n, 1)``.

    Raises
    ------
    ValueError
        If data is not a single column.
    """

    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2 or data.shape[1] != 1:
            raise ValueError("ArraySample expects 2D array of shape (n, 1).")
        self.data = data

    @classmethod
    def from_values(cls, values: list[float]) -> ArraySample:
        """Build a sample from drawn scalar values."""
        return cls(np.asarray(values, dtype=np.float64).reshape(len(values), 1))

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[float]:
        """Iterate over the drawn values."""
        for value in self.data[:, 0]:
            yield float(value)

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def values(self) -> npt.NDArray[np.floating[Any]]:
        """Flat view of the drawn values, shape ``(n,)``."""
        return self.data[:, 0]

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)


@dataclass(frozen=True, slots=True)
class DistributionSampler:
    """
    Sampler bound to a distribution and a random source.

    Parameters
    ----------
    distribution : Distribution
        Distribution to draw from.
    strategy : SamplingStrategy
        Algorithm used for each draw.
    rng : UniformRandomProvider
        Injected random source. Thread safety of the sampler is that of
        the source.
    """

    distribution: Distribution
    strategy: SamplingStrategy
    rng: UniformRandomProvider

    def sample(self) -> float:
        """Draw one variate."""
        return self.strategy.draw(self.distribution, self.rng)

    def samples(self, n: int) -> ArraySample:
        """
        Draw ``n`` independent variates.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError("Sample size must be non-negative.")
        return self.strategy.sample(n, self.distribution, self.rng)


__all__ = [
    "UniformRandomProvider",
    "Sample",
    "ArraySample",
    "DistributionSampler",
    "open_uniform",
    "standard_normal",
]
