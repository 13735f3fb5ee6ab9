"""
Distribution Interfaces
=======================

This module defines the public protocols implemented by every univariate
distribution:

- :class:`ContinuousDistribution` – density, CDF/SF, quantiles, moments and
  sampling for distributions on the real line.
- :class:`DiscreteDistribution` – the same contract for distributions on a
  range of integers, with a probability mass function.

Concrete distributions are independent frozen value types that subclass one
of the protocols explicitly and inherit its default methods.

Notes
-----
- Inverse functions without a closed form default to the generic solvers of
  :mod:`pysatl_distributions.distributions.solvers`, seeded with the support
  bounds, mean and variance of the distribution.
- Interval probabilities use SF differences in the upper tail and CDF
  differences otherwise.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_distributions.distributions.solvers import (
    DEFAULT_SOLVER_SETTINGS,
    inverse_continuous,
    inverse_discrete,
)
from pysatl_distributions.distributions.strategies import InverseTransformSamplingStrategy
from pysatl_distributions.errors import DomainError
from pysatl_distributions.types import Kind

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.distributions.sampling import (
        DistributionSampler,
        UniformRandomProvider,
    )
    from pysatl_distributions.distributions.strategies import SamplingStrategy
    from pysatl_distributions.distributions.support import ContinuousSupport, IntegerSupport


def check_probability(p: float) -> float:
    """
    Validate a probability argument.

    Raises
    ------
    DomainError
        If ``p`` is outside ``[0, 1]`` or NaN.
    """
    if not 0.0 <= p <= 1.0:
        raise DomainError(p, "probability must be in [0, 1]")
    return float(p)


def _check_interval(x0: float, x1: float) -> None:
    if x0 > x1:
        raise DomainError((x0, x1), "lower endpoint must not exceed upper endpoint")


@runtime_checkable
class ContinuousDistribution(Protocol):
    """Univariate continuous distribution."""

    @property
    def kind(self) -> Kind:
        return Kind.CONTINUOUS

    @property
    def support(self) -> ContinuousSupport: ...

    def density(self, x: float) -> float: ...

    def log_density(self, x: float) -> float: ...

    def cumulative_probability(self, x: float) -> float: ...

    def survival_probability(self, x: float) -> float: ...

    def mean(self) -> float: ...

    def variance(self) -> float: ...

    def support_lower_bound(self) -> float:
        return self.support.lower

    def support_upper_bound(self) -> float:
        return self.support.upper

    def is_support_connected(self) -> bool:
        return self.support.connected

    def probability(self, x0: float, x1: float) -> float:
        """
        Probability ``P(x0 < X <= x1)``.

        Raises
        ------
        DomainError
            If ``x0 > x1``.
        """
        _check_interval(x0, x1)
        sf0 = self.survival_probability(x0)
        if sf0 < 0.5:
            return sf0 - self.survival_probability(x1)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float, **options: Any) -> float:
        """
        Smallest ``x`` with ``cdf(x) >= p``.

        Parameters
        ----------
        p : float
            Cumulative probability in ``[0, 1]``.
        **options
            Overrides of :class:`~.solvers.SolverSettings` fields.

        Raises
        ------
        DomainError
            If ``p`` is not a probability.
        ConvergenceError
            If the numerical inversion fails.
        """
        p = check_probability(p)
        return inverse_continuous(
            self.cumulative_probability,
            p,
            1.0 - p,
            self.support_lower_bound(),
            self.support_upper_bound(),
            mean=self.mean(),
            variance=self.variance(),
            settings=DEFAULT_SOLVER_SETTINGS.with_options(**options),
        )

    def inverse_survival_probability(self, p: float, **options: Any) -> float:
        """
        Smallest ``x`` with ``sf(x) <= p``.

        See :meth:`inverse_cumulative_probability` for the parameters.
        """
        q = check_probability(p)
        return inverse_continuous(
            self.survival_probability,
            1.0 - q,
            q,
            self.support_lower_bound(),
            self.support_upper_bound(),
            complement=True,
            mean=self.mean(),
            variance=self.variance(),
            settings=DEFAULT_SOLVER_SETTINGS.with_options(**options),
        )

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return InverseTransformSamplingStrategy()

    def create_sampler(
        self, rng: UniformRandomProvider, strategy: SamplingStrategy | None = None
    ) -> DistributionSampler:
        """
        Create a sampler bound to ``rng``.

        Parameters
        ----------
        rng : UniformRandomProvider
            Source of uniform variates, e.g. ``numpy.random.default_rng(seed)``.
        strategy : SamplingStrategy, optional
            Overrides :attr:`sampling_strategy`.
        """
        from pysatl_distributions.distributions.sampling import DistributionSampler

        return DistributionSampler(self, strategy or self.sampling_strategy, rng)


@runtime_checkable
class DiscreteDistribution(Protocol):
    """Univariate distribution on a range of integers."""

    @property
    def kind(self) -> Kind:
        return Kind.DISCRETE

    @property
    def support(self) -> IntegerSupport: ...

    def probability(self, x: int) -> float: ...

    def log_probability(self, x: int) -> float: ...

    def cumulative_probability(self, x: int) -> float: ...

    def survival_probability(self, x: int) -> float: ...

    def mean(self) -> float: ...

    def variance(self) -> float: ...

    def support_lower_bound(self) -> int:
        return self.support.lower

    def support_upper_bound(self) -> int:
        return self.support.upper

    def is_support_connected(self) -> bool:
        return self.support.connected

    def probability_between(self, x0: int, x1: int) -> float:
        """
        Probability ``P(x0 < X <= x1)``.

        Raises
        ------
        DomainError
            If ``x0 > x1``.
        """
        _check_interval(x0, x1)
        if x0 == x1:
            return 0.0
        sf0 = self.survival_probability(x0)
        if sf0 < 0.5:
            return sf0 - self.survival_probability(x1)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> int:
        """
        Smallest ``x`` with ``cdf(x) >= p``.

        Raises
        ------
        DomainError
            If ``p`` is not a probability.
        """
        p = check_probability(p)
        return inverse_discrete(
            self.cumulative_probability,
            p,
            1.0 - p,
            self.support_lower_bound(),
            self.support_upper_bound(),
            mean=self.mean(),
            variance=self.variance(),
        )

    def inverse_survival_probability(self, p: float) -> int:
        """
        Smallest ``x`` with ``sf(x) <= p``.

        Raises
        ------
        DomainError
            If ``p`` is not a probability.
        """
        q = check_probability(p)
        return inverse_discrete(
            self.survival_probability,
            1.0 - q,
            q,
            self.support_lower_bound(),
            self.support_upper_bound(),
            complement=True,
            mean=self.mean(),
            variance=self.variance(),
        )

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return InverseTransformSamplingStrategy()

    def create_sampler(
        self, rng: UniformRandomProvider, strategy: SamplingStrategy | None = None
    ) -> DistributionSampler:
        """Create an inversion sampler bound to ``rng``."""
        from pysatl_distributions.distributions.sampling import DistributionSampler

        return DistributionSampler(self, strategy or self.sampling_strategy, rng)


type Distribution = ContinuousDistribution | DiscreteDistribution


__all__ = [
    "ContinuousDistribution",
    "DiscreteDistribution",
    "Distribution",
    "check_probability",
]
