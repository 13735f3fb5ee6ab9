"""
Geometric distribution family implementation.

Contains the Geometric distribution of the number of failures before the
first success, on ``{0, 1, 2, ...}``.

Notes
-----
All probabilities are evaluated through ``log1p(-p)`` so that success
probabilities close to zero (down to the smallest subnormal double) keep
their relative accuracy. The quantile function has a closed form that is
corrected against the CDF so that ``icdf(cdf(x)) == x`` holds exactly.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field

from pysatl_distributions.distributions.distribution import (
    DiscreteDistribution,
    check_probability,
)
from pysatl_distributions.distributions.precision import log1m, one_minus_pow1m, pow1m
from pysatl_distributions.distributions.support import IntegerSupport
from pysatl_distributions.families.parametric_family import ParametricFamily
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.types import INT_MAX, FamilyName, Kind


@parametrization(family=FamilyName.GEOMETRIC)
class GeometricDistribution(Parametrization, DiscreteDistribution):
    """
    Geometric distribution.

    Probability mass function:
        P(X = k) = p (1-p)^k for k = 0, 1, 2, ...

    Parameters
    ----------
    p : float
        Probability of success, 0 < p ≤ 1
    """

    p: float
    _log1mp: float = field(init=False, repr=False, compare=False)
    _log_p: float = field(init=False, repr=False, compare=False)

    @constraint(description="0 < p <= 1", parameter="p")
    def check_probability_of_success(self) -> bool:
        return 0.0 < self.p <= 1.0

    def _derive_constants(self) -> None:
        object.__setattr__(self, "_log1mp", log1m(self.p))
        object.__setattr__(self, "_log_p", math.log(self.p))

    @property
    def support(self) -> IntegerSupport:
        return IntegerSupport(0, INT_MAX)

    def probability(self, x: int) -> float:
        if x < 0:
            return 0.0
        if x == 0:
            return self.p
        return self.p * pow1m(self.p, x, self._log1mp)

    def log_probability(self, x: int) -> float:
        if x < 0:
            return -math.inf
        if x == 0:
            return self._log_p
        return x * self._log1mp + self._log_p

    def cumulative_probability(self, x: int) -> float:
        if x < 0:
            return 0.0
        return one_minus_pow1m(x + 1.0, self._log1mp)

    def survival_probability(self, x: int) -> float:
        if x < 0:
            return 1.0
        return math.exp(self._log1mp * (x + 1.0))

    def inverse_cumulative_probability(self, p: float) -> int:
        p = check_probability(p)
        if p == 1.0:
            return INT_MAX
        if p <= self.cumulative_probability(0):
            return 0
        k = self._ceil_index(log1m(p) / self._log1mp - 1.0)
        while k > 0 and self.cumulative_probability(k - 1) >= p:
            k -= 1
        while k < INT_MAX and self.cumulative_probability(k) < p:
            k += 1
        return k

    def inverse_survival_probability(self, p: float) -> int:
        q = check_probability(p)
        if q == 0.0:
            return INT_MAX
        if q >= self.survival_probability(0):
            return 0
        k = self._ceil_index(math.log(q) / self._log1mp - 1.0)
        while k > 0 and self.survival_probability(k - 1) <= q:
            k -= 1
        while k < INT_MAX and self.survival_probability(k) > q:
            k += 1
        return k

    @staticmethod
    def _ceil_index(x: float) -> int:
        """``ceil(x)`` clamped to ``[0, INT_MAX]``."""
        if x >= INT_MAX:
            return INT_MAX
        if x <= 0.0:
            return 0
        return math.ceil(x)

    def mean(self) -> float:
        return (1.0 - self.p) / self.p

    def variance(self) -> float:
        return (1.0 - self.p) / self.p / self.p


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.GEOMETRIC,
            kind=Kind.DISCRETE,
            parametrizations={"probability": GeometricDistribution},
        )
    )
