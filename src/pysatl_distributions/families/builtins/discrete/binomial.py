"""
Binomial distribution family implementation.

Contains the Binomial distribution of the number of successes in ``n``
independent trials. Quantiles are obtained from the generic discrete solver.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field

from scipy.special import betainc, betaincc, gammaln, xlog1py, xlogy

from pysatl_distributions.distributions.distribution import DiscreteDistribution
from pysatl_distributions.distributions.support import IntegerSupport
from pysatl_distributions.families.parametric_family import ParametricFamily
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.types import INT_MAX, FamilyName, Kind


@parametrization(family=FamilyName.BINOMIAL)
class BinomialDistribution(Parametrization, DiscreteDistribution):
    """
    Binomial distribution.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1-p)^(n-k) for k = 0, ..., n

    The CDF and SF are complementary regularized incomplete beta functions:
    ``P(X <= k) = 1 - I_p(k+1, n-k)`` and ``P(X > k) = I_p(k+1, n-k)``.

    Parameters
    ----------
    n : int
        Number of trials, 0 ≤ n ≤ 2³¹-1
    p : float
        Probability of success, 0 ≤ p ≤ 1
    """

    n: int
    p: float
    _log_n_factorial: float = field(init=False, repr=False, compare=False)

    @constraint(description="n is an integer in [0, INT_MAX]", parameter="n")
    def check_trials(self) -> bool:
        return 0 <= self.n <= INT_MAX and float(self.n).is_integer()

    @constraint(description="0 <= p <= 1", parameter="p")
    def check_probability_of_success(self) -> bool:
        return 0.0 <= self.p <= 1.0

    def _derive_constants(self) -> None:
        object.__setattr__(self, "_log_n_factorial", float(gammaln(self.n + 1.0)))

    @property
    def support(self) -> IntegerSupport:
        n = int(self.n)
        return IntegerSupport(n if self.p == 1.0 else 0, 0 if self.p == 0.0 else n)

    def probability(self, x: int) -> float:
        return math.exp(self.log_probability(x))

    def log_probability(self, x: int) -> float:
        if x < 0 or x > self.n:
            return -math.inf
        failures = self.n - x
        return float(
            self._log_n_factorial
            - gammaln(x + 1.0)
            - gammaln(failures + 1.0)
            + xlogy(x, self.p)
            + xlog1py(failures, -self.p)
        )

    def cumulative_probability(self, x: int) -> float:
        if x < 0:
            return 0.0
        if x >= self.n:
            return 1.0
        return float(betaincc(x + 1.0, self.n - x, self.p))

    def survival_probability(self, x: int) -> float:
        if x < 0:
            return 1.0
        if x >= self.n:
            return 0.0
        return float(betainc(x + 1.0, self.n - x, self.p))

    def mean(self) -> float:
        return self.n * self.p

    def variance(self) -> float:
        return self.n * self.p * (1.0 - self.p)


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.BINOMIAL,
            kind=Kind.DISCRETE,
            parametrizations={"trialsProbability": BinomialDistribution},
        )
    )
