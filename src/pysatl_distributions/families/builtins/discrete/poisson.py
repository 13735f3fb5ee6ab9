"""
Poisson distribution family implementation.

Contains the Poisson distribution with rate ``lambda_``. The CDF and SF are
the complementary regularized incomplete gamma functions; quantiles are
obtained from the generic discrete solver.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import gammainc, gammaincc, gammaln, xlogy

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


@parametrization(family=FamilyName.POISSON)
class PoissonDistribution(Parametrization, DiscreteDistribution):
    """
    Poisson distribution.

    Probability mass function:
        P(X = k) = λ^k e^(-λ) / k! for k = 0, 1, 2, ...

    Parameters
    ----------
    lambda_ : float
        Rate (mean) λ > 0
    """

    lambda_: float

    @constraint(description="0 < lambda_ < inf", parameter="lambda_")
    def check_lambda_positive(self) -> bool:
        return 0.0 < self.lambda_ < math.inf

    @property
    def support(self) -> IntegerSupport:
        return IntegerSupport(0, INT_MAX)

    def probability(self, x: int) -> float:
        return math.exp(self.log_probability(x))

    def log_probability(self, x: int) -> float:
        if x < 0:
            return -math.inf
        return float(xlogy(x, self.lambda_) - self.lambda_ - gammaln(x + 1.0))

    def cumulative_probability(self, x: int) -> float:
        if x < 0:
            return 0.0
        return float(gammaincc(x + 1.0, self.lambda_))

    def survival_probability(self, x: int) -> float:
        if x < 0:
            return 1.0
        return float(gammainc(x + 1.0, self.lambda_))

    def mean(self) -> float:
        return self.lambda_

    def variance(self) -> float:
        return self.lambda_


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.POISSON,
            kind=Kind.DISCRETE,
            parametrizations={"rate": PoissonDistribution},
        )
    )
