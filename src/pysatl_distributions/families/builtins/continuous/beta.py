"""
Beta distribution family implementation.

Contains the Beta distribution on ``[0, 1]`` with two shape parameters.
The quantile function has no closed form and is obtained from the generic
continuous solver; variates are drawn with Cheng's algorithms.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field

from scipy.special import betainc, betaincc, betaln, xlog1py, xlogy

from pysatl_distributions.distributions.distribution import ContinuousDistribution
from pysatl_distributions.distributions.precision import exp_clamped
from pysatl_distributions.distributions.strategies import (
    ChengBetaSamplingStrategy,
    SamplingStrategy,
)
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.families.parametric_family import ParametricFamily
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.types import FamilyName, Kind


@parametrization(family=FamilyName.BETA)
class BetaDistribution(Parametrization, ContinuousDistribution):
    """
    Beta distribution.

    Probability density function:
        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β) for x in [0, 1]

    The CDF is the regularized incomplete beta function I_x(α, β) and the SF
    its complement, each evaluated directly.

    Parameters
    ----------
    alpha : float
        First shape parameter (α > 0)
    beta : float
        Second shape parameter (β > 0)
    """

    alpha: float
    beta: float
    _log_beta_function: float = field(init=False, repr=False, compare=False)

    @constraint(description="0 < alpha < inf", parameter="alpha")
    def check_alpha_positive(self) -> bool:
        return 0 < self.alpha < math.inf

    @constraint(description="0 < beta < inf", parameter="beta")
    def check_beta_positive(self) -> bool:
        return 0 < self.beta < math.inf

    def _derive_constants(self) -> None:
        object.__setattr__(self, "_log_beta_function", float(betaln(self.alpha, self.beta)))

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return ChengBetaSamplingStrategy()

    def density(self, x: float) -> float:
        return exp_clamped(self.log_density(x))

    def log_density(self, x: float) -> float:
        """
        Logarithm of the density.

        Returns ``+inf`` at ``x = 0`` when ``alpha < 1`` and at ``x = 1`` when
        ``beta < 1``, where the density diverges.
        """
        if x < 0.0 or x > 1.0:
            return -math.inf
        if x == 0.0 and self.alpha < 1.0:
            return math.inf
        if x == 1.0 and self.beta < 1.0:
            return math.inf
        return float(
            xlogy(self.alpha - 1.0, x) + xlog1py(self.beta - 1.0, -x) - self._log_beta_function
        )

    def cumulative_probability(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return float(betainc(self.alpha, self.beta, x))

    def survival_probability(self, x: float) -> float:
        if x <= 0.0:
            return 1.0
        if x >= 1.0:
            return 0.0
        return float(betaincc(self.alpha, self.beta, x))

    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    def variance(self) -> float:
        total = self.alpha + self.beta
        return (self.alpha / total) * (self.beta / total) / (total + 1.0)


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.BETA,
            kind=Kind.CONTINUOUS,
            parametrizations={"shapes": BetaDistribution},
        )
    )
