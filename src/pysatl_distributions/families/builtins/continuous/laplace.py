"""
Laplace distribution family implementation.

Contains the Laplace (double exponential) distribution with location and
scale parameters.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING

from pysatl_distributions.distributions.distribution import (
    ContinuousDistribution,
    check_probability,
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

if TYPE_CHECKING:
    from typing import Any


@parametrization(family=FamilyName.LAPLACE)
class LaplaceDistribution(Parametrization, ContinuousDistribution):
    """
    Laplace distribution.

    Probability density function:
        f(x) = 1/(2β) * exp(-|x-μ|/β)

    Each tail of the CDF and SF is ``0.5 * exp(-|x-μ|/β)``; the other side
    is obtained by subtracting that small value from one.

    Parameters
    ----------
    mu : float
        Location
    beta : float
        Scale (β > 0)
    """

    mu: float
    beta: float
    _log_2beta: float = field(init=False, repr=False, compare=False)

    @constraint(description="0 < beta < inf", parameter="beta")
    def check_beta_positive(self) -> bool:
        return 0 < self.beta < math.inf

    @constraint(description="mu is finite", parameter="mu")
    def check_mu_finite(self) -> bool:
        return math.isfinite(self.mu)

    def _derive_constants(self) -> None:
        object.__setattr__(self, "_log_2beta", math.log(2.0 * self.beta))

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        return math.exp(-abs(x - self.mu) / self.beta) / (2.0 * self.beta)

    def log_density(self, x: float) -> float:
        return -abs(x - self.mu) / self.beta - self._log_2beta

    def cumulative_probability(self, x: float) -> float:
        if x <= self.mu:
            return 0.5 * math.exp((x - self.mu) / self.beta)
        return 1.0 - 0.5 * math.exp((self.mu - x) / self.beta)

    def survival_probability(self, x: float) -> float:
        if x <= self.mu:
            return 1.0 - 0.5 * math.exp((x - self.mu) / self.beta)
        return 0.5 * math.exp((self.mu - x) / self.beta)

    def inverse_cumulative_probability(self, p: float, **options: Any) -> float:
        p = check_probability(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        x = -math.log(2.0 * (1.0 - p)) if p > 0.5 else math.log(2.0 * p)
        return self.mu + self.beta * x

    def inverse_survival_probability(self, p: float, **options: Any) -> float:
        q = check_probability(p)
        if q == 0.0:
            return math.inf
        if q == 1.0:
            return -math.inf
        x = math.log(2.0 * (1.0 - q)) if q > 0.5 else -math.log(2.0 * q)
        return self.mu + self.beta * x

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return 2.0 * self.beta * self.beta


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.LAPLACE,
            kind=Kind.CONTINUOUS,
            parametrizations={"locationScale": LaplaceDistribution},
        )
    )
