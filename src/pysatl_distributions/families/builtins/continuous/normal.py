"""
Normal distribution family implementation.

Contains the Normal distribution with the mean/standard-deviation and
mean/precision parameterizations.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING

from scipy.special import erfc, ndtri

from pysatl_distributions.distributions.distribution import (
    ContinuousDistribution,
    check_probability,
)
from pysatl_distributions.distributions.precision import exp_clamped
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.errors import ParameterError
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

_SQRT2 = math.sqrt(2.0)
_HALF_LOG_2PI = 0.5 * math.log(2.0 * math.pi)


@parametrization(family=FamilyName.NORMAL)
class NormalDistribution(Parametrization, ContinuousDistribution):
    """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float
    _log_sigma_sqrt_2pi: float = field(init=False, repr=False, compare=False)

    @constraint(description="0 < sigma < inf", parameter="sigma")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive and finite."""
        return 0 < self.sigma < math.inf

    @constraint(description="mu is finite", parameter="mu")
    def check_mu_finite(self) -> bool:
        """Check that mean is finite."""
        return math.isfinite(self.mu)

    def _derive_constants(self) -> None:
        object.__setattr__(self, "_log_sigma_sqrt_2pi", math.log(self.sigma) + _HALF_LOG_2PI)

    @classmethod
    def from_precision(cls, mu: float, tau: float) -> NormalDistribution:
        """
        Mean-precision parametrization, ``sigma = 1 / sqrt(tau)``.

        Raises
        ------
        ParameterError
            If ``tau <= 0``.
        """
        if not tau > 0:
            raise ParameterError("tau", tau, "tau > 0")
        return cls(mu=mu, sigma=1.0 / math.sqrt(tau))

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return exp_clamped(-0.5 * z * z - self._log_sigma_sqrt_2pi)

    def log_density(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return -0.5 * z * z - self._log_sigma_sqrt_2pi

    def cumulative_probability(self, x: float) -> float:
        z = (x - self.mu) / (self.sigma * _SQRT2)
        return float(0.5 * erfc(-z))

    def survival_probability(self, x: float) -> float:
        z = (x - self.mu) / (self.sigma * _SQRT2)
        return float(0.5 * erfc(z))

    def inverse_cumulative_probability(self, p: float, **options: Any) -> float:
        p = check_probability(p)
        return float(self.mu + self.sigma * ndtri(p))

    def inverse_survival_probability(self, p: float, **options: Any) -> float:
        q = check_probability(p)
        return float(self.mu - self.sigma * ndtri(q))

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma * self.sigma


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.NORMAL,
            kind=Kind.CONTINUOUS,
            parametrizations={
                "meanStd": NormalDistribution,
                "meanPrec": NormalDistribution.from_precision,
            },
        )
    )
