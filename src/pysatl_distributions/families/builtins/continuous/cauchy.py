"""
Cauchy distribution family implementation.

Contains the Cauchy (Lorentz) distribution with location and scale
parameters. Its mean and variance are undefined.
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


def _standard_cdf(z: float) -> float:
    # atan(1/z) keeps relative accuracy in the lower tail
    if z < -1.0:
        return -math.atan(1.0 / z) / math.pi
    return 0.5 + math.atan(z) / math.pi


def _standard_quantile(p: float) -> float:
    """Standard Cauchy quantile for ``p`` in the open interval ``(0, 1)``."""
    if p < 0.5:
        return -1.0 / math.tan(math.pi * p)
    if p > 0.5:
        return 1.0 / math.tan(math.pi * (1.0 - p))
    return 0.0


@parametrization(family=FamilyName.CAUCHY)
class CauchyDistribution(Parametrization, ContinuousDistribution):
    """
    Cauchy distribution.

    Probability density function:
        f(x) = 1 / (πγ (1 + ((x-x₀)/γ)²))

    Parameters
    ----------
    location : float
        Median x₀
    scale : float
        Half width at half maximum γ (γ > 0)
    """

    location: float
    scale: float
    _log_pi_scale: float = field(init=False, repr=False, compare=False)

    @constraint(description="0 < scale < inf", parameter="scale")
    def check_scale_positive(self) -> bool:
        return 0 < self.scale < math.inf

    @constraint(description="location is finite", parameter="location")
    def check_location_finite(self) -> bool:
        return math.isfinite(self.location)

    def _derive_constants(self) -> None:
        object.__setattr__(self, "_log_pi_scale", math.log(math.pi * self.scale))

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        z = (x - self.location) / self.scale
        return 1.0 / (math.pi * self.scale * (1.0 + z * z))

    def log_density(self, x: float) -> float:
        z = (x - self.location) / self.scale
        return -self._log_pi_scale - math.log1p(z * z)

    def cumulative_probability(self, x: float) -> float:
        return _standard_cdf((x - self.location) / self.scale)

    def survival_probability(self, x: float) -> float:
        return _standard_cdf(-(x - self.location) / self.scale)

    def inverse_cumulative_probability(self, p: float, **options: Any) -> float:
        p = check_probability(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return self.location + self.scale * _standard_quantile(p)

    def inverse_survival_probability(self, p: float, **options: Any) -> float:
        q = check_probability(p)
        if q == 0.0:
            return math.inf
        if q == 1.0:
            return -math.inf
        return self.location - self.scale * _standard_quantile(q)

    def mean(self) -> float:
        return math.nan

    def variance(self) -> float:
        return math.nan


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.CAUCHY,
            kind=Kind.CONTINUOUS,
            parametrizations={"locationScale": CauchyDistribution},
        )
    )
