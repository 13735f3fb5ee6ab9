"""
Uniform distribution family implementation.

Contains the continuous Uniform distribution with the standard, mean/width
and minimum/range parameterizations.
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


@parametrization(family=FamilyName.CONTINUOUS_UNIFORM)
class UniformDistribution(Parametrization, ContinuousDistribution):
    """
    Uniform (continuous) distribution.

    Probability density function:
        f(x) = 1/(upper_bound - lower_bound) for x in [lower_bound, upper_bound], 0 otherwise

    Parameters
    ----------
    lower_bound : float
        Lower bound of the distribution
    upper_bound : float
        Upper bound of the distribution
    """

    lower_bound: float
    upper_bound: float
    _width: float = field(init=False, repr=False, compare=False)

    @constraint(description="lower_bound < upper_bound", parameter="upper_bound")
    def check_lower_less_than_upper(self) -> bool:
        """Check that lower bound is less than upper bound."""
        return self.lower_bound < self.upper_bound

    @constraint(description="upper_bound - lower_bound is finite", parameter="upper_bound")
    def check_width_finite(self) -> bool:
        return math.isfinite(self.upper_bound - self.lower_bound)

    def _derive_constants(self) -> None:
        object.__setattr__(self, "_width", self.upper_bound - self.lower_bound)

    @classmethod
    def from_mean_width(cls, mean: float, width: float) -> UniformDistribution:
        """
        Mean-width parametrization.

        Raises
        ------
        ParameterError
            If ``width <= 0``.
        """
        if not width > 0:
            raise ParameterError("width", width, "width > 0")
        half_width = width / 2
        return cls(lower_bound=mean - half_width, upper_bound=mean + half_width)

    @classmethod
    def from_min_range(cls, minimum: float, range_val: float) -> UniformDistribution:
        """
        Minimum-range parametrization.

        Raises
        ------
        ParameterError
            If ``range_val <= 0``.
        """
        if not range_val > 0:
            raise ParameterError("range_val", range_val, "range_val > 0")
        return cls(lower_bound=minimum, upper_bound=minimum + range_val)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.lower_bound, right=self.upper_bound)

    def density(self, x: float) -> float:
        if x < self.lower_bound or x > self.upper_bound:
            return 0.0
        return 1.0 / self._width

    def log_density(self, x: float) -> float:
        if x < self.lower_bound or x > self.upper_bound:
            return -math.inf
        return -math.log(self._width)

    def cumulative_probability(self, x: float) -> float:
        if x <= self.lower_bound:
            return 0.0
        if x >= self.upper_bound:
            return 1.0
        return (x - self.lower_bound) / self._width

    def survival_probability(self, x: float) -> float:
        if x <= self.lower_bound:
            return 1.0
        if x >= self.upper_bound:
            return 0.0
        return (self.upper_bound - x) / self._width

    def inverse_cumulative_probability(self, p: float, **options: Any) -> float:
        p = check_probability(p)
        return p * self.upper_bound + (1.0 - p) * self.lower_bound

    def inverse_survival_probability(self, p: float, **options: Any) -> float:
        q = check_probability(p)
        return q * self.lower_bound + (1.0 - q) * self.upper_bound

    def mean(self) -> float:
        return 0.5 * (self.lower_bound + self.upper_bound)

    def variance(self) -> float:
        return self._width * self._width / 12.0


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.CONTINUOUS_UNIFORM,
            kind=Kind.CONTINUOUS,
            parametrizations={
                "standard": UniformDistribution,
                "meanWidth": UniformDistribution.from_mean_width,
                "minRange": UniformDistribution.from_min_range,
            },
        )
    )
