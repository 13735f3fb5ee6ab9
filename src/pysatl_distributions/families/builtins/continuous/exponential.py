"""
Exponential distribution family implementation.

Contains the Exponential distribution with the rate and scale
parameterizations.
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


@parametrization(family=FamilyName.EXPONENTIAL)
class ExponentialDistribution(Parametrization, ContinuousDistribution):
    """
    Exponential distribution.

    Probability density function:
        f(x) = λ * exp(-λx) for x ≥ 0, 0 otherwise

    Parameters
    ----------
    lambda_ : float
        Rate parameter (λ > 0)
    """

    lambda_: float
    _log_lambda: float = field(init=False, repr=False, compare=False)

    @constraint(description="0 < lambda_ < inf", parameter="lambda_")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive and finite."""
        return 0 < self.lambda_ < math.inf

    def _derive_constants(self) -> None:
        object.__setattr__(self, "_log_lambda", math.log(self.lambda_))

    @classmethod
    def from_scale(cls, beta: float) -> ExponentialDistribution:
        """
        Scale parametrization, ``lambda_ = 1 / beta``.

        Raises
        ------
        ParameterError
            If ``beta <= 0``.
        """
        if not beta > 0:
            raise ParameterError("beta", beta, "beta > 0")
        return cls(lambda_=1.0 / beta)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def density(self, x: float) -> float:
        if x < 0:
            return 0.0
        return self.lambda_ * math.exp(-self.lambda_ * x)

    def log_density(self, x: float) -> float:
        if x < 0:
            return -math.inf
        return self._log_lambda - self.lambda_ * x

    def cumulative_probability(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return -math.expm1(-self.lambda_ * x)

    def survival_probability(self, x: float) -> float:
        if x <= 0:
            return 1.0
        return math.exp(-self.lambda_ * x)

    def inverse_cumulative_probability(self, p: float, **options: Any) -> float:
        p = check_probability(p)
        if p == 1.0:
            return math.inf
        return -math.log1p(-p) / self.lambda_

    def inverse_survival_probability(self, p: float, **options: Any) -> float:
        q = check_probability(p)
        if q == 0.0:
            return math.inf
        if q == 1.0:
            return 0.0
        return -math.log(q) / self.lambda_

    def mean(self) -> float:
        return 1.0 / self.lambda_

    def variance(self) -> float:
        return 1.0 / self.lambda_ / self.lambda_


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    ParametricFamilyRegister.register(
        ParametricFamily(
            name=FamilyName.EXPONENTIAL,
            kind=Kind.CONTINUOUS,
            parametrizations={
                "rate": ExponentialDistribution,
                "scale": ExponentialDistribution.from_scale,
            },
        )
    )
