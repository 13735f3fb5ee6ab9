"""
Parametric Families module for working with statistical distribution families.

This package provides the built-in distributions, their validated
parametrizations, the global family registry and the tagged-result factory.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    BetaDistribution,
    BinomialDistribution,
    CauchyDistribution,
    ExponentialDistribution,
    GammaDistribution,
    GeometricDistribution,
    LaplaceDistribution,
    NormalDistribution,
    PoissonDistribution,
    UniformDistribution,
)
from .configuration import configure_families_register, reset_families_register
from .factory import Created, CreationResult, Rejected, create, try_create
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
    "Created",
    "Rejected",
    "CreationResult",
    "create",
    "try_create",
    "BetaDistribution",
    "BinomialDistribution",
    "CauchyDistribution",
    "ExponentialDistribution",
    "GammaDistribution",
    "GeometricDistribution",
    "LaplaceDistribution",
    "NormalDistribution",
    "PoissonDistribution",
    "UniformDistribution",
]
