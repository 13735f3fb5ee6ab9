"""
Built-in distribution families for PySATL.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distributions.families.builtins.continuous import (
    BetaDistribution,
    CauchyDistribution,
    ExponentialDistribution,
    GammaDistribution,
    LaplaceDistribution,
    NormalDistribution,
    UniformDistribution,
    configure_beta_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_laplace_family,
    configure_normal_family,
    configure_uniform_family,
)
from pysatl_distributions.families.builtins.discrete import (
    BinomialDistribution,
    GeometricDistribution,
    PoissonDistribution,
    configure_binomial_family,
    configure_geometric_family,
    configure_poisson_family,
)

__all__ = [
    # continuous
    "BetaDistribution",
    "CauchyDistribution",
    "ExponentialDistribution",
    "GammaDistribution",
    "LaplaceDistribution",
    "NormalDistribution",
    "UniformDistribution",
    # discrete
    "BinomialDistribution",
    "GeometricDistribution",
    "PoissonDistribution",
    # configuration
    "configure_beta_family",
    "configure_binomial_family",
    "configure_cauchy_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_geometric_family",
    "configure_laplace_family",
    "configure_normal_family",
    "configure_poisson_family",
    "configure_uniform_family",
]
