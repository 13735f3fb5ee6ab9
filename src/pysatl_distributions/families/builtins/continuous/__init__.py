"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distributions.families.builtins.continuous.beta import (
    BetaDistribution,
    configure_beta_family,
)
from pysatl_distributions.families.builtins.continuous.cauchy import (
    CauchyDistribution,
    configure_cauchy_family,
)
from pysatl_distributions.families.builtins.continuous.exponential import (
    ExponentialDistribution,
    configure_exponential_family,
)
from pysatl_distributions.families.builtins.continuous.gamma import (
    GammaDistribution,
    configure_gamma_family,
)
from pysatl_distributions.families.builtins.continuous.laplace import (
    LaplaceDistribution,
    configure_laplace_family,
)
from pysatl_distributions.families.builtins.continuous.normal import (
    NormalDistribution,
    configure_normal_family,
)
from pysatl_distributions.families.builtins.continuous.uniform import (
    UniformDistribution,
    configure_uniform_family,
)

__all__ = [
    "BetaDistribution",
    "CauchyDistribution",
    "ExponentialDistribution",
    "GammaDistribution",
    "LaplaceDistribution",
    "NormalDistribution",
    "UniformDistribution",
    "configure_beta_family",
    "configure_cauchy_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_laplace_family",
    "configure_normal_family",
    "configure_uniform_family",
]
