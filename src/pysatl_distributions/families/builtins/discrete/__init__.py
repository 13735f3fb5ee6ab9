"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distributions.families.builtins.discrete.binomial import (
    BinomialDistribution,
    configure_binomial_family,
)
from pysatl_distributions.families.builtins.discrete.geometric import (
    GeometricDistribution,
    configure_geometric_family,
)
from pysatl_distributions.families.builtins.discrete.poisson import (
    PoissonDistribution,
    configure_poisson_family,
)

__all__ = [
    "BinomialDistribution",
    "GeometricDistribution",
    "PoissonDistribution",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_poisson_family",
]
