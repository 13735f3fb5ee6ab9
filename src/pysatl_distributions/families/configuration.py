"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families in the global
:class:`ParametricFamilyRegister`:

- continuous: Normal, ContinuousUniform, Exponential, Laplace, Cauchy, Beta,
  Gamma;
- discrete: Geometric, Binomial, Poisson.

Notes
-----
- Configuration is cached; call :func:`reset_families_register` to start
  from an empty registry (used by the test suite).
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_distributions.families.builtins import (
    configure_beta_family,
    configure_binomial_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_laplace_family,
    configure_normal_family,
    configure_poisson_family,
    configure_uniform_family,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_uniform_family()
    configure_exponential_family()
    configure_laplace_family()
    configure_cauchy_family()
    configure_beta_family()
    configure_gamma_family()
    configure_geometric_family()
    configure_binomial_family()
    configure_poisson_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()


__all__ = ["configure_families_register", "reset_families_register"]
