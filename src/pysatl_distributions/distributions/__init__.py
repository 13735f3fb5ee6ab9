"""
Distributions subpackage

Interfaces and shared numerics for probability distributions used by
PySATL Distributions:

- distribution protocols (:mod:`.distribution`);
- precision-preserving helpers (:mod:`.precision`);
- generic quantile solvers (:mod:`.solvers`);
- support descriptors (:mod:`.support`);
- sampling protocol, samples and samplers (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
    check_probability,
)
from .sampling import ArraySample, DistributionSampler, Sample, UniformRandomProvider
from .solvers import (
    DEFAULT_SOLVER_SETTINGS,
    SolverSettings,
    inverse_continuous,
    inverse_discrete,
)
from .strategies import (
    ChengBetaSamplingStrategy,
    InverseTransformSamplingStrategy,
    MarsagliaTsangGammaSamplingStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, IntegerSupport, Support

__all__ = [
    # distribution
    "ContinuousDistribution",
    "DiscreteDistribution",
    "Distribution",
    "check_probability",
    # support
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
    # solvers
    "SolverSettings",
    "DEFAULT_SOLVER_SETTINGS",
    "inverse_continuous",
    "inverse_discrete",
    # sampling
    "UniformRandomProvider",
    "Sample",
    "ArraySample",
    "DistributionSampler",
    # strategies
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
    "ChengBetaSamplingStrategy",
    "MarsagliaTsangGammaSamplingStrategy",
]
