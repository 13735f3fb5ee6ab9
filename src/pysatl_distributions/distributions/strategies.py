"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its implementations:

- :class:`SamplingStrategy`: draws variates from a distribution.
- :class:`InverseTransformSamplingStrategy`: default; applies the quantile
  function to uniform variates.
- :class:`ChengBetaSamplingStrategy`: Cheng's BB/BC rejection algorithms
  for the Beta distribution.
- :class:`MarsagliaTsangGammaSamplingStrategy`: Marsaglia–Tsang squeeze
  method for the Gamma distribution.

Notes
-----
- Strategies are stateless; all randomness comes from the injected
  :class:`~pysatl_distributions.distributions.sampling.UniformRandomProvider`.
- Samples are returned as ``(n, 1)`` :class:`ArraySample` containers.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from typing import TYPE_CHECKING, Protocol, cast

from pysatl_distributions.distributions.precision import exp_clamped
from pysatl_distributions.distributions.sampling import (
    ArraySample,
    open_uniform,
    standard_normal,
)
from pysatl_distributions.types import Kind

if TYPE_CHECKING:
    from .distribution import Distribution
    from .sampling import UniformRandomProvider

_LN_4 = math.log(4.0)
_LN_4_APPROX = 1.3862944
_DOUBLE_MAX = sys.float_info.max


class _BetaShapes(Protocol):
    alpha: float
    beta: float


class _GammaShapes(Protocol):
    shape: float
    scale: float


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies."""

    def draw(self, distr: "Distribution", rng: "UniformRandomProvider") -> float: ...

    def sample(self, n: int, distr: "Distribution", rng: "UniformRandomProvider") -> ArraySample:
        """Draw ``n`` i.i.d. variates as an ``(n, 1)`` sample."""
        return ArraySample.from_values([self.draw(distr, rng) for _ in range(n)])


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Inverse transform sampling.

    Continuous distributions invert a uniform from the open interval
    ``(0, 1)`` so that infinite support bounds are never returned. Discrete
    distributions invert a uniform from ``[0, 1)``.
    """

    def draw(self, distr: "Distribution", rng: "UniformRandomProvider") -> float:
        if distr.kind is Kind.CONTINUOUS:
            return float(distr.inverse_cumulative_probability(open_uniform(rng)))
        return float(distr.inverse_cumulative_probability(float(rng.random())))


class ChengBetaSamplingStrategy(SamplingStrategy):
    """
    Beta variates by Cheng (1978), algorithms BB and BC.

    BB is used when both shapes exceed one, BC otherwise. Both draw
    ``w = a * exp(v)`` by rejection and return ``w / (b + w)`` or its mirror
    depending on which shape ``a`` denotes.

    References
    ----------
    R. C. H. Cheng, "Generating beta variates with nonintegral shape
    parameters", Communications of the ACM, 21, 317–322, 1978.
    """

    def draw(self, distr: "Distribution", rng: "UniformRandomProvider") -> float:
        shapes = cast(_BetaShapes, distr)
        alpha, beta = shapes.alpha, shapes.beta
        if min(alpha, beta) > 1.0:
            a, b = min(alpha, beta), max(alpha, beta)
            w = self._algorithm_bb(a, b, rng)
        else:
            a, b = max(alpha, beta), min(alpha, beta)
            w = self._algorithm_bc(a, b, rng)
        w = min(w, _DOUBLE_MAX)
        if a == alpha:
            return w / (b + w)
        return b / (b + w)

    @staticmethod
    def _algorithm_bb(a: float, b: float, rng: "UniformRandomProvider") -> float:
        total = a + b
        beta = math.sqrt((total - 2.0) / (2.0 * a * b - total))
        gamma = a + 1.0 / beta
        while True:
            u1 = open_uniform(rng)
            u2 = open_uniform(rng)
            v = beta * (math.log(u1) - math.log1p(-u1))
            w = a * exp_clamped(v)
            z = u1 * u1 * u2
            r = gamma * v - _LN_4
            s = a + r - w
            if s + 2.609438 >= 5.0 * z:
                return w
            t = math.log(z)
            if s > t:
                return w
            if r + total * (math.log(total) - math.log(b + w)) >= t:
                return w

    @staticmethod
    def _algorithm_bc(a: float, b: float, rng: "UniformRandomProvider") -> float:
        total = a + b
        beta = 1.0 / b
        delta = 1.0 + a - b
        k1 = delta * (1.0 / 72.0 + 3.0 / 72.0 * b) / (a * beta - 7.0 / 9.0)
        k2 = 0.25 + (0.5 + 0.25 / delta) * b
        while True:
            u1 = open_uniform(rng)
            u2 = open_uniform(rng)
            y = u1 * u2
            z = u1 * y
            if u1 < 0.5:
                if 0.25 * u2 + z - y >= k1:
                    continue
            else:
                if z <= 0.25:
                    v = beta * (math.log(u1) - math.log1p(-u1))
                    return a * exp_clamped(v)
                if z >= k2:
                    continue
            v = beta * (math.log(u1) - math.log1p(-u1))
            w = a * exp_clamped(v)
            if total * (math.log(total) - math.log(b + w) + v) - _LN_4_APPROX >= math.log(z):
                return w


class MarsagliaTsangGammaSamplingStrategy(SamplingStrategy):
    """
    Gamma variates by the Marsaglia–Tsang squeeze method.

    For ``shape < 1`` a variate with shape ``shape + 1`` is drawn and scaled
    by ``U ** (1 / shape)``.

    References
    ----------
    G. Marsaglia and W. W. Tsang, "A simple method for generating gamma
    variables", ACM Transactions on Mathematical Software, 26, 363–372, 2000.
    """

    def draw(self, distr: "Distribution", rng: "UniformRandomProvider") -> float:
        params = cast(_GammaShapes, distr)
        shape = params.shape
        boost = 1.0
        if shape < 1.0:
            boost = open_uniform(rng) ** (1.0 / shape)
            shape += 1.0

        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        while True:
            x = standard_normal(rng)
            t = 1.0 + c * x
            if t <= 0.0:
                continue
            v = t * t * t
            u = open_uniform(rng)
            x2 = x * x
            if u < 1.0 - 0.0331 * x2 * x2:
                break
            if math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
                break
        return d * v * boost * params.scale


__all__ = [
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
    "ChengBetaSamplingStrategy",
    "MarsagliaTsangGammaSamplingStrategy",
]
