"""
Tests for Beta Distribution Family

This module tests the Beta distribution: complementary tail precision,
boundary log-density, solver-based quantiles and sampling.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import beta as beta_dist

from pysatl_distributions.errors import ParameterError
from pysatl_distributions.families import BetaDistribution

from ..base import ContinuousDistributionContract


class TestBetaDistribution(ContinuousDistributionContract):
    """Test suite for the Beta distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = BetaDistribution(alpha=2.5, beta=4.0)

    def make_distribution(self):
        return self.dist

    def points(self):
        return [0.0, 1e-8, 0.01, 0.2, 0.35, 0.6, 0.9, 0.99, 1.0]

    def parameter_accessors(self):
        return [
            ("alpha", lambda d: d.alpha, 2.5),
            ("beta", lambda d: d.beta, 4.0),
        ]

    @pytest.mark.parametrize(
        "alpha, beta",
        [
            (0.0, 1.0),
            (-2.0, 1.0),
            (1.0, 0.0),
            (1.0, -1.0),
            (math.nan, 1.0),
            (math.inf, 1.0),
            (1.0, math.inf),
        ],
    )
    def test_invalid_shapes(self, alpha, beta):
        """Test that both shapes must be positive and finite."""
        with pytest.raises(ParameterError):
            BetaDistribution(alpha=alpha, beta=beta)

    def test_matches_scipy(self):
        """Test density and CDF against scipy.stats.beta."""
        xs = np.array([1e-8, 0.01, 0.2, 0.35, 0.6, 0.9, 0.99])
        expected = beta_dist(2.5, 4.0)
        self.assert_arrays_almost_equal(
            np.array([self.dist.density(x) for x in xs]), expected.pdf(xs)
        )
        self.assert_arrays_almost_equal(
            np.array([self.dist.cumulative_probability(x) for x in xs]), expected.cdf(xs)
        )

    @pytest.mark.parametrize(
        "alpha, beta, x, expected",
        [
            (5.0, 5.0, 0.0001, 1.2595800539968654e-18),
            (4.0, 5.0, 0.00001, 6.999776002800025e-19),
            (5.0, 4.0, 0.0001, 5.598600119996539e-19),
            (6.0, 2.0, 0.001, 6.994000000000028e-18),
            (2.0, 6.0, 1e-9, 2.0999999930000014e-17),
        ],
    )
    def test_cumulative_precision(self, alpha, beta, x, expected):
        """Test that a tiny CDF near zero keeps its precision."""
        dist = BetaDistribution(alpha=alpha, beta=beta)
        assert dist.cumulative_probability(x) == pytest.approx(expected, abs=1e-22)

    @pytest.mark.parametrize(
        "alpha, beta, x, expected",
        [
            (5.0, 5.0, 0.9999, 1.2595800539961496e-18),
            (4.0, 5.0, 0.9999, 5.598600119993397e-19),
            (5.0, 4.0, 0.99998, 1.1199283217964632e-17),
            (6.0, 2.0, 0.999999999, 2.0999998742158932e-17),
            (2.0, 6.0, 0.999, 6.994000000000077e-18),
        ],
    )
    def test_survival_precision(self, alpha, beta, x, expected):
        """Test that a tiny SF near one keeps its precision."""
        dist = BetaDistribution(alpha=alpha, beta=beta)
        assert dist.survival_probability(x) == pytest.approx(expected, abs=1e-22)

    def test_log_density_diverges_at_lower_bound(self):
        """Test the infinite log density at zero when alpha < 1."""
        assert BetaDistribution(alpha=0.5, beta=3.0).log_density(0.0) == math.inf

    def test_log_density_diverges_at_upper_bound(self):
        """Test the infinite log density at one when beta < 1."""
        assert BetaDistribution(alpha=2.0, beta=0.5).log_density(1.0) == math.inf

    def test_density_outside_support(self):
        """Test density and log density outside [0, 1]."""
        assert self.dist.density(-0.5) == 0.0
        assert self.dist.log_density(1.5) == -math.inf

    @pytest.mark.parametrize("p", [1e-12, 0.05, 0.5, 0.95])
    def test_quantiles_match_scipy(self, p):
        """Test solver quantiles against scipy."""
        self.assert_relatively_close(
            self.dist.inverse_cumulative_probability(p),
            float(beta_dist.ppf(p, 2.5, 4.0)),
            rtol=1e-9,
        )
        self.assert_relatively_close(
            self.dist.inverse_survival_probability(p),
            float(beta_dist.isf(p, 2.5, 4.0)),
            rtol=1e-9,
        )

    def test_solver_options_are_forwarded(self):
        """Test that keyword options reach the solver."""
        coarse = self.dist.inverse_cumulative_probability(0.3, absolute_tolerance=1e-3)
        assert coarse == pytest.approx(float(beta_dist.ppf(0.3, 2.5, 4.0)), abs=1e-3)

    def test_moments(self):
        """Test mean and variance."""
        assert self.dist.mean() == pytest.approx(2.5 / 6.5)
        assert self.dist.variance() == pytest.approx(10.0 / (6.5 * 6.5 * 7.5))

    def test_tiny_shapes(self):
        """Test that moments and quantiles stay defined for tiny shapes."""
        dist = BetaDistribution(alpha=1e-200, beta=1e-200)
        assert dist.mean() == 0.5
        assert dist.variance() == pytest.approx(0.25)
        x = dist.inverse_cumulative_probability(0.5)
        assert 0.0 <= x <= 1.0
        q = dist.inverse_survival_probability(0.5)
        assert 0.0 <= q <= 1.0
