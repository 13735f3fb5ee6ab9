"""
Tests for Laplace Distribution Family
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import laplace

from pysatl_distributions.errors import ParameterError
from pysatl_distributions.families import LaplaceDistribution

from ..base import ContinuousDistributionContract


class TestLaplaceDistribution(ContinuousDistributionContract):
    """Test suite for the Laplace distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = LaplaceDistribution(mu=1.0, beta=2.0)

    def make_distribution(self):
        return self.dist

    def points(self):
        return [-30.0, -5.0, 0.0, 1.0, 2.0, 4.0, 10.0, 25.0]

    def parameter_accessors(self):
        return [
            ("mu", lambda d: d.mu, 1.0),
            ("beta", lambda d: d.beta, 2.0),
        ]

    @pytest.mark.parametrize("beta", [0.0, -0.5, math.inf, math.nan])
    def test_invalid_scale(self, beta):
        """Test that the scale must be positive and finite."""
        with pytest.raises(ParameterError, match="0 < beta < inf"):
            LaplaceDistribution(mu=0.0, beta=beta)

    @pytest.mark.parametrize("mu", [-math.inf, math.inf, math.nan])
    def test_invalid_location(self, mu):
        """Test that the location must be finite."""
        with pytest.raises(ParameterError, match="mu is finite"):
            LaplaceDistribution(mu=mu, beta=1.0)

    def test_matches_scipy(self):
        """Test density and CDF against scipy.stats.laplace."""
        xs = np.array(self.points())
        expected = laplace(loc=1.0, scale=2.0)
        self.assert_arrays_almost_equal(
            np.array([self.dist.density(x) for x in xs]), expected.pdf(xs)
        )
        self.assert_arrays_almost_equal(
            np.array([self.dist.cumulative_probability(x) for x in xs]), expected.cdf(xs)
        )

    def test_tails(self):
        """Test that both tails keep relative accuracy."""
        self.assert_relatively_close(
            self.dist.cumulative_probability(-1000.0), 0.5 * math.exp(-500.5), rtol=1e-14
        )
        self.assert_relatively_close(
            self.dist.survival_probability(1000.0), 0.5 * math.exp(-499.5), rtol=1e-14
        )

    @pytest.mark.parametrize("p", [1e-300, 0.1, 0.5, 0.9])
    def test_quantiles(self, p):
        """Test closed-form quantiles against scipy."""
        self.assert_relatively_close(
            self.dist.inverse_cumulative_probability(p),
            float(laplace.ppf(p, loc=1.0, scale=2.0)),
            rtol=1e-12,
        )
        self.assert_relatively_close(
            self.dist.inverse_survival_probability(p),
            float(laplace.isf(p, loc=1.0, scale=2.0)),
            rtol=1e-12,
        )

    def test_median(self):
        """Test that the median is the location."""
        assert self.dist.inverse_cumulative_probability(0.5) == 1.0
        assert self.dist.inverse_survival_probability(0.5) == 1.0

    def test_moments(self):
        """Test mean and variance."""
        assert self.dist.mean() == 1.0
        assert self.dist.variance() == 8.0
