"""
Tests for Exponential Distribution Family

This module tests the functionality of the exponential distribution family,
including parametrizations and tail probabilities.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import expon

from pysatl_distributions.errors import ParameterError
from pysatl_distributions.families import ExponentialDistribution
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import FamilyName

from ..base import ContinuousDistributionContract


class TestExponentialDistribution(ContinuousDistributionContract):
    """Test suite for the Exponential distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = ExponentialDistribution(lambda_=0.5)

    def make_distribution(self):
        return self.dist

    def points(self):
        return [-1.0, 0.0, 0.1, 1.0, 2.0, 5.0, 20.0, 100.0]

    def parameter_accessors(self):
        return [("lambda_", lambda d: d.lambda_, 0.5)]

    def test_scale_parametrization(self):
        """Test creation through the scale parametrization."""
        family = configure_families_register().get(FamilyName.EXPONENTIAL)
        assert family.parametrization_names == ["rate", "scale"]
        assert family.distribution("scale", beta=2.0) == self.dist

    @pytest.mark.parametrize("lambda_", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_rate(self, lambda_):
        """Test that the rate must be positive and finite."""
        with pytest.raises(ParameterError, match="0 < lambda_ < inf"):
            ExponentialDistribution(lambda_=lambda_)

    def test_invalid_scale(self):
        """Test scale parametrization constraints."""
        with pytest.raises(ParameterError, match="beta > 0"):
            ExponentialDistribution.from_scale(beta=0.0)
        with pytest.raises(ParameterError, match="0 < lambda_ < inf"):
            ExponentialDistribution.from_scale(beta=5e-324)

    def test_matches_scipy(self):
        """Test density and SF against scipy.stats.expon."""
        xs = np.array([0.1, 1.0, 2.0, 5.0, 20.0])
        expected = expon(scale=2.0)
        self.assert_arrays_almost_equal(
            np.array([self.dist.density(x) for x in xs]), expected.pdf(xs)
        )
        for x in xs:
            self.assert_relatively_close(
                self.dist.survival_probability(x), float(expected.sf(x)), rtol=1e-14
            )

    def test_small_cdf_keeps_relative_accuracy(self):
        """Test that a tiny CDF keeps relative accuracy."""
        self.assert_relatively_close(self.dist.cumulative_probability(1e-300), 5e-301, rtol=1e-15)

    @pytest.mark.parametrize("p", [1e-300, 1e-10, 0.5, 0.999999])
    def test_quantiles(self, p):
        """Test closed-form quantiles against scipy."""
        self.assert_relatively_close(
            self.dist.inverse_cumulative_probability(p), float(expon.ppf(p, scale=2.0)), rtol=1e-12
        )
        self.assert_relatively_close(
            self.dist.inverse_survival_probability(p), float(expon.isf(p, scale=2.0)), rtol=1e-12
        )

    def test_moments(self):
        """Test mean and variance."""
        assert self.dist.mean() == 2.0
        assert self.dist.variance() == 4.0

    def test_moments_at_tiny_rate(self):
        """Test that moments saturate to infinity instead of raising."""
        dist = ExponentialDistribution(lambda_=1e-200)
        assert dist.mean() == pytest.approx(1e200)
        assert dist.variance() == math.inf
        assert dist.inverse_cumulative_probability(0.5) == pytest.approx(math.log(2.0) * 1e200)
