"""
Tests for Poisson Distribution Family
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.stats import poisson

from pysatl_distributions.errors import ParameterError
from pysatl_distributions.families import PoissonDistribution
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import INT_MAX, FamilyName

from ..base import DiscreteDistributionContract


class TestPoissonDistribution(DiscreteDistributionContract):
    """Test suite for the Poisson distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = PoissonDistribution(lambda_=4.5)

    def make_distribution(self):
        return self.dist

    def points(self):
        return [-2, 0, 1, 2, 3, 4, 5, 7, 9, 12, 15]

    def parameter_accessors(self):
        return [("lambda_", lambda d: d.lambda_, 4.5)]

    def test_registered_parametrization(self):
        """Test the registered rate parametrization."""
        family = configure_families_register().get(FamilyName.POISSON)
        assert family.parametrization_names == ["rate"]
        assert family(lambda_=4.5) == self.dist

    @pytest.mark.parametrize("lambda_", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_rate(self, lambda_):
        """Test that the rate must be positive and finite."""
        with pytest.raises(ParameterError, match="lambda_"):
            PoissonDistribution(lambda_=lambda_)

    def test_matches_scipy(self):
        """Test mass, CDF and SF against scipy.stats.poisson."""
        for k in range(30):
            self.assert_relatively_close(
                self.dist.probability(k), float(poisson.pmf(k, 4.5)), rtol=1e-12
            )
            self.assert_relatively_close(
                self.dist.cumulative_probability(k), float(poisson.cdf(k, 4.5)), rtol=1e-12
            )
            self.assert_relatively_close(
                self.dist.survival_probability(k), float(poisson.sf(k, 4.5)), rtol=1e-12
            )

    def test_upper_tail_keeps_relative_accuracy(self):
        """Test that a far upper tail keeps relative accuracy."""
        sf = self.dist.survival_probability(100)
        assert 0.0 < sf < 1e-60
        self.assert_relatively_close(sf, float(poisson.sf(100, 4.5)), rtol=1e-10)

    def test_support(self):
        """Test the support bounds."""
        assert self.dist.support_lower_bound() == 0
        assert self.dist.support_upper_bound() == INT_MAX

    @pytest.mark.parametrize("p", [1e-12, 0.05, 0.5, 0.95, 1 - 1e-12])
    def test_quantiles_match_scipy(self, p):
        """Test solver quantiles against scipy."""
        assert self.dist.inverse_cumulative_probability(p) == int(poisson.ppf(p, 4.5))

    def test_survival_quantile_in_far_tail(self):
        """Test the survival quantile of a tiny tail probability."""
        q = 1e-50
        x = self.dist.inverse_survival_probability(q)
        assert self.dist.survival_probability(x) <= q
        assert self.dist.survival_probability(x - 1) > q

    def test_large_rate(self):
        """Test the median for a very large rate."""
        dist = PoissonDistribution(lambda_=1e9)
        x = dist.inverse_cumulative_probability(0.5)
        assert abs(x - 1e9) < 10
        assert dist.cumulative_probability(x) >= 0.5
        assert dist.cumulative_probability(x - 1) < 0.5

    def test_moments(self):
        """Test mean and variance."""
        assert self.dist.mean() == 4.5
        assert self.dist.variance() == 4.5
