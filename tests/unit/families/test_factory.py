"""
Tests for tagged-result construction of distributions.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math

import pytest

from pysatl_distributions.errors import ParameterError
from pysatl_distributions.families import (
    BetaDistribution,
    Created,
    ExponentialDistribution,
    GeometricDistribution,
    NormalDistribution,
    Rejected,
    UniformDistribution,
    create,
    try_create,
)
from pysatl_distributions.types import FamilyName


class TestTryCreate:
    def test_valid_parameters_are_created(self):
        result = try_create(BetaDistribution, alpha=2.0, beta=3.0)
        assert isinstance(result, Created)
        assert result.ok
        assert result.distribution == BetaDistribution(alpha=2.0, beta=3.0)

    @pytest.mark.parametrize(
        "alpha, beta, parameter",
        [(0.0, 1.0, "alpha"), (-1.0, 1.0, "alpha"), (1.0, 0.0, "beta"), (1.0, math.nan, "beta")],
    )
    def test_invalid_parameters_are_rejected(self, alpha, beta, parameter):
        result = try_create(BetaDistribution, alpha=alpha, beta=beta)
        assert isinstance(result, Rejected)
        assert not result.ok
        assert isinstance(result.error, ParameterError)
        assert result.error.parameter == parameter

    def test_alternative_constructor(self):
        result = try_create(ExponentialDistribution.from_scale, beta=0.5)
        assert isinstance(result, Created)
        assert result.distribution.lambda_ == 2.0

    def test_alternative_constructor_rejects(self):
        result = try_create(UniformDistribution.from_mean_width, mean=0.0, width=-1.0)
        assert isinstance(result, Rejected)

    def test_pattern_matching(self):
        match try_create(GeometricDistribution, p=1.5):
            case Created(distribution):
                pytest.fail(f"unexpected {distribution!r}")
            case Rejected(error):
                assert error.parameter == "p"
                assert error.value == 1.5

    def test_missing_argument_propagates(self):
        with pytest.raises(TypeError):
            try_create(NormalDistribution, mu=0.0)

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pysatl_distributions.families.factory"):
            try_create(NormalDistribution, mu=0.0, sigma=0.0)
        assert any("Rejected" in record.getMessage() for record in caplog.records)


class TestCreateByName:
    def test_base_parametrization(self):
        result = create(FamilyName.NORMAL, mu=0.0, sigma=2.0)
        assert isinstance(result, Created)
        assert result.distribution == NormalDistribution(mu=0.0, sigma=2.0)

    def test_named_parametrization(self):
        result = create(FamilyName.CONTINUOUS_UNIFORM, "meanWidth", mean=1.0, width=4.0)
        assert isinstance(result, Created)
        assert result.distribution == UniformDistribution(lower_bound=-1.0, upper_bound=3.0)

    def test_plain_string_name(self):
        assert create("Poisson", lambda_=2.0).ok

    def test_rejected_by_name(self):
        result = create(FamilyName.BINOMIAL, n=-1, p=0.5)
        assert isinstance(result, Rejected)
        assert result.error.parameter == "n"

    def test_unknown_family_raises(self):
        with pytest.raises(ValueError):
            create("Unknown", x=1.0)

    def test_unknown_parametrization_raises(self):
        with pytest.raises(KeyError):
            create(FamilyName.NORMAL, "meanVar", mu=0.0, var=1.0)
