__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_distributions.distributions.precision import (
    LOG_DOUBLE_MAX,
    exp_clamped,
    log1m,
    one_minus_pow1m,
    pow1m,
)


class TestLog1m:
    def test_small_argument_keeps_precision(self):
        assert log1m(1e-20) == -1e-20

    def test_one_gives_negative_infinity(self):
        assert log1m(1.0) == -math.inf

    def test_zero(self):
        assert log1m(0.0) == 0.0


class TestPow1m:
    @pytest.mark.parametrize("p", [0.5, 0.75, 0.9])
    def test_matches_power_function_for_exact_complement(self, p):
        for x in [1.0, 2.0, 7.0, 31.0]:
            assert pow1m(p, x, log1m(p)) == (1.0 - p) ** x

    def test_small_probability_uses_log_space(self):
        p, x = 1e-17, 1e17
        assert pow1m(p, x, log1m(p)) == pytest.approx(math.exp(-1.0), rel=1e-12)

    def test_zero_exponent(self):
        assert pow1m(1.0, 0.0, log1m(1.0)) == 1.0


class TestOneMinusPow1m:
    def test_tiny_result_is_accurate(self):
        p = 1e-300
        assert one_minus_pow1m(1.0, log1m(p)) == pytest.approx(1e-300, rel=1e-15)

    def test_zero_exponent(self):
        assert one_minus_pow1m(0.0, log1m(0.3)) == 0.0

    def test_certain_event(self):
        assert one_minus_pow1m(3.0, log1m(1.0)) == 1.0


class TestHelpers:
    def test_exp_clamped_saturates(self):
        assert exp_clamped(LOG_DOUBLE_MAX + 1.0) == math.inf
        assert exp_clamped(0.0) == 1.0
        assert exp_clamped(-math.inf) == 0.0
