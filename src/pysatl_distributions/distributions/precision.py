"""
Precision-Preserving Primitives
===============================

Small scalar helpers shared by the distribution families to evaluate tail
probabilities without cancellation.

Two patterns recur:

- **Complementary selection.** The CDF and the SF are each computed by the
  formula that is accurate when *that* value is small; neither is obtained as
  ``1 - other`` where ``other`` is close to one.
- **Log-space reformulation.** For a rate-like parameter ``p`` close to zero,
  ``(1 - p) ** x`` amplifies the rounding error of ``1 - p``. It is evaluated as
  ``exp(x * log1p(-p))`` and its complement as ``-expm1(x * log1p(-p))``.
  When ``1 - p`` is exact (``p >= 0.5``) the direct power function is used so
  the result matches the textbook formula bit for bit.

Notes
-----
All helpers are scalar (``float -> float``). They never raise for finite or
infinite arguments in their documented domain; limiting values are returned
instead of ``math`` domain or overflow errors.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

LOG_DOUBLE_MAX = math.log(sys.float_info.max)
"""Largest argument for which ``exp`` is finite."""

# 1 - p is exact in binary floating point for p in [0.5, 1] (Sterbenz lemma)
_EXACT_COMPLEMENT_THRESHOLD = 0.5


def log1m(p: float) -> float:
    """
    Compute ``log(1 - p)`` accurately for ``p`` in ``[0, 1]``.

    Returns ``-inf`` at ``p = 1`` instead of raising.
    """
    if p >= 1.0:
        return -math.inf
    return math.log1p(-p)


def pow1m(p: float, x: float, log1mp: float) -> float:
    """
    Compute ``(1 - p) ** x`` for a probability ``p`` and ``x >= 0``.

    Parameters
    ----------
    p : float
        Probability in ``(0, 1]``.
    x : float
        Non-negative exponent.
    log1mp : float
        Precomputed ``log1m(p)``.

    Returns
    -------
    float
        ``(1 - p) ** x``. Uses the power function when ``1 - p`` is exact and
        ``exp(x * log1p(-p))`` otherwise.
    """
    if x == 0:
        return 1.0
    if p >= _EXACT_COMPLEMENT_THRESHOLD:
        return (1.0 - p) ** x
    return math.exp(x * log1mp)


def one_minus_pow1m(x: float, log1mp: float) -> float:
    """
    Compute ``1 - (1 - p) ** x`` as ``-expm1(x * log1p(-p))``.

    Accurate when the result is tiny, i.e. ``p * x`` is close to zero.
    """
    if x == 0:
        return 0.0
    return -math.expm1(x * log1mp)


def exp_clamped(v: float) -> float:
    """``exp(v)`` saturating to ``inf`` instead of raising ``OverflowError``."""
    if v > LOG_DOUBLE_MAX:
        return math.inf
    return math.exp(v)


__all__ = [
    "LOG_DOUBLE_MAX",
    "log1m",
    "pow1m",
    "one_minus_pow1m",
    "exp_clamped",
]
