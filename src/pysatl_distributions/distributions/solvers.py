"""
Quantile Solvers
================

Generic inversion of monotone probability functions, used by every
distribution that has no closed-form quantile:

- :func:`inverse_continuous`: bracket expansion followed by bisection on the
  real line.
- :func:`inverse_discrete`: integer bisection returning the smallest index
  that reaches the target.

Both work on the CDF (non-decreasing, target ``p``) or, with
``complement=True``, on the SF (non-increasing, target ``q = 1 - p``), and
both return the *smallest* ``x`` such that ``cdf(x) >= p`` (respectively
``sf(x) <= q``).

Notes
-----
- Tolerances and iteration budgets live in :class:`SolverSettings`; callers
  override them per call with keyword options.
- The one-sided Chebyshev (Cantelli) inequality seeds the bracket when the
  mean and variance are finite. Seeds are always verified against the
  function before use.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import sys
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from pysatl_distributions.errors import ConvergenceError
from pysatl_distributions.types import INT_MIN

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_distributions.types import IntegerFunc, ScalarFunc

logger = logging.getLogger(__name__)

DOUBLE_MAX = sys.float_info.max


@dataclass(frozen=True, slots=True)
class SolverSettings:
    """
    Numerical settings of the continuous quantile solver.

    Parameters
    ----------
    relative_tolerance : float, default 2 * machine epsilon
        Stop once ``hi - lo <= relative_tolerance * max(|lo|, |hi|)``.
    absolute_tolerance : float, default 0.0
        Stop once ``hi - lo <= absolute_tolerance``.
    function_tolerance : float, default 0.0
        If positive, stop once ``|f(hi) - f(lo)| <= function_tolerance``.
    max_iterations : int, default 2200
        Bisection budget. Enough to walk from ``±DBL_MAX`` to the smallest
        subnormal spacing.
    max_expansions : int, default 1100
        Budget of the geometric bracket expansion.
    expansion_factor : float, default 2.0
        Growth factor of the expansion step.
    """

    relative_tolerance: float = 2.0 * sys.float_info.epsilon
    absolute_tolerance: float = 0.0
    function_tolerance: float = 0.0
    max_iterations: int = 2200
    max_expansions: int = 1100
    expansion_factor: float = 2.0

    def with_options(self, **options: Any) -> SolverSettings:
        """
        Return settings with the given fields overridden.

        Raises
        ------
        TypeError
            If an option does not name a settings field.
        """
        if not options:
            return self
        return replace(self, **options)


DEFAULT_SOLVER_SETTINGS = SolverSettings()


def _target_predicate(
    func: Callable[[Any], float], p: float, q: float, complement: bool
) -> Callable[[Any], bool]:
    if complement:
        return lambda x: func(x) <= q
    return lambda x: func(x) >= p


def _cantelli_bounds(p: float, q: float, mean: float, variance: float) -> tuple[float, float] | None:
    """
    One-sided Chebyshev bounds ``(mean - sd*sqrt(q/p), mean + sd*sqrt(p/q))``.

    Returns ``None`` when the moments are not finite or the spread is zero.
    """
    if not (math.isfinite(mean) and math.isfinite(variance)) or variance <= 0.0:
        return None
    sd = math.sqrt(variance)
    return mean - sd * math.sqrt(q / p), mean + sd * math.sqrt(p / q)


def _initial_guess(lower: float, upper: float, mean: float) -> float:
    if math.isfinite(mean) and lower <= mean <= upper:
        return mean
    if math.isfinite(lower) and math.isfinite(upper):
        return 0.5 * lower + 0.5 * upper
    if math.isfinite(lower):
        return lower + 1.0
    if math.isfinite(upper):
        return upper - 1.0
    return 0.0


def _expand(
    reached: Callable[[float], bool],
    start: float,
    limit: float,
    direction: int,
    first_step: float,
    want: bool,
    settings: SolverSettings,
) -> float:
    """
    Walk geometrically from ``start`` towards ``limit`` until ``reached(x) == want``.

    Infinite limits are replaced by ``±DBL_MAX``. Returns the clamped limit if
    the walk ends there without meeting the condition.
    """
    edge = max(limit, -DOUBLE_MAX) if direction < 0 else min(limit, DOUBLE_MAX)
    step = first_step if math.isfinite(first_step) and first_step > 0.0 else max(abs(start), 1.0)
    x = start
    for expansion in range(settings.max_expansions):
        candidate = start + direction * step
        if not math.isfinite(candidate) or (candidate - edge) * direction >= 0.0:
            candidate = edge
        x = candidate
        if reached(x) == want or x == edge:
            logger.debug(
                "Bracket side %r found after %d expansion(s) from %r", x, expansion + 1, start
            )
            return x
        step *= settings.expansion_factor
    raise ConvergenceError(
        "Bracket expansion did not enclose the target",
        iterations=settings.max_expansions,
        tolerance=settings.relative_tolerance,
        bracket=(min(start, x), max(start, x)),
    )


def _bisect(
    func: ScalarFunc,
    reached: Callable[[float], bool],
    lo: float,
    hi: float,
    settings: SolverSettings,
) -> float:
    """Bisection keeping ``reached(lo) is False`` and ``reached(hi) is True``."""
    use_values = settings.function_tolerance > 0.0
    f_lo = func(lo) if use_values else 0.0
    f_hi = func(hi) if use_values else 0.0

    for iteration in range(settings.max_iterations):
        scale = max(abs(lo), abs(hi))
        if hi - lo <= max(settings.absolute_tolerance, settings.relative_tolerance * scale):
            logger.debug("Bisection converged on width after %d iteration(s)", iteration)
            return hi
        if use_values and abs(f_hi - f_lo) <= settings.function_tolerance:
            logger.debug("Bisection converged on value after %d iteration(s)", iteration)
            return hi

        mid = 0.5 * lo + 0.5 * hi
        if mid <= lo or mid >= hi:
            # lo and hi are adjacent doubles
            logger.debug("Bisection exhausted representable points after %d iteration(s)", iteration)
            return hi

        f_mid = func(mid) if use_values else 0.0
        if reached(mid):
            hi, f_hi = mid, f_mid
        else:
            lo, f_lo = mid, f_mid

    raise ConvergenceError(
        "Bisection did not converge",
        iterations=settings.max_iterations,
        tolerance=settings.relative_tolerance,
        bracket=(lo, hi),
    )


def inverse_continuous(
    func: ScalarFunc,
    p: float,
    q: float,
    lower: float,
    upper: float,
    *,
    complement: bool = False,
    mean: float = math.nan,
    variance: float = math.nan,
    settings: SolverSettings | None = None,
) -> float:
    """
    Invert a continuous CDF (or SF) by bracketed bisection.

    Parameters
    ----------
    func : Callable[[float], float]
        The CDF (non-decreasing) or, with ``complement=True``, the SF
        (non-increasing).
    p : float
        Target cumulative probability in ``[0, 1]``.
    q : float
        Target survival probability, ``1 - p`` computed by the caller in the
        precision it has.
    lower, upper : float
        Support bounds; either may be infinite.
    complement : bool, default False
        Search on the SF with target ``q`` instead of the CDF with target ``p``.
    mean, variance : float, optional
        Moments of the distribution, used to seed the bracket.
    settings : SolverSettings, optional
        Numerical settings; defaults to :data:`DEFAULT_SOLVER_SETTINGS`.

    Returns
    -------
    float
        The smallest bracketed ``x`` with ``cdf(x) >= p`` (or ``sf(x) <= q``),
        to within the configured tolerance. ``lower`` if ``p == 0`` and
        ``upper`` if ``q == 0``.

    Raises
    ------
    ConvergenceError
        If the expansion or bisection budget is exhausted.
    """
    if p == 0.0:
        return lower
    if q == 0.0:
        return upper
    settings = settings or DEFAULT_SOLVER_SETTINGS
    reached = _target_predicate(func, p, q, complement)

    anchor = _initial_guess(lower, upper, mean)
    bounds = _cantelli_bounds(p, q, mean, variance)
    step_down = anchor - bounds[0] if bounds is not None else math.nan
    step_up = bounds[1] - anchor if bounds is not None else math.nan

    if reached(anchor):
        hi = anchor
        lo = _expand(reached, anchor, lower, -1, step_down, False, settings)
        if reached(lo):
            return lo
    else:
        lo = anchor
        hi = _expand(reached, anchor, upper, 1, step_up, True, settings)
        if not reached(hi):
            return hi

    return _bisect(func, reached, lo, hi, settings)


def inverse_discrete(
    func: IntegerFunc,
    p: float,
    q: float,
    lower: int,
    upper: int,
    *,
    complement: bool = False,
    mean: float = math.nan,
    variance: float = math.nan,
) -> int:
    """
    Invert a discrete CDF (or SF) on the integers.

    Parameters
    ----------
    func : Callable[[int], float]
        The CDF or, with ``complement=True``, the SF.
    p, q : float
        Target cumulative and survival probabilities (``q = 1 - p``).
    lower, upper : int
        Support bounds within ``[INT_MIN, INT_MAX]``.
    complement : bool, default False
        Search on the SF with target ``q``.
    mean, variance : float, optional
        Moments used to narrow the bracket with Cantelli's inequality.

    Returns
    -------
    int
        The smallest ``x`` in ``[lower, upper]`` with ``cdf(x) >= p`` (or
        ``sf(x) <= q``); ``upper`` if no support point reaches the target.

    Notes
    -----
    The search keeps ``reached(lo) is False``. Below ``lower`` the CDF is 0 and
    the SF is 1, so ``lower - 1`` is a valid left end, except when ``lower`` is
    already the smallest representable index: that point is checked directly.
    """
    if p == 0.0:
        return lower
    if q == 0.0:
        return upper
    reached = _target_predicate(func, p, q, complement)

    if lower == INT_MIN:
        if reached(lower):
            return lower
    else:
        lower -= 1

    bounds = _cantelli_bounds(p, q, mean, variance)
    if bounds is not None:
        left, right = bounds
        if left > lower:
            candidate = math.ceil(left) - 1
            if not reached(candidate):
                lower = candidate
        if right < upper:
            candidate = math.ceil(right) - 1
            if candidate > lower and reached(candidate):
                upper = candidate

    iterations = 0
    while lower + 1 < upper:
        mid = (lower + upper) // 2
        if reached(mid):
            upper = mid
        else:
            lower = mid
        iterations += 1
    logger.debug("Integer bisection finished after %d iteration(s) at %d", iterations, upper)
    return upper


__all__ = [
    "SolverSettings",
    "DEFAULT_SOLVER_SETTINGS",
    "inverse_continuous",
    "inverse_discrete",
]
