"""
Distribution Errors
===================

Exception hierarchy shared by all distributions:

- :class:`ParameterError`: a constructor argument violates its constraint.
- :class:`DomainError`: a query argument (e.g. a probability) is out of range.
- :class:`ConvergenceError`: the quantile solver exhausted its iteration budget.

All three derive from :class:`DistributionError`. ``ParameterError`` and
``DomainError`` are also ``ValueError`` subclasses and ``ConvergenceError`` is a
``RuntimeError`` subclass, so generic handlers keep working.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class DistributionError(Exception):
    """Base class for all distribution errors."""


class ParameterError(DistributionError, ValueError):
    """
    Raised at construction when a parameter violates its domain constraint.

    Parameters
    ----------
    parameter : str
        Name of the offending parameter.
    value : Any
        The rejected value.
    constraint : str
        Human-readable description of the violated constraint.
    """

    def __init__(self, parameter: str, value: Any, constraint: str) -> None:
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        super().__init__(
            f'Invalid parameter {parameter}={value!r}: constraint "{constraint}" does not hold'
        )


class DomainError(DistributionError, ValueError):
    """
    Raised when a query argument lies outside the function's domain.

    Parameters
    ----------
    value : Any
        The rejected argument.
    constraint : str
        Description of the expected domain.
    """

    def __init__(self, value: Any, constraint: str) -> None:
        self.value = value
        self.constraint = constraint
        super().__init__(f"Argument {value!r} is out of domain: {constraint}")


class ConvergenceError(DistributionError, RuntimeError):
    """
    Raised when a numerical search stops without meeting its tolerance.

    Parameters
    ----------
    message : str
        Description of the failed search.
    iterations : int
        Number of iterations performed.
    tolerance : float
        Relative tolerance that was requested.
    bracket : tuple[float, float]
        Last bracket held by the search.
    """

    def __init__(
        self,
        message: str,
        *,
        iterations: int,
        tolerance: float,
        bracket: tuple[float, float],
    ) -> None:
        self.iterations = iterations
        self.tolerance = tolerance
        self.bracket = bracket
        super().__init__(
            f"{message} (iterations={iterations}, tolerance={tolerance:g}, "
            f"bracket=[{bracket[0]!r}, {bracket[1]!r}])"
        )


__all__ = [
    "DistributionError",
    "ParameterError",
    "DomainError",
    "ConvergenceError",
]
