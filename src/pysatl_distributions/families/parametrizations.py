"""
Parameterization base class and validation decorators for distributions.

This module provides the core abstractions for defining validated
distribution parameters: constraint predicates declared with
:func:`constraint`, collected by :func:`parametrization`, and checked once
at construction by :meth:`Parametrization.validate`.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_distributions.errors import ParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_distributions.types import FamilyName


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    parameter : str
        Name of the parameter reported when the constraint fails.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    parameter: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for validated distribution parameters.

    Subclasses are frozen dataclasses produced by :func:`parametrization`.
    Construction runs :meth:`validate` once and then
    :meth:`_derive_constants`; instances never change afterwards.
    """

    # These attributes are set by the @parametrization decorator
    __family_name__: ClassVar[FamilyName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    def __post_init__(self) -> None:
        self.validate()
        self._derive_constants()

    def _derive_constants(self) -> None:
        """
        Compute constants that depend only on the parameters.

        Called once after validation. Implementations store results with
        ``object.__setattr__`` into ``field(init=False)`` slots.
        """

    @property
    def family_name(self) -> FamilyName:
        """Get the name of the family this parametrization belongs to."""
        return self.__class__.__family_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get declared parameters as a dictionary (derived constants excluded)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.init}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints in declaration order.

        Raises
        ------
        ParameterError
            For the first constraint that is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ParameterError(
                    constraint.parameter,
                    getattr(self, constraint.parameter),
                    constraint.description,
                )


P = ParamSpec("P")


def constraint(
    description: str, *, parameter: str
) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    parameter : str
        Parameter reported in the :class:`ParameterError` when the check fails.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    - __constraint_parameter: parameter
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        setattr(wrapper, "__constraint_parameter", parameter)
        return wrapper

    return decorator


def parametrization[T: Parametrization](*, family: FamilyName) -> Callable[[type[T]], type[T]]:
    """
    Decorator turning a class into a validated frozen parametrization.

    Parameters
    ----------
    family : FamilyName
        Family the parametrized distribution belongs to.

    Returns
    -------
    Callable[[type[T]], type[T]]
        Class decorator.

    Notes
    -----
    Converts the class to a frozen slotted dataclass if not already one and
    collects methods marked with @constraint in declaration order.
    """

    def _collect_constraints(cls: type[T]) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod) and getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @staticmethod"
                )
            if isinstance(attr, classmethod) and getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @classmethod"
                )

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                constraints.append(
                    ParametrizationConstraint(
                        description=getattr(func, "__constraint_description", func.__name__),
                        parameter=getattr(func, "__constraint_parameter"),
                        check=func,
                    )
                )
        return constraints

    def decorator(cls: type[T]) -> type[T]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family_name__ = family
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
