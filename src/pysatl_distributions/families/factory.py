"""
Tagged-result construction of distributions.

Constructors raise :class:`~pysatl_distributions.errors.ParameterError` on
invalid input. The functions here wrap construction into a
:class:`Created` / :class:`Rejected` result so that ordinary validation
failures can be handled without exceptions::

    match create(FamilyName.BETA, alpha=2.0, beta=0.0):
        case Created(distribution):
            ...
        case Rejected(error):
            print(error.parameter, error.constraint)
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_distributions.errors import ParameterError
from pysatl_distributions.families.configuration import configure_families_register

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_distributions.distributions.distribution import Distribution

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Created[D]:
    """Successful construction."""

    distribution: D

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """Construction refused; ``error`` names the violated constraint."""

    error: ParameterError

    @property
    def ok(self) -> bool:
        return False


type CreationResult[D] = Created[D] | Rejected


def try_create[D](constructor: Callable[..., D], /, **params: Any) -> CreationResult[D]:
    """
    Call ``constructor(**params)`` and tag the outcome.

    Parameters
    ----------
    constructor : Callable[..., D]
        A distribution class or alternative constructor such as
        ``NormalDistribution.from_precision``.
    **params
        Parameter values.

    Returns
    -------
    Created[D] or Rejected
        ``Rejected`` if a parameter constraint does not hold. Other errors
        (e.g. a missing argument) propagate.
    """
    try:
        return Created(constructor(**params))
    except ParameterError as error:
        name = getattr(constructor, "__qualname__", repr(constructor))
        logger.debug("Rejected %s with %r: %s", name, params, error)
        return Rejected(error)


def create(
    name: str, /, parametrization: str | None = None, **params: Any
) -> CreationResult[Distribution]:
    """
    Construct a registered family by name.

    Parameters
    ----------
    name : FamilyName or str
        Registered family name.
    parametrization : str, optional
        Parametrization name; the family's base parametrization by default.
    **params
        Parameter values.

    Raises
    ------
    ValueError
        If the family is not registered.
    KeyError
        If the parametrization is not registered for the family.
    """
    family = configure_families_register().get(name)
    return try_create(family.constructor(parametrization), **params)


__all__ = ["Created", "Rejected", "CreationResult", "try_create", "create"]
