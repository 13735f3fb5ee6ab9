"""
Parametric family definitions.

A :class:`ParametricFamily` groups the named constructors of one distribution
(its base parametrization plus alternative ones such as mean/precision for
the Normal distribution) under a :class:`FamilyName`.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_distributions.distributions.distribution import Distribution
    from pysatl_distributions.types import FamilyName, Kind

    type DistributionConstructor = Callable[..., Distribution]


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Parameters
    ----------
    name : FamilyName
        Name of the distribution family.
    kind : Kind
        Continuous or discrete.
    parametrizations : dict[str, Callable[..., Distribution]]
        Mapping from parametrization names to constructors. The first entry
        is the base parametrization.
    """

    def __init__(
        self,
        name: FamilyName,
        kind: Kind,
        parametrizations: dict[str, DistributionConstructor],
    ) -> None:
        if not parametrizations:
            raise ValueError(f"Family {name} needs at least one parametrization.")
        self._name = name
        self._kind = kind
        self._parametrizations = dict(parametrizations)
        self.base_parametrization_name: str = next(iter(self._parametrizations))

    @property
    def name(self) -> FamilyName:
        """Get the family name."""
        return self._name

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def parametrization_names(self) -> list[str]:
        """Parametrization names, base first."""
        return list(self._parametrizations)

    def constructor(self, parametrization_name: str | None = None) -> DistributionConstructor:
        """
        Fetch the constructor of a parametrization (base if ``None``).

        Raises
        ------
        KeyError
            If the name is not registered.
        """
        if parametrization_name is None:
            parametrization_name = self.base_parametrization_name
        try:
            return self._parametrizations[parametrization_name]
        except KeyError as exc:
            raise KeyError(
                f"Parametrization '{parametrization_name}' is not registered for {self._name}."
            ) from exc

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Distribution:
        """
        Create a distribution instance with given parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ParameterError
            If parameters don't satisfy constraints.
        """
        return self.constructor(parametrization_name)(**parameters_values)

    __call__ = distribution


__all__ = ["ParametricFamily"]
