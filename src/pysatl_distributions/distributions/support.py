"""
Support Descriptors
===================

Supports of univariate distributions:

- :class:`ContinuousSupport`: an :class:`~pysatl_distributions.types.Interval1D`.
- :class:`IntegerSupport`: a contiguous range of integers.

Both expose ``lower``, ``upper`` and ``connected`` so that the quantile solver
and the distribution protocols can treat them uniformly.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_distributions.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @property
    def lower(self) -> float: ...
    @property
    def upper(self) -> float: ...
    @property
    def connected(self) -> bool: ...

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D):
    """Interval support of a continuous distribution; always connected."""

    __slots__ = ()

    @property
    def lower(self) -> float:
        return self.left

    @property
    def upper(self) -> float:
        return self.right

    @property
    def connected(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class IntegerSupport:
    """
    Contiguous integer support ``{min_k, min_k + 1, ..., max_k}``.

    Parameters
    ----------
    min_k : int
        Smallest support point.
    max_k : int
        Largest support point.
    connected : bool, default True
        ``False`` when the distribution excludes an interior range.
    """

    min_k: int
    max_k: int
    connected: bool = True

    def __post_init__(self) -> None:
        if self.min_k > self.max_k:
            raise ValueError("min_k must not exceed max_k.")

    @property
    def lower(self) -> int:
        return self.min_k

    @property
    def upper(self) -> int:
        return self.max_k

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            result = (xf == np.floor(xf)) & (xf >= self.min_k) & (xf <= self.max_k)

        if np.ndim(xf) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def __len__(self) -> int:
        return self.max_k - self.min_k + 1

    def iter_points(self) -> Iterator[int]:
        return iter(range(self.min_k, self.max_k + 1))

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
]
