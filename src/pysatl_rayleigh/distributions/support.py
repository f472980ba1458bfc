"""
Supports of distributions.

A support answers membership queries; continuous univariate supports are
intervals of the real line, open or closed at each finite end.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_rayleigh.types import Interval1D

if TYPE_CHECKING:
    from pysatl_rayleigh.types import BoolArray, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    def contains(self, x: Number | NumericArray) -> bool | BoolArray: ...


class ContinuousSupport(Interval1D, Support):
    """
    Interval support of a univariate continuous distribution.

    Examples
    --------
    >>> support = ContinuousSupport(left=0.0, left_closed=False)
    >>> 0.0 in support, 1.0 in support
    (False, True)
    """


__all__ = [
    "Support",
    "ContinuousSupport",
]
