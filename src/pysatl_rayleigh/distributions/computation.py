"""
Computation Primitives
======================

Building blocks used to compute distribution characteristics:

- :class:`Computation` — protocol of a callable bound to one characteristic.
- :class:`AnalyticalComputation` — a closed-form callable supplied by a
  distribution directly.

Notes
-----
Analytical callables of univariate families are vectorised: they accept a
scalar or an array and answer element-wise. Characteristics without an
argument (moments, entropy) ignore ``data``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from pysatl_rayleigh.numerics import squeeze_scalar
from pysatl_rayleigh.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.

    Notes
    -----
    Zero-dimensional array results are returned as NumPy scalars so that
    scalar input gives scalar output.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return squeeze_scalar(self.func(data, **options))  # type: ignore[no-any-return]


__all__ = [
    "Computation",
    "AnalyticalComputation",
]
