"""
Numerical helpers
=================

Precision-aware mathematical constants, resolution of the floating dtype a
set of parameters is stored in, and numerically stable elementary functions
shared by the built-in families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, cast

import numpy as np

from pysatl_rayleigh.errors import InvalidParameterError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, DTypeLike

    from pysatl_rayleigh.types import NumericArray

# Decimal literals are parsed by each dtype, so longdouble keeps its extra digits
_PI = "3.14159265358979323846264338327950288"
_EULER_GAMMA = "0.577215664901532860606512090082402431"
_LN2 = "0.693147180559945309417232121458176568"
_SQRT2 = "1.41421356237309504880168872420969808"
_SQRT_PI = "1.77245385090551602729816748334114518"
_SQRT_HALF_PI = "1.25331413731550025120788264240552263"


@dataclass(frozen=True, slots=True)
class Constants:
    """
    Mathematical constants expressed in a single floating dtype.

    Attributes
    ----------
    pi : numpy.floating
        π.
    euler_gamma : numpy.floating
        Euler–Mascheroni constant γ.
    ln2 : numpy.floating
        Natural logarithm of 2.
    sqrt2 : numpy.floating
        √2.
    sqrt_pi : numpy.floating
        √π.
    sqrt_half_pi : numpy.floating
        √(π/2).
    """

    pi: np.floating[Any]
    euler_gamma: np.floating[Any]
    ln2: np.floating[Any]
    sqrt2: np.floating[Any]
    sqrt_pi: np.floating[Any]
    sqrt_half_pi: np.floating[Any]


@lru_cache(maxsize=None)
def _constants_for(dtype: np.dtype[Any]) -> Constants:
    scalar = dtype.type
    return Constants(
        pi=scalar(_PI),
        euler_gamma=scalar(_EULER_GAMMA),
        ln2=scalar(_LN2),
        sqrt2=scalar(_SQRT2),
        sqrt_pi=scalar(_SQRT_PI),
        sqrt_half_pi=scalar(_SQRT_HALF_PI),
    )


def constants(dtype: DTypeLike = np.float64) -> Constants:
    """
    Return the constant table for a floating dtype.

    Parameters
    ----------
    dtype : DTypeLike, default numpy.float64
        Target floating dtype.

    Returns
    -------
    Constants
        Cached constants in ``dtype``.

    Raises
    ------
    TypeError
        If ``dtype`` is not a floating dtype.
    """
    resolved = np.dtype(dtype)
    if resolved.kind != "f":
        raise TypeError(f"Constants are only defined for floating dtypes, got {resolved}")
    return _constants_for(resolved)


def real_dtype(*values: Any) -> np.dtype[Any]:
    """
    Resolve the floating dtype that represents all ``values``.

    Integer inputs promote to ``float64``; NumPy floating scalars keep their
    own precision. Booleans are rejected.

    Raises
    ------
    InvalidParameterError
        If any value is not a real number.
    """
    dtypes = []
    for value in values:
        if isinstance(value, bool | np.bool_):
            raise InvalidParameterError(f"Expected a real number, got boolean {value!r}")
        dtype = np.asarray(value).dtype
        if dtype.kind not in "iuf":
            raise InvalidParameterError(f"Expected a real number, got {value!r}")
        dtypes.append(dtype)

    if not dtypes:
        return np.dtype(np.float64)

    result = np.result_type(*dtypes)
    if result.kind != "f":
        return np.dtype(np.float64)
    return result


def log1mexp(x: ArrayLike) -> NumericArray:
    """
    Compute ``log(1 - exp(x))`` for ``x <= 0`` without cancellation.

    Uses ``log(-expm1(x))`` near zero and ``log1p(-exp(x))`` for
    ``x < -ln 2`` (Mächler, 2012).

    Parameters
    ----------
    x : ArrayLike
        Non-positive argument(s).

    Returns
    -------
    NumericArray
        ``log(1 - exp(x))``; ``-inf`` at ``x = 0`` and ``nan`` for ``x > 0``.
    """
    arr = np.asarray(x)
    if arr.dtype.kind != "f":
        arr = arr.astype(np.float64)
    threshold = -constants(arr.dtype).ln2
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.where(arr < threshold, np.log1p(-np.exp(arr)), np.log(-np.expm1(arr)))
    return cast("NumericArray", result)


def as_points(x: ArrayLike, dtype: np.dtype[Any]) -> NumericArray:
    """
    Convert evaluation points to an array in the precision of ``dtype``.

    Python numbers, sequences and integer arrays take ``dtype``; floating
    NumPy inputs are promoted together with it.
    """
    if isinstance(x, np.ndarray | np.generic) and x.dtype.kind == "f":
        return cast("NumericArray", np.asarray(x, dtype=np.result_type(x.dtype, dtype)))
    return cast("NumericArray", np.asarray(x, dtype=dtype))


def squeeze_scalar(value: Any) -> Any:
    """Unwrap zero-dimensional arrays into NumPy scalars."""
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value[()]
    return value


__all__ = [
    "Constants",
    "constants",
    "real_dtype",
    "log1mexp",
    "as_points",
    "squeeze_scalar",
]
