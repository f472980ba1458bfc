"""
Characteristics API
===================

Generic functions for evaluating a distribution's characteristic (e.g.,
``pdf``, ``cdf``, ``ppf``, ``mean``) resolved by its computation strategy.

Each function in this module is a :class:`GenericCharacteristic` bound to a
:class:`~pysatl_rayleigh.types.CharacteristicName`, so the same call works
for any distribution that provides the characteristic:

>>> from pysatl_rayleigh.distributions.characteristics import cdf, mean
>>> # cdf(distribution, 1.5), mean(distribution)

Notes
-----
- The characteristic name controls *what* to compute.
- ``**options`` are forwarded to the resolved callable and control *how*
  to compute it (e.g., ``excess=False`` for kurtosis).
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pysatl_rayleigh.types import CharacteristicName, GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_rayleigh.distributions.distribution import Distribution


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g., ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Notes
    -----
    This object does not implement the characteristic itself. It resolves the
    analytical function through the distribution's
    :class:`~pysatl_rayleigh.distributions.strategies.ComputationStrategy`
    and calls it.
    """

    name: GenericCharacteristicName

    def __call__(
        self, distribution: "Distribution", data: In | None = None, **options: Any
    ) -> Out:
        """
        Evaluate the characteristic on the given data.

        Parameters
        ----------
        distribution : Distribution
            Distribution instance providing the computation strategy.
        data : Any, optional
            Argument of the characteristic; omitted for moments.
        **options
            Options of the analytical callable.

        Returns
        -------
        Any
            Characteristic value at ``data``.
        """
        method = distribution.computation_strategy.query_method(self.name, distribution)
        return method(data, **options)  # type: ignore[no-any-return]


pdf = GenericCharacteristic[Any, Any](CharacteristicName.PDF)
logpdf = GenericCharacteristic[Any, Any](CharacteristicName.LOGPDF)
cdf = GenericCharacteristic[Any, Any](CharacteristicName.CDF)
logcdf = GenericCharacteristic[Any, Any](CharacteristicName.LOGCDF)
sf = GenericCharacteristic[Any, Any](CharacteristicName.SF)
logsf = GenericCharacteristic[Any, Any](CharacteristicName.LOGSF)
ppf = GenericCharacteristic[Any, Any](CharacteristicName.PPF)
isf = GenericCharacteristic[Any, Any](CharacteristicName.ISF)

# ccdf is the same function as the survival function
ccdf = sf
logccdf = logsf
quantile = ppf

mean = GenericCharacteristic[None, Any](CharacteristicName.MEAN)
median = GenericCharacteristic[None, Any](CharacteristicName.MEDIAN)
mode = GenericCharacteristic[None, Any](CharacteristicName.MODE)
var = GenericCharacteristic[None, Any](CharacteristicName.VAR)
std = GenericCharacteristic[None, Any](CharacteristicName.STD)
skewness = GenericCharacteristic[None, Any](CharacteristicName.SKEW)
kurtosis = GenericCharacteristic[None, Any](CharacteristicName.KURT)
entropy = GenericCharacteristic[None, Any](CharacteristicName.ENTROPY)
scale = GenericCharacteristic[None, Any](CharacteristicName.SCALE)


__all__ = [
    "GenericCharacteristic",
    "pdf",
    "logpdf",
    "cdf",
    "logcdf",
    "sf",
    "logsf",
    "ccdf",
    "logccdf",
    "ppf",
    "isf",
    "quantile",
    "mean",
    "median",
    "mode",
    "var",
    "std",
    "skewness",
    "kurtosis",
    "entropy",
    "scale",
]
