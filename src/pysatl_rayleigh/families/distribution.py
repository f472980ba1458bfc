"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_rayleigh.distributions.distribution import Distribution
from pysatl_rayleigh.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy as np
    from numpy.typing import DTypeLike

    from pysatl_rayleigh.distributions.computation import AnalyticalComputation
    from pysatl_rayleigh.distributions.sampling import Sample
    from pysatl_rayleigh.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_rayleigh.distributions.support import Support
    from pysatl_rayleigh.families.parametric_family import ParametricFamily
    from pysatl_rayleigh.families.parametrizations import Parametrization
    from pysatl_rayleigh.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing methods for computation and sampling. Instances are immutable;
    use :meth:`astype` to obtain the same distribution in another precision.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical_cache: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = (
        field(default=None, init=False, repr=False, compare=False)
    )

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parameters.name

    @property
    def params(self) -> tuple[Any, ...]:
        """Parameter values in the family's base parametrization."""
        return self.family.to_base(self.parameters).values

    @property
    def dtype(self) -> np.dtype[Any]:
        """Floating precision of the parameters."""
        return self.parameters.dtype

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily built on first access and cached per instance.
        """
        if self._analytical_cache is None:
            computations = self.family._build_analytical_computations(self.parameters)
            object.__setattr__(self, "_analytical_cache", computations)
            return computations
        return self._analytical_cache

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    def astype(self, dtype: DTypeLike) -> ParametricFamilyDistribution:
        """
        Re-express the distribution in another floating precision.

        Parameters
        ----------
        dtype : DTypeLike
            Target floating dtype (e.g., ``numpy.float32``).

        Returns
        -------
        ParametricFamilyDistribution
            New distribution of the same family and parametrization.

        Raises
        ------
        InvalidParameterError
            If a parameter no longer satisfies its constraints in ``dtype``
            (e.g., underflow to zero).
        """
        parameters = self.parameters.astype(dtype)
        parameters.validate()
        return self.family.from_parameters(parameters)

    def sample(self, n: int = 1, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int, default 1
            Number of samples to generate.
        **options : Any
            Additional options for sampling (``rng``, ``seed``).

        Returns
        -------
        Sample
            Generated samples of shape ``(n, 1)``.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
