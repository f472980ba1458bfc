"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by
strategies, generic characteristics and families.

Notes
-----
- Characteristics are resolved by the distribution's computation strategy.
- Log-likelihood is computed from ``logpdf`` when the distribution provides
  it, and from ``pdf`` otherwise; points outside the support contribute
  ``-inf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_rayleigh.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_rayleigh.distributions.computation import AnalyticalComputation
    from pysatl_rayleigh.distributions.sampling import Sample
    from pysatl_rayleigh.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from pysatl_rayleigh.distributions.support import Support
    from pysatl_rayleigh.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and characteristics."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int = 1, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)

    def log_likelihood(self, sample: Sample) -> float:
        """
        Log-likelihood of a univariate sample.

        Parameters
        ----------
        sample : Sample
            Observations of shape ``(n, 1)``.

        Returns
        -------
        float
            Sum of log-densities; ``-inf`` if any point lies outside the support.
        """
        values = np.asarray(sample.array).reshape(-1)

        if CharacteristicName.LOGPDF in self.analytical_computations:
            log_density = np.asarray(self.query_method(CharacteristicName.LOGPDF)(values))
        else:
            density = np.asarray(self.query_method(CharacteristicName.PDF)(values))
            with np.errstate(divide="ignore"):
                log_density = np.log(density)

        support = self.support
        if support is not None:
            log_density = np.where(support.contains(values), log_density, -np.inf)

        return float(np.sum(log_density))
