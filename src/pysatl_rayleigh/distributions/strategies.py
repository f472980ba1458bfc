"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — resolves analytical characteristics.
- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates.

Notes
-----
Strategies are stateless. Randomness comes from the ``rng`` option (a
:class:`numpy.random.Generator`) or from a fresh generator seeded by ``seed``.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_rayleigh.distributions.computation import AnalyticalComputation
from pysatl_rayleigh.distributions.sampling import ArraySample, Sample
from pysatl_rayleigh.types import CharacteristicName, GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_rayleigh.distributions.distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Returns the analytical implementation the distribution provides for the
    requested characteristic.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical implementation of the
        characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing analytical computations.
        **options
            Unused by the default strategy.

        Returns
        -------
        Method
            Analytical callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state not in computations:
            available = ", ".join(sorted(computations)) or "none"
            raise RuntimeError(
                f"No analytical computation for '{state}' (available: {available})."
            )
        return computations[state]


def resolve_rng(
    rng: np.random.Generator | None = None, seed: int | None = None
) -> np.random.Generator:
    """
    Pick the random generator used by a sampling call.

    An explicit ``rng`` wins over ``seed``; with neither, a fresh unseeded
    generator is created.
    """
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        rng = resolve_rng(options.pop("rng", None), options.pop("seed", None))
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        uniforms = rng.random(n)
        values = np.asarray(ppf(uniforms)).reshape(n, 1)
        return ArraySample(values)


__all__ = [
    "Method",
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "resolve_rng",
]
