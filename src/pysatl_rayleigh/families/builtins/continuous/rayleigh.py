"""
Rayleigh distribution family implementation.

Contains the Rayleigh family with scale and mean parameterizations and the
sampling strategy that draws Rayleigh variates from standard exponentials.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, cast

import numpy as np

from pysatl_rayleigh.distributions.sampling import ArraySample
from pysatl_rayleigh.distributions.strategies import SamplingStrategy, resolve_rng
from pysatl_rayleigh.distributions.support import ContinuousSupport
from pysatl_rayleigh.errors import InvalidArgumentError
from pysatl_rayleigh.families.parametric_family import ParametricFamily
from pysatl_rayleigh.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_rayleigh.families.registry import ParametricFamilyRegister
from pysatl_rayleigh.numerics import as_points, constants, log1mexp, real_dtype
from pysatl_rayleigh.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_rayleigh.distributions.distribution import Distribution

logger = logging.getLogger(__name__)


class RayleighSamplingStrategy(SamplingStrategy):
    """
    Sampler based on the exponential representation of the Rayleigh law.

    If ``E ~ Exp(1)`` then ``σ·√(2E) ~ Rayleigh(σ)``, so each variate costs one
    standard exponential draw.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)`` in the precision of the distribution.
    """

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        rng = resolve_rng(options.pop("rng", None), options.pop("seed", None))
        sigma = distr.query_method(CharacteristicName.SCALE)(None)

        exponentials = rng.standard_exponential(n).astype(sigma.dtype)
        values = sigma * np.sqrt(2 * exponentials)
        return ArraySample(values.reshape(n, 1))


def configure_rayleigh_family() -> None:
    """
    Configure and register the Rayleigh distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.RAYLEIGH):
        return

    RAYLEIGH_DOC = """
    Rayleigh distribution.

    The Rayleigh distribution with scale σ describes the magnitude of a
    two-dimensional vector whose components are independent Normal(0, σ)
    variables. It has a single parameter: scale (σ) or, equivalently,
    mean (μ = σ·√(π/2)).

    Probability density function (scale parametrization):
        f(x) = x / σ² * exp(-x² / (2σ²)) for x > 0

    The Rayleigh distribution is used to model wind speeds, wave heights
    and the envelope of narrow-band noise in signal processing.
    """

    def _sigma(parameters: Parametrization) -> Any:
        return cast(_Scale, parameters).sigma

    def _standardize(parameters: Parametrization, x: ArrayLike) -> NumericArray:
        # z = x / σ; squaring σ itself overflows long before the distribution does
        sigma = _sigma(parameters)
        with np.errstate(over="ignore", under="ignore"):
            return cast(NumericArray, as_points(x, np.asarray(sigma).dtype) / sigma)

    def _outside_support(z: NumericArray, values: NumericArray, fill: float) -> NumericArray:
        # +inf lies beyond every quantile; NaN propagates
        filled = np.full_like(values, fill)
        values = np.where(np.isposinf(z), filled, values)
        return np.where((z > 0) | np.isnan(z), values, filled)

    def pdf(parameters: Parametrization, x: ArrayLike) -> NumericArray:
        """
        Probability density function for Rayleigh distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - sigma: float (scale parameter)
        x : ArrayLike
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x; zero for x ≤ 0 and
            x = +inf, NaN for NaN
        """
        z = _standardize(parameters, x)

        with np.errstate(over="ignore", under="ignore", invalid="ignore"):
            density = z * np.exp(-(z**2) / 2) / _sigma(parameters)
        return _outside_support(z, density, 0.0)

    def logpdf(parameters: Parametrization, x: ArrayLike) -> NumericArray:
        """
        Logarithm of the probability density function.

        Returns ``-inf`` for x ≤ 0 and x = +inf.
        """
        z = _standardize(parameters, x)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            log_density = np.log(z) - np.log(_sigma(parameters)) - (z**2) / 2
        return _outside_support(z, log_density, -np.inf)

    def logsf(parameters: Parametrization, x: ArrayLike) -> NumericArray:
        """
        Logarithm of the survival function, ``-z² / 2`` with ``z = x / σ``.

        Points below the support give 0, since ``P(X > x) = 1`` there.
        """
        z = np.maximum(_standardize(parameters, x), 0)

        with np.errstate(over="ignore"):
            return cast(NumericArray, -(z**2) / 2)

    def sf(parameters: Parametrization, x: ArrayLike) -> NumericArray:
        """Survival function ``P(X > x)``."""
        return cast(NumericArray, np.exp(logsf(parameters, x)))

    def cdf(parameters: Parametrization, x: ArrayLike) -> NumericArray:
        """
        Cumulative distribution function for Rayleigh distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - sigma: float (scale parameter)
        x : ArrayLike
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        return cast(NumericArray, -np.expm1(logsf(parameters, x)))

    def logcdf(parameters: Parametrization, x: ArrayLike) -> NumericArray:
        """Logarithm of the CDF; ``-inf`` for x ≤ 0."""
        return log1mexp(logsf(parameters, x))

    def _check_probability(p: NumericArray) -> None:
        if not np.all((p >= 0) & (p <= 1)):
            raise InvalidArgumentError("Probability must be in [0, 1]")

    def ppf(parameters: Parametrization, p: ArrayLike) -> NumericArray:
        """
        Percent point function (inverse CDF) for Rayleigh distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - sigma: float (scale parameter)
        p : ArrayLike
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p:
            - For p = 0: returns 0.0
            - For p = 1: returns np.inf
            - For p in (0, 1): returns σ·sqrt(-2 ln(1 - p))

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1] or NaN
        """
        sigma = _sigma(parameters)
        p = as_points(p, np.asarray(sigma).dtype)
        _check_probability(p)

        with np.errstate(divide="ignore", over="ignore"):
            return cast(NumericArray, sigma * np.sqrt(-2 * np.log1p(-p)))

    def isf(parameters: Parametrization, q: ArrayLike) -> NumericArray:
        """
        Inverse survival function, ``σ·sqrt(-2 ln q)``.

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1] or NaN
        """
        sigma = _sigma(parameters)
        q = as_points(q, np.asarray(sigma).dtype)
        _check_probability(q)

        with np.errstate(divide="ignore", over="ignore"):
            return cast(NumericArray, sigma * np.sqrt(np.abs(-2 * np.log(q))))

    def mean_func(parameters: Parametrization, _: Any = None) -> Any:
        """Mean of Rayleigh distribution, σ·√(π/2)."""
        sigma = _sigma(parameters)
        return constants(sigma.dtype).sqrt_half_pi * sigma

    def median_func(parameters: Parametrization, _: Any = None) -> Any:
        """Median of Rayleigh distribution, σ·√(2 ln 2)."""
        sigma = _sigma(parameters)
        c = constants(sigma.dtype)
        return c.sqrt2 * np.sqrt(c.ln2) * sigma

    def mode_func(parameters: Parametrization, _: Any = None) -> Any:
        """Mode of Rayleigh distribution (equals the scale)."""
        return _sigma(parameters)

    def var_func(parameters: Parametrization, _: Any = None) -> Any:
        """Variance of Rayleigh distribution, σ²·(2 − π/2)."""
        sigma = _sigma(parameters)
        with np.errstate(over="ignore"):
            return (2 - constants(sigma.dtype).pi / 2) * sigma * sigma

    def std_func(parameters: Parametrization, _: Any = None) -> Any:
        """Standard deviation of Rayleigh distribution."""
        sigma = _sigma(parameters)
        return np.sqrt(2 - constants(sigma.dtype).pi / 2) * sigma

    def skew_func(parameters: Parametrization, _: Any = None) -> Any:
        """Skewness of Rayleigh distribution (does not depend on σ)."""
        c = constants(_sigma(parameters).dtype)
        return 2 * c.sqrt_pi * (c.pi - 3) / (4 - c.pi) ** 1.5

    def kurt_func(parameters: Parametrization, _: Any = None, excess: bool = True) -> Any:
        """Excess or raw kurtosis of Rayleigh distribution.

        Parameters
        ----------
        parameters : Parametrization
            Needed by architecture parameter
        excess : bool
            A value defines if there will be excess or raw kurtosis
            default is True

        Returns
        -------
        float
            Kurtosis value
        """
        pi = constants(_sigma(parameters).dtype).pi
        excess_kurtosis = -(6 * pi**2 - 24 * pi + 16) / (4 - pi) ** 2
        if excess:
            return excess_kurtosis
        return excess_kurtosis + 3

    def entropy_func(parameters: Parametrization, _: Any = None) -> Any:
        """Differential entropy, 1 − ln(2)/2 + γ/2 + ln σ."""
        sigma = _sigma(parameters)
        c = constants(sigma.dtype)
        return 1 - c.ln2 / 2 + c.euler_gamma / 2 + np.log(sigma)

    def scale_func(parameters: Parametrization, _: Any = None) -> Any:
        """Scale parameter σ."""
        return _sigma(parameters)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Rayleigh distribution, the open ray (0, ∞)"""
        return ContinuousSupport(left=0.0, left_closed=False)

    Rayleigh = ParametricFamily(
        name=FamilyName.RAYLEIGH,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scale", "mean"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.LOGCDF: logcdf,
            CharacteristicName.SF: sf,
            CharacteristicName.LOGSF: logsf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.SCALE: scale_func,
        },
        sampling_strategy=RayleighSamplingStrategy(),
        support_by_parametrization=_support,
    )
    Rayleigh.__doc__ = RAYLEIGH_DOC

    @parametrization(family=Rayleigh, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of Rayleigh distribution.

        Parameters
        ----------
        sigma : float, default 1.0
            Scale parameter (σ) of the distribution
        """

        sigma: float = 1.0

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that scale parameter is positive and finite."""
            return bool(np.isfinite(self.sigma) and self.sigma > 0)

    @parametrization(family=Rayleigh, name="mean")
    class _Mean(Parametrization):
        """
        Mean parametrization of Rayleigh distribution.

        Parameters
        ----------
        mu : float
            Mean (μ) of the distribution, μ = σ·√(π/2)
        """

        mu: float

        @constraint(description="mu > 0")
        def check_mu_positive(self) -> bool:
            """Check that mean is positive and finite."""
            return bool(np.isfinite(self.mu) and self.mu > 0)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Scale parametrization.

            Returns
            -------
            Parametrization
                Scale parametrization instance
            """
            sqrt_half_pi = constants(real_dtype(self.mu)).sqrt_half_pi
            return _Scale(sigma=self.mu / sqrt_half_pi)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Rayleigh)
    logger.debug("Configured %s family", FamilyName.RAYLEIGH)
