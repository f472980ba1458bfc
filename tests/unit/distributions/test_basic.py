from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from typing import Any, cast

import numpy as np
from mypy_extensions import KwArg

from pysatl_rayleigh.distributions.computation import AnalyticalComputation
from pysatl_rayleigh.distributions.support import ContinuousSupport
from pysatl_rayleigh.types import Kind
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


class DistributionTestBase:
    PDF = "pdf"
    LOGPDF = "logpdf"
    CDF = "cdf"
    PPF = "ppf"

    def make_uniform_ppf_distribution(
        self,
    ) -> StandaloneEuclideanUnivariateDistribution:
        ppf_func = cast(Callable[[Any, KwArg(Any)], Any], lambda q, **kwargs: np.asarray(q))
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[Any, Any](target=self.PPF, func=ppf_func),
            ],
            support=ContinuousSupport(0, 1),
        )

    def make_logistic_cdf_distribution(
        self,
    ) -> StandaloneEuclideanUnivariateDistribution:
        def logistic_cdf(x: float, **_: Any) -> float:
            return 1.0 / (1.0 + math.exp(-x))

        logistic_cdf_func = cast(Callable[[float, KwArg(Any)], float], logistic_cdf)
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[float, float](target=self.CDF, func=logistic_cdf_func),
            ],
            support=ContinuousSupport(),
        )

    def make_uniform_pdf_distribution(
        self,
    ) -> StandaloneEuclideanUnivariateDistribution:
        def uniform_pdf(x: Any, **_: Any) -> Any:
            x = np.asarray(x)
            return np.where((x >= 0.0) & (x <= 1.0), 1.0, 0.0)

        uniform_pdf_func = cast(Callable[[Any, KwArg(Any)], Any], uniform_pdf)

        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[Any, Any](target=self.PDF, func=uniform_pdf_func),
            ],
            support=ContinuousSupport(0, 1),
        )


class TestAnalyticalComputation(DistributionTestBase):
    def test_scalar_input_gives_scalar_output(self) -> None:
        comp = AnalyticalComputation[Any, Any](
            target=self.PDF, func=lambda x, **_: np.asarray(x) * 2.0
        )
        value = comp(1.5)
        assert not isinstance(value, np.ndarray)
        assert value == 3.0

    def test_array_input_gives_array_output(self) -> None:
        comp = AnalyticalComputation[Any, Any](
            target=self.PDF, func=lambda x, **_: np.asarray(x) * 2.0
        )
        value = comp(np.array([1.0, 2.0]))
        assert isinstance(value, np.ndarray)
        np.testing.assert_allclose(value, [2.0, 4.0])

    def test_options_are_forwarded(self) -> None:
        comp = AnalyticalComputation[Any, Any](
            target=self.PDF, func=lambda x, scale=1.0: x * scale
        )
        assert comp(2.0, scale=3.0) == 6.0

    def test_standalone_distribution_resolves_its_analyticals(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        assert distr.calculate_characteristic(self.CDF, 0.0) == 0.5
        assert distr.query_method(self.CDF).target == self.CDF
