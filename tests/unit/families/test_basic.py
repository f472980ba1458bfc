from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_rayleigh.families import (
    ParametricFamily,
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_rayleigh.types import (
    GenericCharacteristicName,
    UnivariateContinuous,
)
from tests.utils.mocks import MockSamplingStrategy


class TestBaseFamily:
    PDF: GenericCharacteristicName = "pdf"
    CDF: GenericCharacteristicName = "cdf"
    PPF: GenericCharacteristicName = "ppf"

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        name: str = "Default",
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: {"base": lambda p, x: x},
                self.CDF: {"alt": lambda p, x: x, "base": lambda p, x: x},
                self.PPF: {"base": lambda p, x: x},
            }
        fam = ParametricFamily(
            name=name,
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,  # type: ignore[arg-type]
            sampling_strategy=MockSamplingStrategy(),
        )

        @parametrization(family=fam, name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value >= 0")
            def check_value_non_negative(self) -> bool:
                return self.value >= 0

        @parametrization(family=fam, name="alt")
        class Alt(Parametrization):
            value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=self.value * 2)  # type: ignore[call-arg]

        return fam
