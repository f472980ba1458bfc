from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_rayleigh.errors import InvalidParameterError
from pysatl_rayleigh.families import ParametricFamily, ParametricFamilyRegister
from pysatl_rayleigh.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


class TestFamilyRegistrationAndSampling(TestBaseFamily):
    def test_family_registration_and_distribution_sampling(self) -> None:
        fam = self.make_default_family(
            distr_characteristics={
                self.PDF: {"base": lambda p, x: 1.0 if 0.0 <= x <= 1.0 else 0.0},
                self.CDF: {
                    "base": lambda p, x: x if 0.0 <= x <= 1.0 else (0.0 if x < 0.0 else 1.0)
                },
                self.PPF: {"base": lambda p, q: q},
            },
        )

        ParametricFamilyRegister.register(fam)

        distr = fam.distribution("base", value=0.0)

        n = 128
        sample = distr.sample(n)
        assert sample.shape == (n, 1)
        arr = sample.array
        assert (arr >= 0.0).all() and (arr <= 1.0).all()

        computations = distr.analytical_computations
        assert set(computations) == {self.PDF, self.CDF, self.PPF}
        assert computations[self.CDF](0.25) == pytest.approx(0.25)
        assert computations[self.PPF](0.75) == pytest.approx(0.75)

    def test_distribution_metadata(self) -> None:
        fam = self.make_default_family()
        ParametricFamilyRegister.register(fam)

        distr = fam(value=1)

        assert distr.family is fam
        assert distr.family_name == "Default"
        assert distr.distribution_type == UnivariateContinuous
        assert distr.parametrization_name == "base"
        assert distr.params == (1.0,)
        assert distr.dtype == np.float64
        assert distr.support is None

    def test_params_are_reported_in_base_parametrization(self) -> None:
        fam = self.make_default_family()
        ParametricFamilyRegister.register(fam)

        distr = fam.distribution("alt", value=1.5)

        assert distr.parametrization_name == "alt"
        assert distr.params == (3.0,)

    def test_constraints_are_checked_on_creation(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(InvalidParameterError, match="value >= 0"):
            fam.distribution(value=-1.0)

    def test_unknown_parametrization_raises_key_error(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(KeyError):
            fam.distribution("missing", value=1.0)

    def test_astype_changes_precision(self) -> None:
        fam = self.make_default_family()
        ParametricFamilyRegister.register(fam)

        distr = fam.distribution(value=0.5)
        converted = distr.astype(np.float32)

        assert converted is not distr
        assert converted.dtype == np.float32
        assert converted.parametrization_name == distr.parametrization_name
        assert distr.dtype == np.float64

    def test_dtype_on_creation(self) -> None:
        fam = self.make_default_family()
        distr = fam.distribution(value=0.5, dtype=np.float32)
        assert distr.dtype == np.float32

    def test_family_needs_a_parametrization(self) -> None:
        with pytest.raises(ValueError, match="at least one parametrization"):
            ParametricFamily(
                name="Empty",
                distr_type=UnivariateContinuous,
                distr_parametrizations=[],
                distr_characteristics={},
            )

    def test_positional_value_is_rejected(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(TypeError, match="must be one of \\['base', 'alt'\\]"):
            fam(0.5)  # type: ignore[arg-type]
