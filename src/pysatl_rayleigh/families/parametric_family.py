"""
Parametric family definitions and management infrastructure.

A family couples its parametrization classes with the analytical
characteristic functions written against them, and builds distribution
instances in a chosen floating precision.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING

from pysatl_rayleigh.distributions.computation import AnalyticalComputation
from pysatl_rayleigh.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from pysatl_rayleigh.families.distribution import ParametricFamilyDistribution
from pysatl_rayleigh.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from numpy.typing import DTypeLike

    from pysatl_rayleigh.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_rayleigh.distributions.support import Support
    from pysatl_rayleigh.families.parametrizations import Parametrization
    from pysatl_rayleigh.types import (
        GenericCharacteristicName,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], Support | None]


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type or function that infers type from base parametrization.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to computation functions.
        Single functions are treated as defined for the base parametrization.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling from distributions.
    computation_strategy : ComputationStrategy, optional
        Strategy for computing distribution characteristics.
    support_by_parametrization : Callable or None, optional
        Function that returns the support for base parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family '{name}' needs at least one parametrization.")

        self._name = name
        self._distr_type = distr_type
        self._support_resolver = support_by_parametrization
        self.computation_strategy = computation_strategy or DefaultComputationStrategy()
        self.sampling_strategy = sampling_strategy or DefaultSamplingUnivariateStrategy()

        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        base_name = self.base_parametrization_name
        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {
            characteristic: forms if isinstance(forms, dict) else {base_name: forms}
            for characteristic, forms in distr_characteristics.items()
        }

        # For every parametrization: characteristic -> parametrization whose form is used.
        # A form written for the parametrization itself wins over the base one.
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {
            pname: {
                characteristic: pname if pname in forms else base_name
                for characteristic, forms in self.distr_characteristics.items()
                if pname in forms or base_name in forms
            }
            for pname in self.parametrization_names
        }

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If name is already registered or not declared by the family.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family '{self.name}'.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Convert parameters to the base parametrization.

        The result keeps the floating precision of ``parameters``.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization().astype(parameters.dtype)

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Bind every planned characteristic form to ``parameters``.

        Forms written for the base parametrization receive the converted
        parameters; the conversion happens at most once.
        """
        plan = self._analytical_plan.get(parameters.name, {})
        bound = {parameters.name: parameters}
        if any(provider not in bound for provider in plan.values()):
            bound[self.base_parametrization_name] = self.to_base(parameters)

        return {
            characteristic: AnalyticalComputation(
                target=characteristic,
                func=partial(self.distr_characteristics[characteristic][provider], bound[provider]),
            )
            for characteristic, provider in plan.items()
        }

    def distribution(
        self,
        parametrization_name: str | None = None,
        *,
        dtype: DTypeLike | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base). Parameter
            values are keyword-only, e.g. ``family(sigma=2.0)``.
        dtype : DTypeLike, optional
            Floating precision of the stored parameters. By default Python
            numbers and NumPy integers become ``float64`` and NumPy floating
            scalars keep their precision.
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        TypeError
            If ``parametrization_name`` is not a string (a parameter value
            passed positionally).
        KeyError
            If parametrization name is not registered.
        InvalidParameterError
            If parameters are not real numbers or violate constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        elif not isinstance(parametrization_name, str):
            raise TypeError(
                f"Parametrization name of family '{self.name}' must be one of "
                f"{self.parametrization_names}, got {parametrization_name!r}; "
                "pass parameter values by keyword."
            )
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values).astype(dtype)
        parameters.validate()
        return self.from_parameters(parameters)

    def from_parameters(self, parameters: Parametrization) -> ParametricFamilyDistribution:
        """
        Wrap already validated parameters into a distribution instance.

        Parameters
        ----------
        parameters : Parametrization
            Parameters of one of this family's parametrizations.
        """
        base_parameters = self.to_base(parameters)
        distribution_type = (
            self._distr_type
            if isinstance(self._distr_type, DistributionType)
            else self._distr_type(base_parameters)
        )
        support = None if self._support_resolver is None else self._support_resolver(base_parameters)
        return ParametricFamilyDistribution(self.name, distribution_type, parameters, support)

    __call__ = distribution
