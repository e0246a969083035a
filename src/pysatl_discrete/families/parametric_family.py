"""
Parametric family definitions for discrete distributions.

A family binds a set of named parametrizations to a factory that builds the
concrete distribution from the base parametrization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, dataclass_transform

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from typing import Any, TypeAlias

    from pysatl_discrete.distributions.distribution import DiscreteDistribution
    from pysatl_discrete.families.parametrizations import Parametrization
    from pysatl_discrete.types import ParametrizationName

    DistributionFactory: TypeAlias = Callable[[Parametrization], DiscreteDistribution]


class DiscreteFamily:
    """
    A family of discrete distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first is the base parametrization.
    factory : Callable[[Parametrization], DiscreteDistribution]
        Builds a distribution from validated base parameters.
    """

    def __init__(
        self,
        name: str,
        distr_parametrizations: list[ParametrizationName],
        factory: DistributionFactory,
    ):
        if not distr_parametrizations:
            raise ValueError("A family needs at least one parametrization.")

        self._name = name
        self._factory = factory

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

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
            If name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def build(self, parameters: Parametrization) -> DiscreteDistribution:
        """
        Validate parameters and build the distribution.

        Raises
        ------
        ValueError
            If parameters don't satisfy constraints.
        """
        parameters.validate()
        base_parameters = self.to_base(parameters)
        base_parameters.validate()
        return self._factory(base_parameters)

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> DiscreteDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ValueError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        return self.build(parametrization_class(**parameters_values))

    def from_strings(
        self, values: Sequence[str], parametrization_name: str | None = None
    ) -> DiscreteDistribution:
        """
        Create a distribution from positional text values.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ValueError
            If the values are malformed or violate a constraint.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        return self.build(parametrization_class.from_strings(values))

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.
        """
        from pysatl_discrete.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    def __repr__(self) -> str:
        return f"DiscreteFamily(name={self.name!r}, parametrizations={self.parametrization_names})"

    __call__ = distribution
