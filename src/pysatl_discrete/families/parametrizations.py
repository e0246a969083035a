"""
Parametrization classes and constraints for discrete distribution families.

This module provides the abstractions for declaring the parameters of a
family: constraint validation, conversion to the base parametrization and
conversion of positional text values to typed fields.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_discrete.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from typing import Any, ClassVar

    from pysatl_discrete.families.parametric_family import DiscreteFamily


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        value = float(text)
        if not value.is_integer():
            raise ValueError(f"Expected an integer, got {text!r}.") from None
        return int(value)


_FIELD_PARSERS: dict[str, Callable[[str], Any]] = {
    "int": _parse_int,
    "float": float,
}


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Concrete parametrizations are frozen dataclasses whose fields are the
    parameters, in the order they appear in descriptors.
    """

    # Set by the @parametrization decorator
    __family__: ClassVar[DiscreteFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    @classmethod
    def from_strings(cls, values: Sequence[str]) -> Parametrization:
        """
        Build parameters from positional text values.

        Each value is converted with the declared type of the matching field.

        Raises
        ------
        ValueError
            If the number of values differs from the number of fields or a
            value cannot be converted.
        """
        declared = fields(cls)  # type: ignore[arg-type]
        if len(values) != len(declared):
            names = ", ".join(f.name for f in declared)
            raise ValueError(
                f"Parametrization '{cls.__param_name__}' expects {len(declared)} "
                f"value(s) ({names}), got {len(values)}."
            )

        kwargs: dict[str, Any] = {}
        for f, text in zip(declared, values, strict=True):
            type_name = f.type if isinstance(f.type, str) else f.type.__name__
            parser = _FIELD_PARSERS.get(type_name)
            if parser is None:
                raise TypeError(f"Field '{f.name}' has unsupported type {type_name}.")
            try:
                kwargs[f.name] = parser(text.strip())
            except ValueError as exc:
                raise ValueError(f"Invalid value {text!r} for '{f.name}'.") from exc
        return cls(**kwargs)

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        Notes
        -----
        Base implementation returns self. Subclasses should override
        if conversion to a different parametrization is needed.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(
    *,
    family: DiscreteFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization for a family.

    Parameters
    ----------
    family : DiscreteFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Notes
    -----
    Converts the class to a frozen dataclass if it is not one already and
    registers the methods marked with @constraint.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod | classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(f"@constraint '{attr_name}' must be an instance method")
                continue

            if not isfunction(attr):
                continue
            if getattr(attr, "__is_constraint", False):
                desc = getattr(attr, "__constraint_description", attr.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=attr))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
