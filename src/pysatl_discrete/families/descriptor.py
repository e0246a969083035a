"""
Text descriptors of discrete distributions.

A descriptor names a family and lists the values of its base
parametrization in order, for example ``"BINOMIAL; 5, 0.2"`` or
``"POISSON; 2.5"``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

from pysatl_discrete.families.configuration import configure_families_register
from pysatl_discrete.families.registry import DiscreteFamilyRegister

if TYPE_CHECKING:
    from pysatl_discrete.distributions.distribution import DiscreteDistribution

log = logging.getLogger(__name__)

TYPE_SEPARATOR = ";"
PARAMETER_SEPARATOR = ","


def split_descriptor(descriptor: str) -> tuple[str, list[str]]:
    """
    Split a descriptor into its family name and parameter strings.

    Raises
    ------
    ValueError
        If the descriptor has no family name, more than one ``;`` or an
        empty parameter.
    """
    parts = descriptor.split(TYPE_SEPARATOR)
    if len(parts) > 2:
        raise ValueError(f"Invalid distribution descriptor: [{descriptor}].")

    name = parts[0].strip().upper()
    if not name:
        raise ValueError(f"Missing distribution type in descriptor: [{descriptor}].")

    if len(parts) == 1 or not parts[1].strip():
        return name, []

    values = [value.strip() for value in parts[1].split(PARAMETER_SEPARATOR)]
    if any(not value for value in values):
        raise ValueError(f"Empty parameter in descriptor: [{descriptor}].")
    return name, values


def parse_descriptor(descriptor: str) -> DiscreteDistribution:
    """
    Build a distribution from a descriptor such as ``"BINOMIAL; 5, 0.2"``.

    Parameters
    ----------
    descriptor : str
        Family name, ``;``, then comma-separated values of the base
        parametrization.

    Returns
    -------
    DiscreteDistribution
        The described distribution.

    Raises
    ------
    ValueError
        If the descriptor is malformed, names an unknown family or holds
        invalid parameter values.
    """
    name, values = split_descriptor(descriptor)
    configure_families_register()

    family = DiscreteFamilyRegister.get(name)
    log.debug("Parsing %s parameters %s.", name, values)
    return family.from_strings(values)


__all__ = [
    "parse_descriptor",
    "split_descriptor",
]
