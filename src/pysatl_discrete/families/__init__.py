"""
Discrete distribution families.

This package declares parametrized families of discrete distributions,
registers the built-in ones and builds distributions from text
descriptors.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    BinomialDistribution,
    BinomialMethod,
    OccurrenceDistribution,
    PoissonDistribution,
    PoissonMethod,
    UniformDiscreteDistribution,
)
from .configuration import configure_families_register, reset_families_register
from .descriptor import parse_descriptor
from .parametric_family import DiscreteFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import DiscreteFamilyRegister

__all__ = [
    "BinomialDistribution",
    "BinomialMethod",
    "DiscreteFamily",
    "DiscreteFamilyRegister",
    "OccurrenceDistribution",
    "Parametrization",
    "ParametrizationConstraint",
    "PoissonDistribution",
    "PoissonMethod",
    "UniformDiscreteDistribution",
    "configure_families_register",
    "constraint",
    "parametrization",
    "parse_descriptor",
    "reset_families_register",
]
