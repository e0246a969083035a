"""
Built-in discrete distribution families.

This package contains the standard discrete distribution families that are
available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_discrete.families.builtins.binomial import (
    BinomialDistribution,
    BinomialMethod,
    configure_binomial_family,
)
from pysatl_discrete.families.builtins.occurrence import (
    OccurrenceDistribution,
    configure_occurrence_family,
)
from pysatl_discrete.families.builtins.poisson import (
    PoissonDistribution,
    PoissonMethod,
    configure_poisson_family,
)
from pysatl_discrete.families.builtins.uniform import (
    UniformDiscreteDistribution,
    configure_uniform_family,
)

__all__ = [
    "BinomialDistribution",
    "BinomialMethod",
    "OccurrenceDistribution",
    "PoissonDistribution",
    "PoissonMethod",
    "UniformDiscreteDistribution",
    "configure_binomial_family",
    "configure_occurrence_family",
    "configure_poisson_family",
    "configure_uniform_family",
]
