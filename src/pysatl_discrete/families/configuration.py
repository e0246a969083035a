"""
Distribution Families Configuration
====================================

This module registers the built-in discrete distribution families:

- Binomial — ``trialsProb`` parametrization (trial count, success probability).
- Occurrence — ``probTrials`` parametrization (event probability, trial count).
- Poisson — ``mean`` parametrization.
- Uniform — ``halfOpen`` base parametrization and a ``closed`` alternative.

Notes
-----
- All families are registered in the global DiscreteFamilyRegister.
- Registration is memoized; reset it in tests with
  :func:`reset_families_register`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_discrete.families.builtins import (
    configure_binomial_family,
    configure_occurrence_family,
    configure_poisson_family,
    configure_uniform_family,
)
from pysatl_discrete.families.registry import DiscreteFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> DiscreteFamilyRegister:
    """
    Register all built-in distribution families in the global registry.

    Returns
    -------
    DiscreteFamilyRegister
        The global registry of discrete families.
    """
    configure_binomial_family()
    configure_occurrence_family()
    configure_poisson_family()
    configure_uniform_family()
    return DiscreteFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    DiscreteFamilyRegister._reset()
