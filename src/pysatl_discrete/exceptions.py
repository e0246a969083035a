"""
Exception classes for pysatl-discrete.

Invalid input is reported with the builtin :class:`ValueError`; the classes
below cover failures that indicate a logic error rather than bad input.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DiscreteDistributionError(RuntimeError):
    """
    Base class for internal failures of the discrete distribution engine.
    """


class StrategyRegimeError(DiscreteDistributionError):
    """
    Raised when a sampling strategy is built for a parameter regime it cannot
    handle, e.g. a Poisson mean too large for an explicit CDF table or too
    small for a bounded Knuth iteration.
    """


class TableInvariantError(DiscreteDistributionError):
    """
    Raised when a tabulated distribution function violates an invariant that
    construction should have guaranteed, e.g. an inverse lookup that falls
    off the end of a normalized CDF.
    """


__all__ = [
    "DiscreteDistributionError",
    "StrategyRegimeError",
    "TableInvariantError",
]
