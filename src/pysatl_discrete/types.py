"""
Core Type Definitions
=====================

Fundamental types and aliases used throughout the package.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for tabulated distribution-function values."""

IntArray = NDArray[np.int64]
"""Type alias for arrays of integer sample values."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class DiscreteFamilyName(StrEnum):
    """
    Registered names of the built-in discrete families.

    The names double as the ``TYPE`` field of textual distribution
    descriptors (``"BINOMIAL; 5, 0.2"``).
    """

    BINOMIAL = "BINOMIAL"
    OCCURRENCE = "OCCURRENCE"
    POISSON = "POISSON"
    UNIFORM = "UNIFORM"


__all__ = [
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "IntArray",
    "BoolArray",
    "ParametrizationName",
    "DiscreteFamilyName",
]
