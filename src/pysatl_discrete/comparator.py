"""
Tolerant Floating-Point Comparison
==================================

Epsilon-aware comparison primitives used throughout the package for
validation and equality of probabilities and moments.

Notes
-----
- Two finite values are equal when they differ by no more than the tolerance.
- Non-finite values (``inf``, ``nan``) are compared exactly; the tolerance
  does not apply to them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import operator
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_discrete.types import Number

DEFAULT_TOLERANCE = 1.0e-12
"""Default absolute tolerance for floating-point comparisons."""


class NumericComparator:
    """
    Comparison of floating-point values with an absolute tolerance.

    Parameters
    ----------
    tolerance : float, default=1e-12
        Absolute tolerance; must be positive.

    Raises
    ------
    ValueError
        If the tolerance is not positive.
    """

    __slots__ = ("_tolerance",)

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE) -> None:
        if not tolerance > 0.0:
            raise ValueError("Tolerance must be positive.")
        self._tolerance = float(tolerance)

    @property
    def tolerance(self) -> float:
        """Absolute comparison tolerance."""
        return self._tolerance

    def compare(self, x: Number, y: Number) -> int:
        """
        Compare two values.

        Returns
        -------
        int
            ``-1`` if ``x < y``, ``1`` if ``x > y`` and ``0`` if the values are
            equal within the tolerance.
        """
        x = float(x)
        y = float(y)

        if not (math.isfinite(x) and math.isfinite(y)):
            # NaN sorts above everything and equals only itself
            x_nan, y_nan = math.isnan(x), math.isnan(y)
            if x_nan or y_nan:
                return int(x_nan) - int(y_nan)
            return (x > y) - (x < y)

        diff = x - y
        if diff < -self._tolerance:
            return -1
        if diff > self._tolerance:
            return 1
        return 0

    def lt(self, x: Number, y: Number) -> bool:
        return self.compare(x, y) < 0

    def le(self, x: Number, y: Number) -> bool:
        return self.compare(x, y) <= 0

    def eq(self, x: Number, y: Number) -> bool:
        return self.compare(x, y) == 0

    def ne(self, x: Number, y: Number) -> bool:
        return self.compare(x, y) != 0

    def ge(self, x: Number, y: Number) -> bool:
        return self.compare(x, y) >= 0

    def gt(self, x: Number, y: Number) -> bool:
        return self.compare(x, y) > 0

    def is_zero(self, x: Number) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) == 0

    def is_unity(self, x: Number) -> bool:
        return not math.isnan(x) and self.compare(x, 1.0) == 0

    def is_positive(self, x: Number) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) > 0

    def is_negative(self, x: Number) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) < 0

    def is_non_negative(self, x: Number) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) >= 0

    def is_non_positive(self, x: Number) -> bool:
        return not math.isnan(x) and self.compare(x, 0.0) <= 0

    def is_integer(self, x: Number) -> bool:
        """Check whether ``x`` lies within the tolerance of an integer."""
        x = float(x)
        return math.isfinite(x) and self.eq(x, round(x))

    def sign(self, x: Number) -> int:
        """Sign of ``x`` with values inside the tolerance treated as zero."""
        if self.is_negative(x):
            return -1
        if self.is_positive(x):
            return 1
        return 0

    def is_increasing(self, values: Iterable[Number]) -> bool:
        diff = np.diff(np.asarray(list(values), dtype=float))
        return bool(np.all(diff > self._tolerance))

    def is_non_decreasing(self, values: Iterable[Number]) -> bool:
        diff = np.diff(np.asarray(list(values), dtype=float))
        return bool(np.all(diff >= -self._tolerance))

    def is_non_increasing(self, values: Iterable[Number]) -> bool:
        diff = np.diff(np.asarray(list(values), dtype=float))
        return bool(np.all(diff <= self._tolerance))

    def is_decreasing(self, values: Iterable[Number]) -> bool:
        diff = np.diff(np.asarray(list(values), dtype=float))
        return bool(np.all(diff < -self._tolerance))

    def __repr__(self) -> str:
        return f"NumericComparator(tolerance={self._tolerance!r})"


DEFAULT = NumericComparator(DEFAULT_TOLERANCE)
"""Shared comparator with the default tolerance."""


def is_probability(value: Number, comparator: NumericComparator = DEFAULT) -> bool:
    """Check that ``value`` lies in ``[0, 1]`` within the comparator tolerance."""
    return comparator.is_non_negative(value) and comparator.le(value, 1.0)


def validate_probability(value: Number, name: str = "Probability") -> None:
    """
    Validate a single probability.

    Raises
    ------
    ValueError
        If ``value`` is not within ``[0, 1]``.
    """
    if not is_probability(value):
        raise ValueError(f"{name} must lie in [0, 1], got {value!r}.")


def validate_integer(value: Number, name: str = "Value") -> int:
    """
    Convert an integral value to ``int``.

    Integers pass through unchanged; floats are accepted only when they hold
    an exact integer.

    Raises
    ------
    ValueError
        If ``value`` has a fractional part or is not finite.
    """
    try:
        return operator.index(value)
    except TypeError:
        pass
    x = float(value)
    if not x.is_integer():
        raise ValueError(f"{name} must be an integer, got {value!r}.")
    return int(x)


__all__ = [
    "DEFAULT",
    "DEFAULT_TOLERANCE",
    "NumericComparator",
    "is_probability",
    "validate_integer",
    "validate_probability",
]
