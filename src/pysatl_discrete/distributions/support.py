"""
Integer Supports
================

Closed integer intervals ``[lower, upper]`` used as the support of tabulated
distribution functions and as effective ranges of discrete distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re
from dataclasses import dataclass
from math import ceil, floor
from typing import TYPE_CHECKING, ClassVar, cast, overload

import numpy as np

from pysatl_discrete import comparator

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_discrete.types import BoolArray, Number, NumericArray

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

_INTERVAL_PATTERN = re.compile(r"^\s*\[\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*\]\s*$")


@dataclass(frozen=True, slots=True)
class IntegerInterval:
    """
    Immutable closed integer interval.

    Parameters
    ----------
    lower : int
        Smallest integer in the interval.
    upper : int
        Largest integer in the interval.

    Raises
    ------
    ValueError
        If ``upper < lower`` or a bound is outside the 64-bit range.
    """

    lower: int
    upper: int

    NON_NEGATIVE: ClassVar[IntegerInterval]
    POSITIVE: ClassVar[IntegerInterval]

    def __post_init__(self) -> None:
        object.__setattr__(self, "lower", comparator.validate_integer(self.lower, "Lower bound"))
        object.__setattr__(self, "upper", comparator.validate_integer(self.upper, "Upper bound"))

        if self.upper < self.lower:
            raise ValueError(f"Inconsistent interval bounds: [{self.lower}, {self.upper}].")
        if self.lower < INT64_MIN or self.upper > INT64_MAX:
            raise ValueError("Interval bounds must fit in a signed 64-bit integer.")

    @classmethod
    def around(cls, center: float, half_width: float, clip: IntegerInterval) -> IntegerInterval:
        """
        Build ``[floor(center - half_width), ceil(center + half_width)]``
        clipped to another interval.

        Parameters
        ----------
        center : float
            Center of the window (usually a mean).
        half_width : float
            Half-width of the window (usually a multiple of a deviation).
        clip : IntegerInterval
            Interval the result must lie within.
        """
        lower = max(clip.lower, floor(center - half_width))
        upper = min(clip.upper, ceil(center + half_width))
        return cls(lower, max(lower, upper))

    @classmethod
    def parse(cls, text: str) -> IntegerInterval:
        """
        Parse an interval formatted as ``"[lower, upper]"``.

        Raises
        ------
        ValueError
            If the text is not a valid interval.
        """
        match = _INTERVAL_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Invalid integer interval format: [{text}].")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def size(self) -> int:
        """Number of integers in the interval."""
        return self.upper - self.lower + 1

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check whether integer point(s) lie in the interval.

        Non-integral values are never contained.
        """
        if isinstance(x, int | np.integer):
            return self.lower <= int(x) <= self.upper

        if np.ndim(x) == 0:
            value = float(cast(float, x))
            if not value.is_integer():
                return False
            k = int(value)
            return self.lower <= k <= self.upper

        arr = np.asarray(x, dtype=float)
        result = (arr == np.floor(arr)) & (arr >= self.lower) & (arr <= self.upper)
        return cast("BoolArray", result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("Number", x)))

    def contains_approx(self, x: Number) -> bool:
        """
        Check whether a real value lies in ``[lower, upper]`` allowing for
        floating-point round-off at the bounds.
        """
        return comparator.DEFAULT.ge(x, self.lower) and comparator.DEFAULT.le(x, self.upper)

    def validate(self, value: int, name: str = "Value") -> None:
        """
        Raises
        ------
        ValueError
            If ``value`` is outside the interval.
        """
        if not self.contains(value):
            raise ValueError(f"{name} [{value}] is outside the allowed range {self.format()}.")

    def shift(self, delta: int) -> IntegerInterval:
        """Return the interval translated by ``delta``."""
        return IntegerInterval(self.lower + delta, self.upper + delta)

    def iter_points(self) -> Iterator[int]:
        """Iterate ``lower, lower + 1, ..., upper``."""
        return iter(range(self.lower, self.upper + 1))

    __iter__ = iter_points

    def format(self) -> str:
        return f"[{self.lower}, {self.upper}]"

    def __str__(self) -> str:
        return self.format()


IntegerInterval.NON_NEGATIVE = IntegerInterval(0, INT64_MAX)
IntegerInterval.POSITIVE = IntegerInterval(1, INT64_MAX)


__all__ = [
    "IntegerInterval",
    "INT64_MAX",
    "INT64_MIN",
]
