"""
Random Sources
==============

The sampling code depends only on the narrow :class:`RandomSource` protocol,
which :class:`numpy.random.Generator` satisfies structurally. A single
process-wide default generator is created lazily for callers that do not
inject their own source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from pysatl_discrete.config import get_settings

if TYPE_CHECKING:
    from numpy.typing import NDArray


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniform, Gaussian and integer deviates.

    Methods mirror :class:`numpy.random.Generator`; ``size=None`` returns a
    scalar and an integer ``size`` returns a 1D array.
    """

    def random(self, size: Any = None) -> Any: ...

    def standard_normal(self, size: Any = None) -> Any: ...

    def integers(self, low: int, high: int | None = None, size: Any = None) -> Any: ...


_default: np.random.Generator | None = None
_default_lock = threading.Lock()


def default_generator() -> np.random.Generator:
    """
    Return the process-wide default generator.

    The generator is seeded from :func:`pysatl_discrete.config.get_settings`
    on first use.
    """
    global _default
    with _default_lock:
        if _default is None:
            _default = np.random.default_rng(get_settings().seed)
        return _default


def reset_default_generator() -> None:
    """Forget the default generator so that the next call re-seeds it."""
    global _default
    with _default_lock:
        _default = None


def resolve(rng: RandomSource | None) -> RandomSource:
    """Return ``rng`` or the default generator when ``rng`` is ``None``."""
    return default_generator() if rng is None else rng


def uniform_draws(rng: RandomSource, n: int) -> NDArray[np.float64]:
    """Draw ``n`` uniform deviates in ``[0, 1)`` as a float array."""
    return np.asarray(rng.random(n), dtype=np.float64).reshape(n)


__all__ = [
    "RandomSource",
    "default_generator",
    "reset_default_generator",
    "resolve",
    "uniform_draws",
]
