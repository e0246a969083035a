"""
Package Settings
================

Process-wide settings read once from the environment:

- ``PYSATL_DISCRETE_SEED`` — seed of the default random generator;
- ``PYSATL_DISCRETE_MOMENT_SAMPLES`` — number of draws used by distributions
  that estimate their moments by sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import os
from dataclasses import dataclass
from functools import lru_cache

SEED_VARIABLE = "PYSATL_DISCRETE_SEED"
MOMENT_SAMPLES_VARIABLE = "PYSATL_DISCRETE_MOMENT_SAMPLES"

DEFAULT_MOMENT_SAMPLE_COUNT = 1_000_000


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Immutable package settings.

    Parameters
    ----------
    moment_sample_count : int
        Number of draws for sample-based moment estimates.
    seed : int or None
        Seed of the default random generator; ``None`` uses OS entropy.
    """

    moment_sample_count: int = DEFAULT_MOMENT_SAMPLE_COUNT
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.moment_sample_count < 1:
            raise ValueError("moment_sample_count must be a positive integer.")


def _read_int(variable: str) -> int | None:
    raw = os.environ.get(variable)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(
            f"Environment variable {variable} must be an integer, got {raw!r}."
        ) from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Build the settings from the environment on first use.

    Returns
    -------
    Settings
        The process-wide settings.

    Raises
    ------
    ValueError
        If an environment variable holds a malformed value.
    """
    samples = _read_int(MOMENT_SAMPLES_VARIABLE)
    return Settings(
        moment_sample_count=DEFAULT_MOMENT_SAMPLE_COUNT if samples is None else samples,
        seed=_read_int(SEED_VARIABLE),
    )


def reset_settings() -> None:
    """
    Drop the cached settings so that the environment is read again.
    """
    get_settings.cache_clear()


__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "SEED_VARIABLE",
    "MOMENT_SAMPLES_VARIABLE",
]
