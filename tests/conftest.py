from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import numpy as np
import pytest

from pysatl_discrete.config import reset_settings
from pysatl_discrete.families.configuration import reset_families_register
from pysatl_discrete.rng import reset_default_generator

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_families_register()
    reset_settings()
    reset_default_generator()
    yield
    reset_settings()
    reset_default_generator()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20171114)


@pytest.fixture
def fast_moments(monkeypatch: pytest.MonkeyPatch) -> None:
    """Estimate sample-based moments from fewer draws."""
    monkeypatch.setenv("PYSATL_DISCRETE_MOMENT_SAMPLES", "20000")
    monkeypatch.setenv("PYSATL_DISCRETE_SEED", "20171114")
    reset_settings()
    reset_default_generator()
