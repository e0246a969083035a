"""
Distributions subpackage

Tables, interfaces and default implementations for discrete distributions:

- integer supports (:mod:`.support`);
- tabulated PMF and CDF (:mod:`.tables`);
- the discrete distribution interface (:mod:`.distribution`);
- pluggable sampling strategies (:mod:`.strategies`);
- array-backed samples (:mod:`.sampling`);
- tabulated and empirical distributions (:mod:`.compact`, :mod:`.empirical`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .compact import CompactDiscreteDistribution
from .distribution import DiscreteDistribution, StrategyDistribution
from .empirical import EmpiricalDiscreteDistribution
from .normal import NormalDistribution
from .sampling import DiscreteSample, SampleSummary
from .strategies import (
    BernoulliTrials,
    CDFTableLookup,
    InverseTransform,
    KnuthPoisson,
    NormalApproximation,
    SamplingStrategy,
    UniformIntegers,
)
from .support import IntegerInterval
from .tables import (
    CumulativeMassTable,
    DistributionFunctionTable,
    ProbabilityMassTable,
)

__all__ = [
    # support
    "IntegerInterval",
    # tables
    "DistributionFunctionTable",
    "ProbabilityMassTable",
    "CumulativeMassTable",
    # distributions
    "DiscreteDistribution",
    "StrategyDistribution",
    "CompactDiscreteDistribution",
    "EmpiricalDiscreteDistribution",
    "NormalDistribution",
    # sampling
    "DiscreteSample",
    "SampleSummary",
    # strategies
    "SamplingStrategy",
    "BernoulliTrials",
    "NormalApproximation",
    "CDFTableLookup",
    "KnuthPoisson",
    "UniformIntegers",
    "InverseTransform",
]
