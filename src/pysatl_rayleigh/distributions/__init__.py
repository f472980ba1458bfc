"""
Distributions subpackage

Interfaces and default implementations for probability distributions:

- distribution protocol (:mod:`.distribution`);
- analytical computation primitives (:mod:`.computation`);
- generic characteristic functions (:mod:`.characteristics`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- supports (:mod:`.support`);
- pluggable strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .characteristics import GenericCharacteristic
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    "GenericCharacteristic",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # support
    "Support",
    "ContinuousSupport",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
]
