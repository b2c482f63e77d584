"""
Distributions subpackage

Interfaces and default machinery shared by every distribution:

- distribution and capability protocols (:mod:`.distribution`);
- computation primitives (:mod:`.computation`) and numerical fitters
  (:mod:`.fitters`);
- the characteristic conversion graph (:mod:`.registry`);
- supports (:mod:`.support`), sample containers (:mod:`.sampling`) and
  random variates (:mod:`.variates`);
- pluggable computation and sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .characteristics import GenericCharacteristic
from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import (
    Bounded,
    Continuous,
    CumulativeDistribution,
    Discrete,
    Distribution,
    Moments,
    MultivariateMoments,
    Sampleable,
)
from .registry import (
    DEFAULT_COMPUTATION_KEY,
    distribution_type_register,
    reset_characteristic_registry,
)
from .sampling import ArraySample, Sample
from .strategies import (
    AlgorithmSamplingStrategy,
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, IntegerSupport, SimplexSupport, Support
from .variates import RandomSource

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    "GenericCharacteristic",
    # distribution and capabilities
    "Distribution",
    "Continuous",
    "Discrete",
    "CumulativeDistribution",
    "Bounded",
    "Moments",
    "MultivariateMoments",
    "Sampleable",
    # sampling
    "Sample",
    "ArraySample",
    "RandomSource",
    # supports
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
    "SimplexSupport",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "AlgorithmSamplingStrategy",
    # registry
    "DEFAULT_COMPUTATION_KEY",
    "distribution_type_register",
    "reset_characteristic_registry",
]
