"""
Core Type Definitions
=====================

Names and small value types shared by the distribution framework:

- the distribution kind and the Euclidean distribution type descriptor,
  with the four shorthands ``UnivariateContinuous``, ``UnivariateDiscrete``,
  ``MultivariateContinuous(d)`` and ``MultivariateDiscrete(d)``;
- numeric aliases used in signatures accepting scalars or NumPy arrays;
- :class:`Interval1D`, the real interval behind continuous supports;
- the canonical characteristic names and built-in family names.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray

type Number = np.floating[Any] | np.integer[Any] | int | float
"""A Python or NumPy real scalar."""

NumericArray = NDArray[np.floating[Any] | np.integer[Any]]
BoolArray = NDArray[np.bool_]

type GenericCharacteristicName = str
"""Name of a characteristic, built-in (see :class:`CharacteristicName`) or user defined."""

type ParametrizationName = str


class Kind(StrEnum):
    """Whether a distribution has a density (continuous) or a mass function (discrete)."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Marker base of distribution type descriptors.

    The characteristic registry keeps one conversion graph per descriptor, so
    descriptors must be hashable and compare by value.
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distributions on ``R^dimension`` (continuous) or ``Z^dimension`` (discrete).

    Parameters
    ----------
    kind : Kind
        Continuous or discrete.
    dimension : int
        Number of coordinates of an outcome, at least 1.
    """

    kind: Kind
    dimension: int

    @property
    def is_univariate(self) -> bool:
        return self.dimension == 1


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)


def MultivariateContinuous(dimension: int) -> EuclideanDistributionType:
    """Type of ``dimension``-variate continuous distributions."""
    return EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=dimension)


def MultivariateDiscrete(dimension: int) -> EuclideanDistributionType:
    """Type of ``dimension``-variate discrete distributions."""
    return EuclideanDistributionType(kind=Kind.DISCRETE, dimension=dimension)


class ContinuousSupportShape1D(StrEnum):
    """Topological shape of a real interval."""

    EMPTY = "empty"
    SINGLE_POINT = "single_point"
    BOUNDED_INTERVAL = "bounded_interval"
    RAY_LEFT = "ray_left"
    """``(-inf, b]`` or ``(-inf, b)``."""
    RAY_RIGHT = "ray_right"
    """``[a, inf)`` or ``(a, inf)``."""
    REAL_LINE = "real_line"


# (left end finite, right end finite) -> shape of a non-empty, non-point interval
_SHAPES = {
    (True, True): ContinuousSupportShape1D.BOUNDED_INTERVAL,
    (False, True): ContinuousSupportShape1D.RAY_LEFT,
    (True, False): ContinuousSupportShape1D.RAY_RIGHT,
    (False, False): ContinuousSupportShape1D.REAL_LINE,
}


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Real interval with configurable closure of its ends.

    Infinite ends are always open, whatever closure is requested. An interval
    with ``left > right`` is empty; it is representable so that supports can
    be compared and classified without raising.

    Parameters
    ----------
    left, right : float
        End points, ``-inf`` / ``inf`` by default.
    left_closed, right_closed : bool
        Whether the finite end points belong to the interval.
    """

    left: float = -math.inf
    right: float = math.inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if math.isinf(self.left):
            object.__setattr__(self, "left_closed", False)
        if math.isinf(self.right):
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Elementwise membership test; NaN is never contained."""
        arr = np.asarray(x, dtype=float)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        inside = above & below
        if inside.ndim == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        if self.left == self.right:
            return not (self.left_closed and self.right_closed)
        return not self.left < self.right

    @property
    def length(self) -> float:
        return 0.0 if self.is_empty else self.right - self.left

    @property
    def shape(self) -> ContinuousSupportShape1D:
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT
        return _SHAPES[(math.isfinite(self.left), math.isfinite(self.right))]


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    This enumeration defines standard names for distribution functions,
    moments, and other statistical characteristics used throughout statkit.

    Note
    ----------
    Functions (``pdf``, ``cdf``, ...) take a point or a probability; the
    remaining characteristics are constants of the distribution and are
    evaluated at ``None``. Users may register characteristics of their own.
    """

    PDF = "pdf"
    LN_PDF = "ln_pdf"
    PMF = "pmf"
    LN_PMF = "ln_pmf"
    CDF = "cdf"
    SF = "sf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    STD_DEV = "std_dev"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"
    MODE = "mode"
    MEDIAN = "median"
    COV = "covariance"


class FamilyName(StrEnum):
    # continuous
    NORMAL = "Normal"
    LOG_NORMAL = "LogNormal"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    ERLANG = "Erlang"
    CHI_SQUARED = "ChiSquared"
    CHI = "Chi"
    BETA = "Beta"
    STUDENTS_T = "StudentsT"
    CAUCHY = "Cauchy"
    LAPLACE = "Laplace"
    WEIBULL = "Weibull"
    PARETO = "Pareto"
    TRIANGULAR = "Triangular"
    INVERSE_GAMMA = "InverseGamma"
    FISHER_SNEDECOR = "FisherSnedecor"
    GUMBEL = "Gumbel"
    # discrete
    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    POISSON = "Poisson"
    GEOMETRIC = "Geometric"
    NEGATIVE_BINOMIAL = "NegativeBinomial"
    HYPERGEOMETRIC = "Hypergeometric"
    DISCRETE_UNIFORM = "DiscreteUniform"
    CATEGORICAL = "Categorical"
    # multivariate
    MULTIVARIATE_NORMAL = "MultivariateNormal"
    DIRICHLET = "Dirichlet"
    MULTINOMIAL = "Multinomial"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "MultivariateContinuous",
    "MultivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "Interval1D",
    "ContinuousSupportShape1D",
    "BoolArray",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
