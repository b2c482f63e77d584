"""
Computation and Sampling Strategies
===================================

Pluggable strategy interfaces and their default implementations:

- :class:`ComputationStrategy`: resolves a characteristic to a callable.
- :class:`DefaultComputationStrategy`: returns analytical characteristics
  and walks the characteristic graph for the others.
- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy`: inverse transform sampling
  through the distribution's ``ppf``.
- :class:`AlgorithmSamplingStrategy`: delegates each draw to a dedicated
  variate generator.

Every sampling strategy takes the random source as an argument.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import threading
from typing import TYPE_CHECKING, Any, Protocol

from statkit.distributions.registry import distribution_type_register
from statkit.distributions.sampling import ArraySample
from statkit.distributions.variates import open_uniform
from statkit.errors import CharacteristicNotAvailableError, InvalidArgumentError
from statkit.types import CharacteristicName, EuclideanDistributionType

if TYPE_CHECKING:
    from collections.abc import Callable

    from statkit.distributions.computation import Method
    from statkit.distributions.distribution import Distribution
    from statkit.distributions.sampling import Sample
    from statkit.distributions.variates import RandomSource
    from statkit.types import GenericCharacteristicName

logger = logging.getLogger(__name__)


class ComputationStrategy(Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: Distribution, **options: Any
    ) -> Method[Any, Any]: ...


class DefaultComputationStrategy:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Otherwise, for each analytical characteristic of the distribution, look
       for a conversion path to the target in the graph of the distribution
       type and fit the last conversion of the first path found; the fitter
       resolves its own source through the distribution again.

    Raises
    ------
    CharacteristicNotAvailableError
        If the distribution has no analytical characteristics, no conversion
        path exists, or resolution runs into a cycle.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    @property
    def _resolving(self) -> dict[int, set[GenericCharacteristicName]]:
        # one guard per thread
        resolving: dict[int, set[GenericCharacteristicName]] | None = getattr(
            self._local, "resolving", None
        )
        if resolving is None:
            resolving = self._local.resolving = {}
        return resolving

    def _push_guard(self, distr: Distribution, state: GenericCharacteristicName) -> None:
        seen = self._resolving.setdefault(id(distr), set())
        if state in seen:
            raise CharacteristicNotAvailableError(
                f"Cycle detected while resolving '{state}'. "
                "Provide at least one analytical base characteristic in the distribution."
            )
        seen.add(state)

    def _pop_guard(self, distr: Distribution, state: GenericCharacteristicName) -> None:
        key = id(distr)
        seen = self._resolving.get(key)
        if seen is not None:
            seen.discard(state)
            if not seen:
                self._resolving.pop(key, None)

    def query_method(
        self, state: GenericCharacteristicName, distr: Distribution, **options: Any
    ) -> Method[Any, Any]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name.
        distr : Distribution
            The distribution providing the analytical base and type.
        **options
            Passed to the fitter when a conversion is required.

        Returns
        -------
        Method
            Analytical or fitted callable implementing ``state``.
        """
        analytical = distr.analytical_computations
        if state in analytical:
            return analytical[state]

        if not analytical:
            raise CharacteristicNotAvailableError(
                "Distribution provides no analytical computations to ground conversions."
            )

        graph = distribution_type_register().get(distr.distribution_type)

        self._push_guard(distr, state)
        try:
            for src in analytical:
                path = graph.find_path(src, state)
                if not path:
                    continue
                logger.debug(
                    "Fitting %s for %s via %s",
                    state,
                    distr.distribution_type,
                    " -> ".join([src, *(edge.target for edge in path)]),
                )
                return path[-1].fit(distr, **options)

            raise CharacteristicNotAvailableError(
                f"No conversion path from any analytical characteristic to '{state}'."
            )
        finally:
            self._pop_guard(distr, state)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: Distribution, rng: RandomSource, **options: Any) -> Sample: ...


def _check_sample_size(n: int) -> None:
    if n < 0:
        raise InvalidArgumentError(f"sample size must be non-negative, got {n}")


def _dimension(distr: Distribution) -> int:
    dt = distr.distribution_type
    return dt.dimension if isinstance(dt, EuclideanDistributionType) else 1


class DefaultSamplingUnivariateStrategy:
    """
    Inverse transform sampling: ``ppf(U)`` for i.i.d. ``U`` uniform on ``(0, 1)``.

    Returns
    -------
    ArraySample
        A sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: Distribution, rng: RandomSource, **options: Any
    ) -> ArraySample:
        _check_sample_size(n)
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        draws = [float(ppf(open_uniform(rng))) for _ in range(n)]
        return ArraySample.from_draws(draws, 1)


class AlgorithmSamplingStrategy:
    """
    Sampling through a dedicated variate generator.

    Parameters
    ----------
    draw : Callable[[Distribution, RandomSource], Any]
        Produces one draw (a float, or a vector for multivariate
        distributions) from the random source.
    """

    def __init__(self, draw: Callable[[Distribution, RandomSource], Any]) -> None:
        self._draw = draw

    def sample(
        self, n: int, distr: Distribution, rng: RandomSource, **options: Any
    ) -> ArraySample:
        _check_sample_size(n)
        draws = [self._draw(distr, rng) for _ in range(n)]
        return ArraySample.from_draws(draws, _dimension(distr))


__all__ = [
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "AlgorithmSamplingStrategy",
]
