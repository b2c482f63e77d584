"""
Characteristic Graph Registry
=============================

A directed graph over characteristic names for a fixed
:class:`~statkit.types.DistributionType`. Nodes are characteristic names and
edges are unary :class:`~statkit.distributions.computation.ComputationMethod`
conversions (``1 source -> 1 target``).

Characteristics are either *definitive* (each one determines the distribution,
e.g. ``pdf``, ``cdf``, ``ppf``) or *indefinitive* (derived quantities such as
``ln_pdf``, ``sf`` or ``std_dev``).

Invariants
----------
1. There is at least one *definitive* node.
2. The subgraph induced by the *definitive* nodes is **strongly connected**.
3. No path leads from an *indefinitive* node back to a *definitive* node.

Default configuration
---------------------
Univariate continuous: ``pdf <-> cdf <-> ppf`` (definitive), ``pdf -> ln_pdf``,
``cdf -> sf``, ``ppf -> median``, ``var -> std_dev``.

Univariate discrete: ``pmf <-> cdf <-> ppf`` (definitive), ``pmf -> ln_pmf``,
``cdf -> sf``, ``ppf -> median``, ``var -> std_dev``.

Multivariate: ``pdf -> ln_pdf`` (continuous), ``pmf -> ln_pmf`` (discrete).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import warnings
from collections import deque
from collections.abc import Set
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Any, ClassVar, Self

from statkit.distributions import fitters
from statkit.distributions.computation import ComputationMethod
from statkit.errors import StatkitError
from statkit.types import (
    CharacteristicName,
    DistributionType,
    EuclideanDistributionType,
    Kind,
)

if TYPE_CHECKING:
    from statkit.types import GenericCharacteristicName

logger = logging.getLogger(__name__)

DEFAULT_COMPUTATION_KEY: str = "statkit_default_computation"


class GraphInvariantError(StatkitError, RuntimeError):
    """Raised when the characteristic graph invariants are violated."""


@dataclass(slots=True, frozen=True)
class CharacteristicGraph:
    """
    Directed characteristic graph for a fixed :class:`DistributionType`.

    Notes
    -----
    Edges are stored as ``adjacency[src][dst] = {method_name: ComputationMethod}``
    with the reserved key :data:`DEFAULT_COMPUTATION_KEY` for the default method.
    """

    distribution_type: DistributionType

    _adj: dict[
        GenericCharacteristicName,
        dict[GenericCharacteristicName, dict[str, ComputationMethod[Any, Any]]],
    ] = field(default_factory=dict, repr=False)
    _definitive: set[GenericCharacteristicName] = field(default_factory=set, repr=False)

    def _ensure_vertex(self, v: GenericCharacteristicName) -> None:
        self._adj.setdefault(v, {})

    @staticmethod
    def _pick_method(
        methods: dict[str, ComputationMethod[Any, Any]],
    ) -> ComputationMethod[Any, Any]:
        """Pick a deterministic method for an edge, preferring the default key."""
        if DEFAULT_COMPUTATION_KEY in methods:
            return methods[DEFAULT_COMPUTATION_KEY]
        return methods[min(methods)]

    def _add_edge(self, method: ComputationMethod[Any, Any], name: str) -> None:
        if len(method.sources) != 1:
            raise GraphInvariantError(
                "Only unary methods are supported for edges (1 source -> 1 target)."
            )
        source = method.sources[0]
        self._ensure_vertex(source)
        self._ensure_vertex(method.target)
        methods = self._adj[source].setdefault(method.target, {})
        if name in methods:
            warnings.warn(
                f"Replacing conversion '{name}' for {source} -> {method.target} "
                f"in the {self.distribution_type} graph",
                stacklevel=3,
            )
        methods[name] = method

    def add_bidirectional_definitive(
        self,
        a_to_b: ComputationMethod[Any, Any],
        b_to_a: ComputationMethod[Any, Any],
        name_ab: str = DEFAULT_COMPUTATION_KEY,
        name_ba: str = DEFAULT_COMPUTATION_KEY,
    ) -> None:
        """
        Link two *definitive* nodes by a pair of inverse conversions.

        Raises
        ------
        GraphInvariantError
            If the methods do not link the same pair of nodes in opposite
            directions, or the invariants break.
        """
        a = a_to_b.sources[0]
        b = a_to_b.target
        if b_to_a.sources[0] != b or b_to_a.target != a:
            raise GraphInvariantError(
                "Inverse methods must link the same pair of definitive nodes "
                "in opposite directions."
            )
        self._definitive.update((a, b))
        self._add_edge(a_to_b, name_ab)
        self._add_edge(b_to_a, name_ba)
        self._validate_invariants()

    def register_definitive(self, name: GenericCharacteristicName) -> None:
        """Mark a node as *definitive*."""
        self._definitive.add(name)
        self._ensure_vertex(name)
        self._validate_invariants()

    def add_conversion(
        self, method: ComputationMethod[Any, Any], *, name: str = DEFAULT_COMPUTATION_KEY
    ) -> None:
        """
        Add a unary conversion ``source -> target``.

        A conversion leading from an indefinitive node back to a definitive
        one is rejected.
        """
        self._add_edge(method, name)
        self._validate_invariants()

    def is_definitive(self, name: GenericCharacteristicName) -> bool:
        return name in self._definitive

    def definitive_nodes(self) -> frozenset[GenericCharacteristicName]:
        return frozenset(self._definitive)

    def all_nodes(self) -> frozenset[GenericCharacteristicName]:
        verts = set(self._adj)
        for nbrs in self._adj.values():
            verts.update(nbrs)
        verts.update(self._definitive)
        return frozenset(verts)

    def indefinitive_nodes(self) -> frozenset[GenericCharacteristicName]:
        return self.all_nodes() - self._definitive

    def find_path(
        self,
        src: GenericCharacteristicName,
        dst: GenericCharacteristicName,
    ) -> list[ComputationMethod[Any, Any]] | None:
        """
        Shortest conversion chain ``src -> ... -> dst`` (breadth-first search).

        Returns
        -------
        list[ComputationMethod] or None
            The conversions in application order, ``[]`` if ``src == dst``,
            ``None`` if ``dst`` is unreachable.
        """
        if src == dst:
            return []

        parent: dict[
            GenericCharacteristicName,
            tuple[GenericCharacteristicName, ComputationMethod[Any, Any]],
        ] = {}
        visited: set[GenericCharacteristicName] = {src}
        q: deque[GenericCharacteristicName] = deque([src])

        while q:
            v = q.popleft()
            for w, methods in self._adj.get(v, {}).items():
                if w in visited or not methods:
                    continue
                visited.add(w)
                parent[w] = (v, self._pick_method(methods))
                if w == dst:
                    path: list[ComputationMethod[Any, Any]] = []
                    cur = dst
                    while cur != src:
                        prev, method = parent[cur]
                        path.append(method)
                        cur = prev
                    path.reverse()
                    return path
                q.append(w)
        return None

    def reachable_from(
        self,
        start: GenericCharacteristicName,
        allowed: Set[GenericCharacteristicName] | None = None,
    ) -> set[GenericCharacteristicName]:
        """Nodes reachable from ``start``, optionally only through ``allowed`` nodes."""
        seen: set[GenericCharacteristicName] = {start}
        q: deque[GenericCharacteristicName] = deque([start])
        while q:
            v = q.popleft()
            for w in self._adj.get(v, {}):
                if allowed is not None and w not in allowed:
                    continue
                if w not in seen:
                    seen.add(w)
                    q.append(w)
        return seen

    def _validate_invariants(self) -> None:
        if not self._definitive:
            raise GraphInvariantError("There must be at least one definitive characteristic.")

        for node in self._definitive:
            if not self._definitive <= self.reachable_from(node, allowed=self._definitive):
                raise GraphInvariantError("Definitive subgraph must be strongly connected.")

        for node in self.indefinitive_nodes():
            if self.reachable_from(node) & self._definitive:
                raise GraphInvariantError(
                    f"No path from indefinitive node '{node}' back to a definitive node is allowed."
                )


def _edge(
    source: CharacteristicName, target: CharacteristicName, fitter: Any
) -> ComputationMethod[Any, Any]:
    return ComputationMethod[Any, Any](target=target, sources=[source], fitter=fitter)


def _configure_univariate_continuous(graph: CharacteristicGraph) -> None:
    cn = CharacteristicName
    graph.add_bidirectional_definitive(
        _edge(cn.PDF, cn.CDF, fitters.fit_pdf_to_cdf_1C),
        _edge(cn.CDF, cn.PDF, fitters.fit_cdf_to_pdf_1C),
    )
    graph.add_bidirectional_definitive(
        _edge(cn.CDF, cn.PPF, fitters.fit_cdf_to_ppf_1C),
        _edge(cn.PPF, cn.CDF, fitters.fit_ppf_to_cdf_1C),
    )
    graph.add_conversion(_edge(cn.PDF, cn.LN_PDF, fitters.fit_pdf_to_ln_pdf))
    graph.add_conversion(_edge(cn.CDF, cn.SF, fitters.fit_cdf_to_sf))
    graph.add_conversion(_edge(cn.PPF, cn.MEDIAN, fitters.fit_ppf_to_median))
    graph.add_conversion(_edge(cn.VAR, cn.STD_DEV, fitters.fit_var_to_std_dev))


def _configure_univariate_discrete(graph: CharacteristicGraph) -> None:
    cn = CharacteristicName
    graph.add_bidirectional_definitive(
        _edge(cn.PMF, cn.CDF, fitters.fit_pmf_to_cdf_1D),
        _edge(cn.CDF, cn.PMF, fitters.fit_cdf_to_pmf_1D),
    )
    graph.add_bidirectional_definitive(
        _edge(cn.CDF, cn.PPF, fitters.fit_cdf_to_ppf_1D),
        _edge(cn.PPF, cn.CDF, fitters.fit_ppf_to_cdf_1D),
    )
    graph.add_conversion(_edge(cn.PMF, cn.LN_PMF, fitters.fit_pmf_to_ln_pmf))
    graph.add_conversion(_edge(cn.CDF, cn.SF, fitters.fit_cdf_to_sf))
    graph.add_conversion(_edge(cn.PPF, cn.MEDIAN, fitters.fit_ppf_to_median))
    graph.add_conversion(_edge(cn.VAR, cn.STD_DEV, fitters.fit_var_to_std_dev))


def _configure_multivariate(graph: CharacteristicGraph, kind: Kind) -> None:
    cn = CharacteristicName
    if kind == Kind.CONTINUOUS:
        graph.register_definitive(cn.PDF)
        graph.add_conversion(_edge(cn.PDF, cn.LN_PDF, fitters.fit_pdf_to_ln_pdf))
    else:
        graph.register_definitive(cn.PMF)
        graph.add_conversion(_edge(cn.PMF, cn.LN_PMF, fitters.fit_pmf_to_ln_pmf))


def _configure_defaults(graph: CharacteristicGraph) -> None:
    dt = graph.distribution_type
    if not isinstance(dt, EuclideanDistributionType):
        return
    if dt.is_univariate:
        if dt.kind == Kind.CONTINUOUS:
            _configure_univariate_continuous(graph)
        else:
            _configure_univariate_discrete(graph)
    else:
        _configure_multivariate(graph, dt.kind)
    logger.debug("Configured default conversions for %s", dt)


class DistributionTypeRegister:
    """Singleton-like registry mapping a :class:`DistributionType` to its graph."""

    _instance: ClassVar[Self | None] = None
    _graphs: dict[DistributionType, CharacteristicGraph]

    def __new__(cls) -> Self:
        if cls._instance is None:
            self = super().__new__(cls)
            self._graphs = {}
            cls._instance = self
        return cls._instance

    def get(self, distribution_type: DistributionType) -> CharacteristicGraph:
        """
        Return the graph for ``distribution_type``.

        Euclidean types get the default conversions of their kind and
        dimension on first access.
        """
        graph = self._graphs.get(distribution_type)
        if graph is None:
            graph = CharacteristicGraph(distribution_type=distribution_type)
            _configure_defaults(graph)
            self._graphs[distribution_type] = graph
        return graph

    __call__ = get

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


@lru_cache(maxsize=1)
def distribution_type_register() -> DistributionTypeRegister:
    """Return the cached :class:`DistributionTypeRegister`."""
    return DistributionTypeRegister()


def reset_characteristic_registry() -> None:
    """Drop every configured graph (test helper)."""
    distribution_type_register.cache_clear()
    DistributionTypeRegister._reset()


__all__ = [
    "DEFAULT_COMPUTATION_KEY",
    "GraphInvariantError",
    "CharacteristicGraph",
    "DistributionTypeRegister",
    "distribution_type_register",
    "reset_characteristic_registry",
]
