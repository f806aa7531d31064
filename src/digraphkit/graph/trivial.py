"""Digraph with at most one vertex and an optional self-loop.

This is a closed special case, not a general graph: a second distinct
vertex or a non-loop edge is rejected with UnsupportedOperationError.
Algorithms use it as a cheap terminal value, e.g. for a singleton
strongly connected component or an empty induced subgraph.

A self-loop is its own reverse, so reverse() returns the instance
itself.  That is the one place where a derived graph aliases its
source.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from digraphkit.graph.base import (
    DigraphFactory,
    Digraph,
    DigraphView,
    UnsupportedOperationError,
    V,
    check_vertex,
    check_weight,
)


class TrivialDigraph(Digraph[V]):
    """Zero or one vertex plus an optional loop weight.

    The loop is stored as ``int | None`` so a zero-weight loop is a
    real edge, like everywhere else.
    """

    __slots__ = ("_vertex", "_loop", "_mods")

    @staticmethod
    def factory() -> DigraphFactory:
        """Factory creating empty trivial digraphs."""
        return TrivialDigraph

    def __init__(self, vertex: V | None = None, loop_weight: int | None = None) -> None:
        if vertex is None and loop_weight is not None:
            raise ValueError("A loop weight requires a vertex")
        if loop_weight is not None:
            check_weight(loop_weight)
        self._vertex = vertex
        self._loop = loop_weight
        self._mods = 0

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: V) -> bool:
        check_vertex(vertex)
        if self._vertex is None:
            self._vertex = vertex
            self._mods += 1
            return True
        if self._vertex == vertex:
            return False
        raise UnsupportedOperationError(
            f"{type(self).__name__} must contain at most one vertex"
        )

    def put_edge(self, source: V, target: V, weight: int) -> int | None:
        check_vertex(source)
        check_vertex(target)
        check_weight(weight)
        if source != target:
            raise UnsupportedOperationError(
                f"{type(self).__name__} cannot hold edge {source!r} -> {target!r}"
            )
        self.add_vertex(source)
        previous = self._loop
        self._loop = weight
        if previous is None:
            self._mods += 1
        return previous

    def remove_edge(self, source: V, target: V) -> int | None:
        if not self.contains_edge(source, target):
            return None
        previous = self._loop
        self._loop = None
        self._mods += 1
        return previous

    def remove_vertex(self, vertex: V) -> bool:
        if not self.contains_vertex(vertex):
            return False
        self._vertex = None
        self._loop = None
        self._mods += 1
        return True

    def remove_vertices(self, vertices: Iterable[V]) -> None:
        if self._vertex is not None and self._vertex in set(vertices):
            self.remove_vertex(self._vertex)

    # ---- queries ---------------------------------------------------------

    def get_edge(self, source: V, target: V) -> int | None:
        return self._loop if self.contains_edge(source, target) else None

    def contains_edge(self, source: V, target: V) -> bool:
        return (
            self._loop is not None
            and self._vertex == source
            and self._vertex == target
        )

    def contains_vertex(self, vertex: V) -> bool:
        return self._vertex is not None and self._vertex == vertex

    def vertices(self) -> DigraphView[V]:
        return DigraphView(self, self._vertex_items, self.remove_vertex)

    def targets(self, source: V) -> DigraphView[V]:
        return DigraphView(
            self,
            lambda: self._loop_items(source),
            lambda v: self.remove_edge(v, v),
        )

    def sources(self, target: V) -> DigraphView[V]:
        return self.targets(target)

    def _vertex_items(self) -> Iterator[V]:
        if self._vertex is not None:
            yield self._vertex

    def _loop_items(self, source: V) -> Iterator[V]:
        if self.contains_edge(source, source):
            yield self._vertex  # type: ignore[misc]

    @property
    def vertex_count(self) -> int:
        return 0 if self._vertex is None else 1

    @property
    def edge_count(self) -> int:
        return 0 if self._loop is None else 1

    @property
    def modification_count(self) -> int:
        return self._mods

    @property
    def loop_weight(self) -> int | None:
        return self._loop

    def in_degree(self, vertex: V) -> int:
        return 1 if self.contains_edge(vertex, vertex) else 0

    def out_degree(self, vertex: V) -> int:
        return 1 if self.contains_edge(vertex, vertex) else 0

    def total_weight(self) -> int:
        return 0 if self._loop is None else self._loop

    # ---- derived graphs --------------------------------------------------

    def reverse(self) -> TrivialDigraph[V]:
        return self

    def subgraph(self, vertices: Iterable[V]) -> Digraph[V]:
        if self._vertex is not None and self._vertex in set(vertices):
            return self
        return EMPTY

    def is_acyclic(self) -> bool:
        return self._loop is None


class _EmptyDigraph(TrivialDigraph[V]):
    """Shared immutable digraph without vertices."""

    __slots__ = ()

    def add_vertex(self, vertex: V) -> bool:
        check_vertex(vertex)
        raise UnsupportedOperationError("The empty digraph is immutable")

    def put_edge(self, source: V, target: V, weight: int) -> int | None:
        check_vertex(source)
        check_vertex(target)
        raise UnsupportedOperationError("The empty digraph is immutable")

    def __repr__(self) -> str:
        return "EmptyDigraph()"


EMPTY: TrivialDigraph = _EmptyDigraph()
