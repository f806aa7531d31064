"""Representation-agnostic digraph helpers.

Everything here goes through the Digraph interface only, so it works
for MapDigraph, TrivialDigraph or any other implementation.  Derived
graphs are built with a caller-supplied factory and never share
storage with their input.
"""
from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, TypeVar

from digraphkit.graph.base import Digraph, V
from digraphkit.graph.trivial import EMPTY

R = TypeVar("R", bound=Digraph)


def empty_digraph() -> Digraph:
    """The shared, immutable digraph without vertices."""
    return EMPTY


def copy(graph: Digraph[V], factory: Callable[[], R]) -> R:
    """Fresh graph with the same vertices and weighted edges as *graph*."""
    result = factory()
    for vertex in graph.vertices():
        result.add_vertex(vertex)
        for target in graph.targets(vertex):
            result.put_edge(vertex, target, graph.get_edge(vertex, target))
    return result


def reverse(graph: Digraph[V], factory: Callable[[], R]) -> R:
    """Build the reverse of *graph*: every s -> t becomes t -> s.

    Isolated vertices are kept, weights are unchanged.
    """
    result = factory()
    for source in graph.vertices():
        result.add_vertex(source)
        for target in graph.targets(source):
            result.put_edge(target, source, graph.get_edge(source, target))
    return result


def subgraph(
    graph: Digraph[V], vertices: Iterable[V], factory: Callable[[], R]
) -> R:
    """Build the subgraph of *graph* induced by *vertices*.

    Vertices not in *graph* are ignored.  Vertices are inserted in
    *graph*'s own iteration order.
    """
    keep = vertices if isinstance(vertices, (set, frozenset)) else set(vertices)
    result = factory()
    for vertex in graph.vertices():
        if vertex not in keep:
            continue
        result.add_vertex(vertex)
        for target in graph.targets(vertex):
            if target in keep:
                result.put_edge(vertex, target, graph.get_edge(vertex, target))
    return result


def is_equivalent(
    first: Digraph[V], second: Digraph[V], compare_weights: bool = True
) -> bool:
    """True if both graphs have the same vertices and edges.

    With compare_weights=False only the edge endpoints are compared.
    """
    if first is second:
        return True
    if first.vertex_count != second.vertex_count:
        return False
    if first.edge_count != second.edge_count:
        return False
    for source in first.vertices():
        if not second.contains_vertex(source):
            return False
        for target in first.targets(source):
            weight = second.get_edge(source, target)
            if weight is None:
                return False
            if compare_weights and weight != first.get_edge(source, target):
                return False
    return True


def reachable(graph: Digraph[V], source: V) -> set[V]:
    """Every vertex reachable from *source*, *source* included.

    Returns an empty set if *source* is not a vertex of *graph*.
    """
    if not graph.contains_vertex(source):
        return set()
    seen: set[V] = {source}
    q: deque[V] = deque([source])
    while q:
        vertex = q.popleft()
        for target in graph.targets(vertex):
            if target not in seen:
                seen.add(target)
                q.append(target)
    return seen


def is_reachable(graph: Digraph[V], source: V, target: V) -> bool:
    """True if there is a (possibly empty) path from *source* to *target*."""
    return graph.contains_vertex(target) and target in reachable(graph, source)
