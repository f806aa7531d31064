"""Strongly connected components (Tarjan) and the condensation DAG.

Tarjan's algorithm assigns every vertex a DFS index and a low-link:
the smallest index reachable through the vertex's DFS subtree plus at
most one back edge.  A vertex whose low-link equals its own index is
the root of a component; everything above it on the component stack
belongs to that component.

Components come out in reverse topological order of the condensation:
a component is emitted only after every component it can reach.

Like the cycle detector, the DFS keeps an explicit stack of target
iterators instead of recursing.
"""
from __future__ import annotations

import logging
from typing import Callable, Hashable, Iterator, TypeVar

from digraphkit.graph import digraphs
from digraphkit.graph.base import Digraph
from digraphkit.graph.trivial import TrivialDigraph

T = TypeVar("T", bound=Hashable)
R = TypeVar("R", bound=Digraph)

log = logging.getLogger(__name__)


def strongly_connected_components(graph: Digraph[T]) -> list[list[T]]:
    """Partition the vertices of *graph* into strongly connected components.

    Within a component, vertices are listed in the order they were
    popped off the component stack.
    """
    index: dict[T, int] = {}
    low: dict[T, int] = {}
    on_stack: set[T] = set()
    comp_stack: list[T] = []
    result: list[list[T]] = []

    for root in graph.vertices():
        if root in index:
            continue
        index[root] = low[root] = len(index)
        comp_stack.append(root)
        on_stack.add(root)
        path: list[T] = [root]
        frames: list[Iterator[T]] = [iter(graph.targets(root))]
        while frames:
            vertex = path[-1]
            for succ in frames[-1]:
                if succ not in index:
                    index[succ] = low[succ] = len(index)
                    comp_stack.append(succ)
                    on_stack.add(succ)
                    path.append(succ)
                    frames.append(iter(graph.targets(succ)))
                    break
                if succ in on_stack:
                    low[vertex] = min(low[vertex], index[succ])
            else:
                frames.pop()
                path.pop()
                if path:
                    parent = path[-1]
                    low[parent] = min(low[parent], low[vertex])
                if low[vertex] == index[vertex]:
                    component: list[T] = []
                    while True:
                        member = comp_stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == vertex:
                            break
                    result.append(component)

    log.debug("Found %d strongly connected components in %d vertices",
              len(result), graph.vertex_count)
    return result


def component_digraphs(
    graph: Digraph[T], factory: Callable[[], R]
) -> list[Digraph[T]]:
    """One induced subgraph per strongly connected component.

    Singleton components become TrivialDigraphs carrying the vertex's
    self-loop, if any; larger ones are built with *factory*.
    """
    result: list[Digraph[T]] = []
    for component in strongly_connected_components(graph):
        if len(component) == 1:
            vertex = component[0]
            result.append(TrivialDigraph(vertex, graph.get_edge(vertex, vertex)))
        else:
            result.append(digraphs.subgraph(graph, component, factory))
    return result


def condensation(
    graph: Digraph[T], factory: Callable[[], R]
) -> tuple[R, list[list[T]]]:
    """Collapse every strongly connected component into one vertex.

    Returns the condensation, whose vertices are component indices
    into the returned component list, and that list.  An edge i -> j
    carries the summed weight of all original edges from component i
    into component j.  The condensation is always acyclic.
    """
    components = strongly_connected_components(graph)
    owner: dict[T, int] = {}
    for i, component in enumerate(components):
        for vertex in component:
            owner[vertex] = i

    result = factory()
    for i in range(len(components)):
        result.add_vertex(i)
    for source in graph.vertices():
        for target in graph.targets(source):
            i, j = owner[source], owner[target]
            if i == j:
                continue
            weight = graph.get_edge(source, target)
            previous = result.get_edge(i, j)
            result.put_edge(i, j, weight if previous is None else previous + weight)
    return result, components
