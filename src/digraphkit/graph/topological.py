"""Topological sort via Kahn's algorithm (BFS with in-degree tracking).

Kahn's algorithm produces a breadth-first ordering: vertices without
incoming edges come first, then vertices whose only predecessors are
those, and so on.  Ties are broken by the graph's vertex iteration
order, so key-ordered graphs sort deterministically.

The algorithm:
  1.  Compute in-degree for every vertex in one pass over the edges.
      (Digraph.in_degree() may be O(V) per call on representations
      without an incoming-edge index.)
  2.  Seed a queue with all vertices whose in-degree is 0.
  3.  Pop a vertex, append it to the result, decrement in-degree of its
      targets.  Any target whose in-degree drops to 0 enters the queue.
  4.  If the result contains all vertices, the graph is a DAG.
      Otherwise there is at least one cycle (a self-loop counts).
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Hashable, TypeVar

from digraphkit.graph.base import Digraph

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)


class CyclicGraphError(Exception):
    """Raised when an algorithm that needs a DAG encounters a cycle."""

    def __init__(self, remaining_vertices: list) -> None:
        self.remaining_vertices = remaining_vertices
        super().__init__(
            f"Cycle detected: {len(remaining_vertices)} vertex(es) involved in "
            f"or downstream of a cycle"
        )


def in_degrees(graph: Digraph[T]) -> dict[T, int]:
    """In-degree of every vertex, computed in a single O(V + E) pass."""
    in_deg: dict[T, int] = {v: 0 for v in graph.vertices()}
    for vertex in graph.vertices():
        for target in graph.targets(vertex):
            in_deg[target] += 1
    return in_deg


def topological_sort(graph: Digraph[T]) -> list[T]:
    """Return vertices so that every edge points forward in the list.

    Raises CyclicGraphError if the graph contains a cycle.
    """
    in_deg = in_degrees(graph)

    q: deque[T] = deque()
    for vertex, deg in in_deg.items():
        if deg == 0:
            q.append(vertex)

    result: list[T] = []
    while q:
        vertex = q.popleft()
        result.append(vertex)
        for target in graph.targets(vertex):
            in_deg[target] -= 1
            if in_deg[target] == 0:
                q.append(target)

    if len(result) != graph.vertex_count:
        done = set(result)
        remaining = [v for v in graph.vertices() if v not in done]
        log.debug("Topological sort stopped with %d vertices left", len(remaining))
        raise CyclicGraphError(remaining)

    return result
