"""Critical path analysis on an edge-weighted DAG.

The critical path is the longest path through the graph when every
edge contributes its weight.  For a layered drawing or a scheduling
view it tells you which chain dominates, and which single edge on
that chain is the bottleneck.

Algorithm:
  1.  Topologically sort the DAG.
  2.  Walk vertices in topological order.  For each vertex v, for each
      target w, relax: if dist[v] + weight(v, w) > dist[w], update
      dist[w] and record v as the predecessor of w on the longest path.
  3.  The vertex with the largest dist is the endpoint.
  4.  Walk predecessors backward to reconstruct the full path.

Standard DAG longest-path algorithm, O(V + E).  Negative weights are
fine here because there are no cycles to exploit them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

from digraphkit.graph.base import Digraph
from digraphkit.graph.topological import topological_sort

T = TypeVar("T", bound=Hashable)


@dataclass(slots=True)
class CriticalPath(Generic[T]):
    """Result of critical path analysis."""
    path: list[T]
    total_weight: int
    bottleneck: tuple[T, T] | None   # heaviest edge on the path, None for a lone vertex
    bottleneck_weight: int


def critical_path(graph: Digraph[T]) -> CriticalPath[T]:
    """Find the heaviest path through *graph* by summed edge weight.

    A path may be a single vertex with total weight 0, so graphs
    without edges (or with only negative weights) still yield a result.

    Raises ValueError for an empty graph and CyclicGraphError (via
    topological_sort) if the graph has a cycle.
    """
    order = topological_sort(graph)
    if not order:
        raise ValueError("Cannot compute critical path of an empty graph")

    # every vertex can start a fresh path of weight 0
    dist: dict[T, int] = {v: 0 for v in order}
    pred: dict[T, T | None] = {v: None for v in order}

    for vertex in order:
        for target in graph.targets(vertex):
            new_dist = dist[vertex] + graph.get_edge(vertex, target)  # type: ignore[operator]
            if new_dist > dist[target]:
                dist[target] = new_dist
                pred[target] = vertex

    best = max(order, key=lambda v: dist[v])

    path: list[T] = [best]
    cur = best
    while pred[cur] is not None:
        cur = pred[cur]  # type: ignore[assignment]
        path.append(cur)
    path.reverse()

    edges = list(zip(path, path[1:]))
    if not edges:
        return CriticalPath(path=path, total_weight=0, bottleneck=None,
                            bottleneck_weight=0)
    bn = max(edges, key=lambda e: graph.get_edge(*e))  # type: ignore[arg-type, return-value]
    return CriticalPath(
        path=path,
        total_weight=dist[best],
        bottleneck=bn,
        bottleneck_weight=graph.get_edge(*bn),  # type: ignore[arg-type]
    )
