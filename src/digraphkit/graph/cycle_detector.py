"""Cycle detection in directed graphs using DFS three-color marking.

The three colors:
  WHITE  -- vertex not yet visited
  GRAY   -- vertex is on the current DFS path (the "on stack" set)
  BLACK  -- vertex fully explored (all descendants visited)

An edge to a GRAY vertex is a back edge and closes a cycle.  A
self-loop is the degenerate case: the vertex is GRAY while its own
loop edge is examined.

The DFS is driven by an explicit stack of (vertex, target iterator)
frames rather than recursion, so long chains don't hit the
interpreter's recursion limit.  Vertices and targets are visited in
the graph's own iteration order, which makes the reported cycle
deterministic for key-ordered graphs and insertion-order dependent
otherwise.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

from digraphkit.graph.base import Digraph

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(slots=True)
class CycleResult(Generic[T]):
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[T] | None = None


def _find_back_edge(
    graph: Digraph[T],
) -> tuple[list[T], T] | None:
    """Run the DFS; return (current path, back-edge target) on a cycle."""
    color: dict[T, int] = {}
    for root in graph.vertices():
        if color.get(root, WHITE) != WHITE:
            continue
        color[root] = GRAY
        path: list[T] = [root]
        stack: list[Iterator[T]] = [iter(graph.targets(root))]
        while stack:
            for succ in stack[-1]:
                state = color.get(succ, WHITE)
                if state == GRAY:
                    return path, succ
                if state == WHITE:
                    color[succ] = GRAY
                    path.append(succ)
                    stack.append(iter(graph.targets(succ)))
                    break
            else:
                color[path.pop()] = BLACK
                stack.pop()
    return None


def detect_cycle(graph: Digraph[T]) -> CycleResult[T]:
    """Detect whether *graph* contains a directed cycle.

    Returns a CycleResult with has_cycle=True and the cycle path if one
    exists.  The cycle path is a list [v0, v1, ..., vk, v0] where each
    consecutive pair is a directed edge; a self-loop gives [v, v].
    """
    found = _find_back_edge(graph)
    if found is None:
        return CycleResult(has_cycle=False, cycle_path=None)
    path, succ = found
    cycle = path[path.index(succ):]
    cycle.append(succ)
    log.debug("Cycle of length %d found through %r", len(cycle) - 1, succ)
    return CycleResult(has_cycle=True, cycle_path=cycle)


def is_acyclic(graph: Digraph[T]) -> bool:
    """True iff *graph* has no directed cycle; self-loops are cycles."""
    return _find_back_edge(graph) is None
