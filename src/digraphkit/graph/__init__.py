"""Weighted digraph representations and algorithms."""

from digraphkit.graph.base import (
    ConcurrentModificationError,
    Cursor,
    Digraph,
    DigraphFactory,
    DigraphView,
    IllegalStateError,
    UnsupportedOperationError,
)
from digraphkit.graph.components import (
    component_digraphs,
    condensation,
    strongly_connected_components,
)
from digraphkit.graph.critical_path import CriticalPath, critical_path
from digraphkit.graph.cycle_detector import CycleResult, detect_cycle, is_acyclic
from digraphkit.graph.digraphs import (
    copy,
    empty_digraph,
    is_equivalent,
    is_reachable,
    reachable,
    reverse,
    subgraph,
)
from digraphkit.graph.map_digraph import (
    MapDigraph,
    default_edge_map_factory,
    default_vertex_map_factory,
    map_digraph_factory,
)
from digraphkit.graph.sorted_map import SortedKeyMap
from digraphkit.graph.topological import CyclicGraphError, topological_sort
from digraphkit.graph.trivial import TrivialDigraph

__all__ = [
    "ConcurrentModificationError",
    "CriticalPath",
    "Cursor",
    "CycleResult",
    "CyclicGraphError",
    "Digraph",
    "DigraphFactory",
    "DigraphView",
    "IllegalStateError",
    "MapDigraph",
    "SortedKeyMap",
    "TrivialDigraph",
    "UnsupportedOperationError",
    "component_digraphs",
    "condensation",
    "copy",
    "critical_path",
    "default_edge_map_factory",
    "default_vertex_map_factory",
    "detect_cycle",
    "empty_digraph",
    "is_acyclic",
    "is_equivalent",
    "is_reachable",
    "map_digraph_factory",
    "reachable",
    "reverse",
    "strongly_connected_components",
    "subgraph",
    "topological_sort",
]
