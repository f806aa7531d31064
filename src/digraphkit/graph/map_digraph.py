"""General-purpose digraph backed by nested mappings.

Storage is a vertex map {source: {target: weight}}.  Every vertex is
a key of the outer map, isolated ones included, and every key of an
inner map is also an outer key.  Isolated vertices share one
immutable empty inner map; a real edge map is only allocated on the
first outgoing edge and dropped again when the last one goes away.

The edge count is a running total kept in step with every insert,
removal and cascade, never recomputed from the maps.  total_weight()
on the other hand is summed on demand, O(E).

There is no incoming-edge index, so remove_vertex() scans every
other vertex's edge map: O(V) per removal.

Iteration order is whatever the mapping factories give us:
insertion order for plain dicts (the default), sort-key order when a
key is supplied (SortedKeyMap).
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, MutableMapping

from digraphkit.graph import digraphs
from digraphkit.graph.base import (
    DigraphFactory,
    Digraph,
    DigraphView,
    V,
    check_vertex,
    check_weight,
)
from digraphkit.graph.cycle_detector import is_acyclic
from digraphkit.graph.sorted_map import SortedKeyMap

VertexMapFactory = Callable[[], MutableMapping[Any, Mapping[Any, int]]]
EdgeMapFactory = Callable[[Any], MutableMapping[Any, int]]

_NO_EDGES: Mapping = MappingProxyType({})
_SAME_AS_KEY = object()


def default_vertex_map_factory(key: Callable[[Any], Any] | None = None) -> VertexMapFactory:
    """Plain dicts without *key*, SortedKeyMaps ordered by *key* otherwise."""
    if key is None:
        return dict
    return lambda: SortedKeyMap(key)


def default_edge_map_factory(key: Callable[[Any], Any] | None = None) -> EdgeMapFactory:
    """Same as default_vertex_map_factory() but for per-source edge maps."""
    if key is None:
        return lambda source: {}
    return lambda source: SortedKeyMap(key)


def map_digraph_factory(
    vertex_map_factory: VertexMapFactory,
    edge_map_factory: EdgeMapFactory,
) -> DigraphFactory:
    """Factory creating MapDigraphs wired to the given mapping factories."""
    return lambda: MapDigraph(
        vertex_map_factory=vertex_map_factory,
        edge_map_factory=edge_map_factory,
    )


class MapDigraph(Digraph[V]):
    """Map-of-maps digraph.

    Args:
        key: Sort key for vertices.  When given, vertices and edge
            targets iterate in key order; otherwise in insertion order.
            Use functools.cmp_to_key to plug in a comparator.
        edge_key: Sort key for edge targets, defaults to *key*.  Pass
            None explicitly to keep targets in insertion order.
        vertex_map_factory: Overrides the map used for the vertex map.
        edge_map_factory: Overrides the map used per source vertex.
            Called with the source vertex.
    """

    __slots__ = ("_vertex_map_factory", "_edge_map_factory", "_vertex_map",
                 "_edge_count", "_mods")

    @staticmethod
    def default_factory() -> DigraphFactory:
        """Factory creating insertion-ordered MapDigraphs."""
        return map_digraph_factory(
            default_vertex_map_factory(), default_edge_map_factory()
        )

    def __init__(
        self,
        key: Callable[[Any], Any] | None = None,
        edge_key: Any = _SAME_AS_KEY,
        *,
        vertex_map_factory: VertexMapFactory | None = None,
        edge_map_factory: EdgeMapFactory | None = None,
    ) -> None:
        if edge_key is _SAME_AS_KEY:
            edge_key = key
        self._vertex_map_factory = vertex_map_factory or default_vertex_map_factory(key)
        self._edge_map_factory = edge_map_factory or default_edge_map_factory(edge_key)
        self._vertex_map: MutableMapping[V, Mapping[V, int]] = self._vertex_map_factory()
        self._edge_count = 0
        self._mods = 0

    def factory(self) -> DigraphFactory:
        """Factory creating empty MapDigraphs configured like this one."""
        return map_digraph_factory(self._vertex_map_factory, self._edge_map_factory)

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: V) -> bool:
        check_vertex(vertex)
        if vertex in self._vertex_map:
            return False
        self._vertex_map[vertex] = _NO_EDGES
        self._mods += 1
        return True

    def put_edge(self, source: V, target: V, weight: int) -> int | None:
        check_vertex(source)
        check_vertex(target)
        check_weight(weight)
        edge_map = self._vertex_map.get(source)
        if edge_map and target in edge_map:
            previous = edge_map[target]
            edge_map[target] = weight  # type: ignore[index]
            return previous

        source_known = edge_map is not None
        target_known = target in self._vertex_map
        fresh = not edge_map
        if fresh:
            # absent vertex or the shared empty map: allocate a real one
            edge_map = self._edge_map_factory(source)
        # inserts into key-ordered maps can raise (incomparable sort keys);
        # any failure below is rolled back so the graph stays untouched
        edge_map[target] = weight  # type: ignore[index]
        try:
            if fresh:
                self._vertex_map[source] = edge_map  # type: ignore[assignment]
            if not target_known and target != source:
                self._vertex_map[target] = _NO_EDGES
        except Exception:
            if not fresh:
                del edge_map[target]  # type: ignore[attr-defined]
            elif source_known:
                self._vertex_map[source] = _NO_EDGES
            else:
                self._vertex_map.pop(source, None)
            raise
        self._edge_count += 1
        self._mods += 1
        return None

    def remove_edge(self, source: V, target: V) -> int | None:
        edge_map = self._vertex_map.get(source)
        if not edge_map or target not in edge_map:
            return None
        weight = edge_map.pop(target)  # type: ignore[attr-defined]
        self._edge_count -= 1
        self._mods += 1
        if not edge_map:
            self._vertex_map[source] = _NO_EDGES
        return weight

    def remove_vertex(self, vertex: V) -> bool:
        edge_map = self._vertex_map.get(vertex)
        if edge_map is None:
            return False
        self._edge_count -= len(edge_map)
        del self._vertex_map[vertex]
        self._mods += 1
        # a self-loop went away with the vertex's own edge map
        for source in list(self._vertex_map):
            self.remove_edge(source, vertex)
        return True

    def remove_vertices(self, vertices: Iterable[V]) -> None:
        doomed = vertices if isinstance(vertices, (set, frozenset)) else set(vertices)
        for vertex in doomed:
            edge_map = self._vertex_map.get(vertex)
            if edge_map is not None:
                self._edge_count -= len(edge_map)
                del self._vertex_map[vertex]
                self._mods += 1
        for source in list(self._vertex_map):
            edge_map = self._vertex_map[source]
            stale = [t for t in edge_map if t in doomed]
            if not stale:
                continue
            for target in stale:
                del edge_map[target]  # type: ignore[attr-defined]
            self._edge_count -= len(stale)
            self._mods += 1
            if not edge_map:
                self._vertex_map[source] = _NO_EDGES

    # ---- queries ---------------------------------------------------------

    def get_edge(self, source: V, target: V) -> int | None:
        edge_map = self._vertex_map.get(source)
        if edge_map is None:
            return None
        return edge_map.get(target)

    def contains_edge(self, source: V, target: V) -> bool:
        edge_map = self._vertex_map.get(source)
        return edge_map is not None and target in edge_map

    def contains_vertex(self, vertex: V) -> bool:
        return vertex in self._vertex_map

    def vertices(self) -> DigraphView[V]:
        return DigraphView(self, lambda: self._vertex_map.keys(), self.remove_vertex)

    def targets(self, source: V) -> DigraphView[V]:
        return DigraphView(
            self,
            lambda: self._vertex_map.get(source, _NO_EDGES).keys(),
            lambda target: self.remove_edge(source, target),
        )

    @property
    def vertex_count(self) -> int:
        return len(self._vertex_map)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def modification_count(self) -> int:
        return self._mods

    def out_degree(self, vertex: V) -> int:
        return len(self._vertex_map.get(vertex, _NO_EDGES))

    def total_weight(self) -> int:
        return sum(sum(edges.values()) for edges in self._vertex_map.values())

    # ---- derived graphs --------------------------------------------------

    def reverse(self) -> MapDigraph[V]:
        return digraphs.reverse(self, self.factory())

    def subgraph(self, vertices: Iterable[V]) -> MapDigraph[V]:
        return digraphs.subgraph(self, vertices, self.factory())

    def is_acyclic(self) -> bool:
        return is_acyclic(self)
