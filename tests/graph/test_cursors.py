"""Tests for view cursors: removal during iteration and fail-fast checks."""
from __future__ import annotations

import pytest

from digraphkit.graph.base import ConcurrentModificationError, IllegalStateError
from digraphkit.graph.map_digraph import MapDigraph
from digraphkit.graph.trivial import TrivialDigraph


class TestVertexCursor:
    def test_views_are_restartable(self, linear_graph: MapDigraph[str]) -> None:
        view = linear_graph.vertices()
        assert list(view) == ["A", "B", "C", "D"]
        assert list(view) == ["A", "B", "C", "D"]
        assert len(view) == 4
        assert repr(view) == "['A', 'B', 'C', 'D']"

    def test_view_is_live(self, linear_graph: MapDigraph[str]) -> None:
        view = linear_graph.vertices()
        linear_graph.add_vertex("E")
        assert list(view)[-1] == "E"

    def test_remove_current_vertex_cascades(self, diamond_graph: MapDigraph[str]) -> None:
        it = iter(diamond_graph.vertices())
        seen = []
        for vertex in it:
            seen.append(vertex)
            if vertex == "B":
                it.remove()
        assert seen == ["A", "B", "C", "D"]
        assert "B" not in diamond_graph
        assert diamond_graph.edge_count == 2
        assert not diamond_graph.contains_edge("A", "B")

    def test_remove_all_vertices(self, diamond_graph: MapDigraph[str]) -> None:
        it = iter(diamond_graph.vertices())
        for _ in it:
            it.remove()
        assert diamond_graph.vertex_count == 0
        assert diamond_graph.edge_count == 0

    def test_remove_before_next_raises(self, linear_graph: MapDigraph[str]) -> None:
        it = iter(linear_graph.vertices())
        with pytest.raises(IllegalStateError):
            it.remove()
        assert linear_graph.vertex_count == 4

    def test_remove_twice_raises(self, linear_graph: MapDigraph[str]) -> None:
        it = iter(linear_graph.vertices())
        next(it)
        it.remove()
        with pytest.raises(IllegalStateError):
            it.remove()
        assert linear_graph.vertex_count == 3

    def test_external_mutation_fails_fast(self, linear_graph: MapDigraph[str]) -> None:
        it = iter(linear_graph.vertices())
        next(it)
        linear_graph.remove_vertex("C")
        with pytest.raises(ConcurrentModificationError):
            next(it)

    def test_external_edge_insert_fails_fast(self, linear_graph: MapDigraph[str]) -> None:
        it = iter(linear_graph.vertices())
        next(it)
        linear_graph.put_edge("D", "A", 1)
        with pytest.raises(ConcurrentModificationError):
            it.remove()
        assert "A" in linear_graph

    def test_weight_overwrite_is_not_structural(self, linear_graph: MapDigraph[str]) -> None:
        it = iter(linear_graph.vertices())
        next(it)
        linear_graph.put_edge("A", "B", 42)
        assert next(it) == "B"

    def test_concurrent_modification_is_illegal_state(self) -> None:
        assert issubclass(ConcurrentModificationError, IllegalStateError)
        assert issubclass(IllegalStateError, RuntimeError)


class TestTargetCursor:
    def test_remove_single_edge(self, diamond_graph: MapDigraph[str]) -> None:
        it = iter(diamond_graph.targets("A"))
        assert next(it) == "B"
        it.remove()
        assert list(it) == ["C"]
        assert not diamond_graph.contains_edge("A", "B")
        assert diamond_graph.contains_vertex("B")
        assert diamond_graph.edge_count == 3

    def test_remove_all_targets(self, diamond_graph: MapDigraph[str]) -> None:
        it = iter(diamond_graph.targets("A"))
        for _ in it:
            it.remove()
        assert diamond_graph.out_degree("A") == 0
        assert diamond_graph.edge_count == 2
        diamond_graph.put_edge("A", "D", 1)
        assert diamond_graph.edge_count == 3

    def test_external_mutation_fails_fast(self, diamond_graph: MapDigraph[str]) -> None:
        it = iter(diamond_graph.targets("A"))
        assert next(it) == "B"
        diamond_graph.remove_edge("A", "C")
        with pytest.raises(ConcurrentModificationError):
            next(it)

    def test_unrelated_edge_insert_fails_fast(self, diamond_graph: MapDigraph[str]) -> None:
        it = iter(diamond_graph.targets("A"))
        next(it)
        diamond_graph.put_edge("D", "A", 1)
        with pytest.raises(ConcurrentModificationError):
            it.remove()
        assert diamond_graph.contains_edge("A", "B")

    def test_sources_cursor_fails_fast(self, diamond_graph: MapDigraph[str]) -> None:
        it = iter(diamond_graph.sources("D"))
        assert next(it) == "B"
        diamond_graph.remove_vertex("C")
        with pytest.raises(ConcurrentModificationError):
            next(it)

    def test_sources_cursor_remove_after_mutation_fails(
        self, diamond_graph: MapDigraph[str]
    ) -> None:
        it = iter(diamond_graph.sources("D"))
        next(it)
        diamond_graph.add_vertex("E")
        with pytest.raises(ConcurrentModificationError):
            it.remove()
        assert diamond_graph.contains_edge("B", "D")

    def test_sources_cursor_removes_incoming_edge(
        self, diamond_graph: MapDigraph[str]
    ) -> None:
        it = iter(diamond_graph.sources("D"))
        assert next(it) == "B"
        it.remove()
        assert not diamond_graph.contains_edge("B", "D")
        assert diamond_graph.edge_count == 3


class TestTrivialCursor:
    def test_remove_vertex(self) -> None:
        g = TrivialDigraph("A", 2)
        it = iter(g.vertices())
        with pytest.raises(IllegalStateError):
            it.remove()
        assert next(it) == "A"
        it.remove()
        assert g.vertex_count == 0
        assert g.edge_count == 0
        with pytest.raises(StopIteration):
            next(it)

    def test_remove_loop(self) -> None:
        g = TrivialDigraph("A", 2)
        it = iter(g.targets("A"))
        next(it)
        it.remove()
        assert g.edge_count == 0
        assert g.vertex_count == 1

    def test_loop_cursor_fails_fast(self) -> None:
        g = TrivialDigraph("A", 2)
        it = iter(g.sources("A"))
        next(it)
        g.remove_edge("A", "A")
        with pytest.raises(ConcurrentModificationError):
            it.remove()
        assert g.vertex_count == 1

    def test_external_mutation_fails_fast(self) -> None:
        g = TrivialDigraph("A")
        it = iter(g.vertices())
        g.put_edge("A", "A", 1)
        with pytest.raises(ConcurrentModificationError):
            next(it)
