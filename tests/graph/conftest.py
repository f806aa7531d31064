"""Shared fixtures for digraph tests."""
from __future__ import annotations

import pytest

from digraphkit.graph.map_digraph import MapDigraph

SEED = 42


@pytest.fixture
def empty_graph() -> MapDigraph[str]:
    return MapDigraph()


@pytest.fixture
def linear_graph() -> MapDigraph[str]:
    """A -> B -> C -> D, all weight 1"""
    g: MapDigraph[str] = MapDigraph()
    for src, dst in [("A", "B"), ("B", "C"), ("C", "D")]:
        g.put_edge(src, dst, 1)
    return g


@pytest.fixture
def diamond_graph() -> MapDigraph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    g: MapDigraph[str] = MapDigraph()
    for src, dst, w in [("A", "B", 1), ("A", "C", 2), ("B", "D", 3), ("C", "D", 4)]:
        g.put_edge(src, dst, w)
    return g


@pytest.fixture
def abc_graph() -> MapDigraph[str]:
    """A -> B (2), B -> C (3)"""
    g: MapDigraph[str] = MapDigraph()
    g.put_edge("A", "B", 2)
    g.put_edge("B", "C", 3)
    return g


@pytest.fixture
def sorted_graph() -> MapDigraph[str]:
    """Same edges as the diamond, inserted out of order, key-ordered."""
    g: MapDigraph[str] = MapDigraph(key=str)
    for src, dst, w in [("C", "D", 4), ("B", "D", 3), ("A", "C", 2), ("A", "B", 1)]:
        g.put_edge(src, dst, w)
    return g
