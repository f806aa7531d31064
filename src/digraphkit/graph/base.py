"""Abstract digraph contract shared by every representation.

A digraph holds hashable vertices and directed edges carrying an int
weight.  A zero weight is a real edge; absence is reported as None.
Inserting an edge implicitly inserts both endpoints.

Enumeration goes through DigraphView objects.  A view is lazy and
restartable: every iter() hands out a fresh Cursor.  The cursor's
remove() is the only sanctioned mutation while iterating; anything
else that changes the graph's structure makes the cursor fail fast
with ConcurrentModificationError on its next step.

Both MapDigraph and TrivialDigraph implement this interface, and the
algorithm modules only ever talk to it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, Iterable, Iterator, TypeVar

V = TypeVar("V", bound=Hashable)

# a factory hands out new, empty digraphs of some chosen representation
DigraphFactory = Callable[[], "Digraph"]

_REPR_LIMIT = 1000


class UnsupportedOperationError(Exception):
    """Raised when a representation cannot hold the requested structure."""


class IllegalStateError(RuntimeError):
    """Raised when a cursor's remove() is called out of turn."""


class ConcurrentModificationError(IllegalStateError):
    """Raised when a graph changed under a live cursor."""


def check_vertex(vertex: object) -> None:
    if vertex is None:
        raise ValueError("Vertex must not be None")


def check_weight(weight: object) -> None:
    if not isinstance(weight, int):
        raise ValueError(f"Edge weight must be an int, got {weight!r}")


class Cursor(Iterator[V]):
    """Iterator over a snapshot of live storage with remove() support.

    The snapshot is only valid as long as the owner's modification
    counter matches; the cursor's own removals resync it.
    """

    __slots__ = ("_owner", "_items", "_pos", "_current", "_removable",
                 "_remover", "_expected")

    def __init__(
        self,
        owner: Digraph[V],
        items: Iterable[V],
        remover: Callable[[V], object],
    ) -> None:
        self._owner = owner
        self._items = tuple(items)
        self._pos = 0
        self._current: V | None = None
        self._removable = False
        self._remover = remover
        self._expected = owner.modification_count

    def __iter__(self) -> Cursor[V]:
        return self

    def __next__(self) -> V:
        self._check_modification()
        if self._pos >= len(self._items):
            self._removable = False
            raise StopIteration
        self._current = self._items[self._pos]
        self._pos += 1
        self._removable = True
        return self._current

    def remove(self) -> None:
        """Remove the element last returned by next() from the graph."""
        if not self._removable:
            raise IllegalStateError(
                "remove() must follow next() and may be called once per element"
            )
        self._check_modification()
        self._removable = False
        self._remover(self._current)  # type: ignore[arg-type]
        self._expected = self._owner.modification_count

    def _check_modification(self) -> None:
        if self._owner.modification_count != self._expected:
            raise ConcurrentModificationError(
                f"{type(self._owner).__name__} was modified during iteration"
            )


class DigraphView(Generic[V]):
    """Lazy, restartable sequence of vertices backed by a digraph.

    *supplier* produces the current elements, *remover* implements
    Cursor.remove() for one element.
    """

    __slots__ = ("_owner", "_supplier", "_remover")

    def __init__(
        self,
        owner: Digraph[V],
        supplier: Callable[[], Iterable[V]],
        remover: Callable[[V], object],
    ) -> None:
        self._owner = owner
        self._supplier = supplier
        self._remover = remover

    def __iter__(self) -> Cursor[V]:
        return Cursor(self._owner, self._supplier(), self._remover)

    def __len__(self) -> int:
        return sum(1 for _ in self._supplier())

    def __bool__(self) -> bool:
        return any(True for _ in self._supplier())

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(v) for v in self._supplier()) + "]"


class Digraph(ABC, Generic[V]):
    """Interface that every digraph representation implements."""

    __slots__ = ()

    # ---- mutation --------------------------------------------------------

    @abstractmethod
    def add_vertex(self, vertex: V) -> bool:
        """Add *vertex*; return False if it was already present."""
        ...

    @abstractmethod
    def put_edge(self, source: V, target: V, weight: int) -> int | None:
        """Insert or overwrite source -> target; return the previous weight."""
        ...

    @abstractmethod
    def remove_edge(self, source: V, target: V) -> int | None:
        """Remove source -> target; return its weight, or None if absent."""
        ...

    @abstractmethod
    def remove_vertex(self, vertex: V) -> bool:
        """Remove *vertex* and every edge incident to it."""
        ...

    @abstractmethod
    def remove_vertices(self, vertices: Iterable[V]) -> None:
        """Remove all given vertices and every edge incident to any of them."""
        ...

    # ---- queries ---------------------------------------------------------

    @abstractmethod
    def get_edge(self, source: V, target: V) -> int | None:
        """Weight of source -> target, or None if there is no such edge."""
        ...

    @abstractmethod
    def contains_edge(self, source: V, target: V) -> bool: ...

    @abstractmethod
    def contains_vertex(self, vertex: V) -> bool: ...

    @abstractmethod
    def vertices(self) -> DigraphView[V]:
        """Vertices in representation order; cursor removal cascades to edges."""
        ...

    @abstractmethod
    def targets(self, source: V) -> DigraphView[V]:
        """Out-neighbors of *source*; cursor removal drops a single edge."""
        ...

    def sources(self, target: V) -> DigraphView[V]:
        """In-neighbors of *target*, found by scanning every vertex."""
        def supply() -> Iterator[V]:
            for vertex in self.vertices():
                if self.contains_edge(vertex, target):
                    yield vertex

        return DigraphView(self, supply, lambda s: self.remove_edge(s, target))

    def edges(self) -> Iterator[tuple[V, V, int]]:
        """Yield (source, target, weight) for every edge in storage order."""
        for source in self.vertices():
            for target in self.targets(source):
                yield source, target, self.get_edge(source, target)  # type: ignore[misc]

    @property
    @abstractmethod
    def vertex_count(self) -> int: ...

    @property
    @abstractmethod
    def edge_count(self) -> int: ...

    @property
    @abstractmethod
    def modification_count(self) -> int:
        """Structural change counter; cursors compare against it."""
        ...

    def in_degree(self, vertex: V) -> int:
        return len(self.sources(vertex))

    @abstractmethod
    def out_degree(self, vertex: V) -> int: ...

    @abstractmethod
    def total_weight(self) -> int:
        """Sum of all edge weights."""
        ...

    # ---- derived graphs --------------------------------------------------

    @abstractmethod
    def reverse(self) -> Digraph[V]:
        """Graph with every edge flipped, weights preserved."""
        ...

    @abstractmethod
    def subgraph(self, vertices: Iterable[V]) -> Digraph[V]:
        """Subgraph induced by *vertices*."""
        ...

    @abstractmethod
    def is_acyclic(self) -> bool:
        """True iff there is no directed cycle (self-loops count)."""
        ...

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return self.contains_vertex(vertex)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.vertex_count

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices())

    def __repr__(self) -> str:
        parts: list[str] = []
        size = 0
        for vertex in self.vertices():
            part = f"{vertex!r}{self.targets(vertex)!r}"
            parts.append(part)
            size += len(part) + 2
            if size > _REPR_LIMIT:
                parts.append("...")
                break
        return f"{type(self).__name__}({', '.join(parts)})"
