"""Mutable mapping that iterates its keys in sort-key order.

Values live in a plain dict for O(1) lookup.  Key order lives in a
separate Python list kept sorted with bisect, so inserts and deletes
are O(n) in the worst case (list shifting) but the shifting is a
memmove and stays cheap for the adjacency sizes we deal with.

Keys that compare equal under the sort key but are distinct objects
are both kept; among themselves they stay in insertion order.
"""
from __future__ import annotations

import bisect
from typing import Any, Callable, Hashable, Iterator, MutableMapping, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class SortedKeyMap(MutableMapping[K, T]):
    """Dict-backed mapping with a bisect-maintained key order.

    Args:
        key: Sort key applied to mapping keys (like sorted(key=...)).
    """

    __slots__ = ("_key", "_data", "_order")

    def __init__(self, key: Callable[[K], Any]) -> None:
        self._key = key
        self._data: dict[K, T] = {}
        self._order: list[K] = []

    def __getitem__(self, k: K) -> T:
        return self._data[k]

    def __setitem__(self, k: K, value: T) -> None:
        if k not in self._data:
            # insort_right keeps equal sort keys in insertion order
            bisect.insort_right(self._order, k, key=self._key)
        self._data[k] = value

    def __delitem__(self, k: K) -> None:
        del self._data[k]
        self._order.pop(self._position(k))

    def __contains__(self, k: object) -> bool:
        return k in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self._data[k]!r}" for k in self._order)
        return "{" + items + "}"

    def _position(self, k: K) -> int:
        sk = self._key(k)
        i = bisect.bisect_left(self._order, sk, key=self._key)
        # walk the run of equal sort keys until we hit k itself
        while self._order[i] != k:
            i += 1
        return i
