"""Tests for the bisect-backed sorted mapping."""
from __future__ import annotations

import random

import pytest

from digraphkit.graph.sorted_map import SortedKeyMap


class TestSortedKeyMap:
    def test_iterates_in_key_order(self) -> None:
        m: SortedKeyMap[str, int] = SortedKeyMap(str)
        for k in ["pear", "apple", "fig"]:
            m[k] = len(k)
        assert list(m) == ["apple", "fig", "pear"]
        assert list(m.items()) == [("apple", 5), ("fig", 3), ("pear", 4)]

    def test_overwrite_keeps_position(self) -> None:
        m: SortedKeyMap[str, int] = SortedKeyMap(str)
        m["b"] = 1
        m["a"] = 1
        m["b"] = 2
        assert list(m.items()) == [("a", 1), ("b", 2)]
        assert len(m) == 2

    def test_delete(self) -> None:
        m: SortedKeyMap[int, str] = SortedKeyMap(lambda k: -k)
        for k in range(5):
            m[k] = str(k)
        del m[2]
        assert list(m) == [4, 3, 1, 0]
        assert 2 not in m
        assert m.pop(4) == "4"
        assert list(m) == [3, 1, 0]

    def test_delete_missing_raises(self) -> None:
        m: SortedKeyMap[str, int] = SortedKeyMap(str)
        with pytest.raises(KeyError):
            del m["nope"]

    def test_equal_sort_keys_keep_insertion_order(self) -> None:
        m: SortedKeyMap[str, int] = SortedKeyMap(len)
        for k in ["bb", "a", "cc", "dd", "e"]:
            m[k] = 0
        assert list(m) == ["a", "e", "bb", "cc", "dd"]
        del m["cc"]
        assert list(m) == ["a", "e", "bb", "dd"]

    def test_get_and_repr(self) -> None:
        m: SortedKeyMap[str, int] = SortedKeyMap(str)
        m["b"] = 2
        m["a"] = 1
        assert m.get("a") == 1
        assert m.get("z") is None
        assert repr(m) == "{'a': 1, 'b': 2}"

    def test_random_operations_match_sorted_dict(self) -> None:
        rng = random.Random(42)
        m: SortedKeyMap[int, int] = SortedKeyMap(lambda k: k)
        ref: dict[int, int] = {}
        for _ in range(500):
            k = rng.randrange(50)
            if rng.random() < 0.6:
                m[k] = ref[k] = rng.randrange(100)
            elif k in ref:
                del m[k]
                del ref[k]
            assert list(m.items()) == sorted(ref.items())
