"""Segment trees with range additions: point queries and lazy range sums."""

from __future__ import annotations

from collections.abc import Iterable

from rangekit.segment_tree import _cover, _in_range, _items, _path


class RangeAddPointQueryTree:
    """Adds a value over an inclusive range and reads single positions."""

    def __init__(self, values: Iterable[int]) -> None:
        items = _items(values)
        self._size = len(items)
        self._tree = [0] * (4 * self._size)
        for position, value in enumerate(items):
            leaf, _, _ = _path(self._size, position)[-1]
            self._tree[leaf] = value

    def __len__(self) -> int:
        return self._size

    def add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every position in ``left..right`` inclusive."""
        for node in _cover(self._size, left, right):
            self._tree[node] += delta

    def get(self, position: int) -> int:
        """Return the current value at ``position``."""
        return sum(self._tree[node] for node, _, _ in _path(self._size, position))


class LazySumTree:
    """Range additions and range sums with lazy propagation."""

    def __init__(self, values: Iterable[int]) -> None:
        items = _items(values)
        self._size = len(items)
        self._tree = [0] * (4 * self._size)
        self._lazy = [0] * (4 * self._size)
        self._build(items, 1, 0, self._size - 1)

    def __len__(self) -> int:
        return self._size

    def _build(self, items: list[int], node: int, lo: int, hi: int) -> int:
        if lo == hi:
            self._tree[node] = items[lo]
        else:
            mid = (lo + hi) // 2
            self._tree[node] = self._build(items, node * 2, lo, mid) + self._build(
                items, node * 2 + 1, mid + 1, hi
            )
        return self._tree[node]

    def _push(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if pending:
            self._tree[node] += (hi - lo + 1) * pending
            if lo != hi:
                self._lazy[node * 2] += pending
                self._lazy[node * 2 + 1] += pending
            self._lazy[node] = 0

    def _add(self, node: int, lo: int, hi: int, left: int, right: int, delta: int) -> int:
        self._push(node, lo, hi)
        if hi < left or lo > right:
            return self._tree[node]
        if left <= lo and hi <= right:
            self._lazy[node] += delta
            self._push(node, lo, hi)
            return self._tree[node]
        mid = (lo + hi) // 2
        self._tree[node] = self._add(node * 2, lo, mid, left, right, delta) + self._add(
            node * 2 + 1, mid + 1, hi, left, right, delta
        )
        return self._tree[node]

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if hi < left or lo > right:
            return 0
        self._push(node, lo, hi)
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._query(node * 2, lo, mid, left, right) + self._query(
            node * 2 + 1, mid + 1, hi, left, right
        )

    def add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every position in ``left..right`` inclusive."""
        if _in_range(left, right, self._size):
            self._add(1, 0, self._size - 1, left, right, delta)

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions ``left..right`` inclusive."""
        if not _in_range(left, right, self._size):
            return 0
        return self._query(1, 0, self._size - 1, left, right)