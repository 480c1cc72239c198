"""Segment trees that answer order questions: the k-th zero and the range lower bound."""

from __future__ import annotations

import operator
from bisect import bisect_left, insort
from collections.abc import Iterable
from heapq import merge

from rangekit.segment_tree import SegmentTree, _cover, _path


class ZeroCountTree(SegmentTree[int]):
    """Counts zeros over 0-based positions and finds the k-th zero."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__((int(value == 0) for value in values), operator.add, 0)

    def update(self, position: int, value: int) -> None:
        """Replace the element at ``position`` with ``value``."""
        super().update(position, int(value == 0))

    def count_zeros(self, left: int, right: int) -> int:
        """Return how many zeros lie at positions ``left..right`` inclusive."""
        return self.query(left, right)

    def kth_zero(self, k: int) -> int | None:
        """Return the position of the ``k``-th zero (1-based), or None if there are fewer."""
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        if self._tree[1] < k:
            return None
        node, lo, hi = 1, 0, self._size - 1
        while lo != hi:
            mid = (lo + hi) // 2
            left_count = self._tree[node * 2]
            if left_count >= k:
                node, hi = node * 2, mid
            else:
                k -= left_count
                node, lo = node * 2 + 1, mid + 1
        return lo


def _merge_sorted(first: list[int], second: list[int]) -> list[int]:
    return list(merge(first, second))


def _first_at_least(bucket: list[int], x: int) -> int | None:
    index = bisect_left(bucket, x)
    return bucket[index] if index < len(bucket) else None


class MergeSortTree(SegmentTree[list[int]]):
    """Segment tree of sorted lists answering the smallest value ``>= x`` in a range."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        super().__init__(([value] for value in items), _merge_sorted, [])
        self._values = items

    def update(self, position: int, value: int) -> None:
        """Replace the element at ``position`` with ``value``."""
        path = _path(self._size, position)
        old = self._values[position]
        for node, _, _ in path:
            bucket = self._tree[node]
            bucket.pop(bisect_left(bucket, old))
            insort(bucket, value)
        self._values[position] = value

    def lower_bound(self, left: int, right: int, x: int) -> int | None:
        """Return the smallest value ``>= x`` at positions ``left..right``, or None."""
        found = (_first_at_least(self._tree[node], x) for node in _cover(self._size, left, right))
        return min((value for value in found if value is not None), default=None)