"""Point-update, range-query segment tree over any associative operation."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable, Iterator
from functools import reduce
from typing import Generic, TypeVar

T = TypeVar("T")


def _items(values: Iterable[T]) -> list[T]:
    """Materialise ``values``, refusing an empty sequence."""
    items = list(values)
    if not items:
        raise ValueError("a segment tree needs at least one value")
    return items


def _in_range(left: int, right: int, size: int) -> bool:
    """Return whether ``left..right`` is non-empty; raise if it leaves ``0..size-1``."""
    if left > right:
        return False
    if left < 0 or right >= size:
        raise IndexError(f"range [{left}, {right}] out of bounds for size {size}")
    return True


def _path(size: int, position: int) -> list[tuple[int, int, int]]:
    """Return the ``(node, lo, hi)`` triples from the root down to ``position``'s leaf."""
    if not 0 <= position < size:
        raise IndexError(f"position {position} out of range for size {size}")
    node, lo, hi = 1, 0, size - 1
    path = [(node, lo, hi)]
    while lo != hi:
        mid = (lo + hi) // 2
        if position <= mid:
            node, hi = node * 2, mid
        else:
            node, lo = node * 2 + 1, mid + 1
        path.append((node, lo, hi))
    return path


def _tiling(node: int, lo: int, hi: int, left: int, right: int) -> Iterator[int]:
    if left > right:
        return
    if left == lo and right == hi:
        yield node
        return
    mid = (lo + hi) // 2
    yield from _tiling(node * 2, lo, mid, left, min(right, mid))
    yield from _tiling(node * 2 + 1, mid + 1, hi, max(left, mid + 1), right)


def _cover(size: int, left: int, right: int) -> list[int]:
    """Return, left to right, the nodes whose segments exactly tile ``left..right``."""
    if not _in_range(left, right, size):
        return []
    return list(_tiling(1, 0, size - 1, left, right))


class SegmentTree(Generic[T]):
    """Segment tree over 0-based positions with inclusive range queries.

    ``combine`` must be associative and ``identity`` its neutral element;
    an empty range (``left > right``) yields ``identity``.
    """

    def __init__(self, values: Iterable[T], combine: Callable[[T, T], T], identity: T) -> None:
        items = _items(values)
        self._size = len(items)
        self._combine = combine
        self._identity = identity
        self._tree: list[T] = [identity] * (4 * self._size)
        self._build(items, 1, 0, self._size - 1)

    def __len__(self) -> int:
        return self._size

    def _pull(self, node: int) -> None:
        self._tree[node] = self._combine(self._tree[node * 2], self._tree[node * 2 + 1])

    def _build(self, items: list[T], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(items, node * 2, lo, mid)
        self._build(items, node * 2 + 1, mid + 1, hi)
        self._pull(node)

    def query(self, left: int, right: int) -> T:
        """Combine the elements at positions ``left..right`` inclusive."""
        parts = (self._tree[node] for node in _cover(self._size, left, right))
        return reduce(self._combine, parts, self._identity)

    def update(self, position: int, value: T) -> None:
        """Replace the element at ``position`` with ``value``."""
        *ancestors, (leaf, _, _) = _path(self._size, position)
        self._tree[leaf] = value
        for node, _, _ in reversed(ancestors):
            self._pull(node)


def sum_tree(values: Iterable[int]) -> SegmentTree[int]:
    """Segment tree answering range sums."""
    return SegmentTree(values, operator.add, 0)


def min_tree(values: Iterable[int]) -> SegmentTree:
    """Segment tree answering range minimums; an empty range gives infinity."""
    return SegmentTree(values, min, math.inf)


def gcd_tree(values: Iterable[int]) -> SegmentTree[int]:
    """Segment tree answering range greatest common divisors."""
    return SegmentTree(values, math.gcd, 0)