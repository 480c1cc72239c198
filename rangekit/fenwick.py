"""Fenwick (binary indexed) trees for prefix minimums and for sums in one and two dimensions."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


class MinFenwickTree:
    """Prefix-minimum tree over 0-based positions.

    Updates can only lower a value: ``update`` keeps the smaller of the
    stored value and the new one.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        self._tree: list[float] = [math.inf] * self._size
        for index, value in enumerate(items):
            self.update(index, value)

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")

    def update(self, index: int, value: int) -> None:
        """Lower the element at ``index`` to ``value`` if ``value`` is smaller."""
        self._check(index)
        while index < self._size:
            self._tree[index] = min(self._tree[index], value)
            index |= index + 1

    def prefix_min(self, index: int) -> int:
        """Return the minimum of the elements at positions ``0..index``."""
        self._check(index)
        result = math.inf
        while index >= 0:
            result = min(result, self._tree[index])
            index = (index & (index + 1)) - 1
        return result


class SumFenwickTree:
    """Prefix and range sums over 0-based positions with point additions."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        self._tree = [0] * self._size
        for index, value in enumerate(items):
            self.add(index, value)

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the element at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        while index < self._size:
            self._tree[index] += delta
            index |= index + 1

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions ``0..index``; ``index`` of -1 gives 0."""
        if not -1 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        total = 0
        while index >= 0:
            total += self._tree[index]
            index = (index & (index + 1)) - 1
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of positions ``left..right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def _lowbit(value: int) -> int:
    return value & -value


class FenwickTree2D:
    """Two-dimensional sum tree with 1-based row and column coordinates."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        if not rows or not rows[0]:
            raise ValueError("matrix must have at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all matrix rows must have the same length")
        self.rows = len(rows)
        self.cols = width
        self._tree = [[0] * (width + 1) for _ in range(self.rows + 1)]
        for r, row in enumerate(rows, start=1):
            for c, value in enumerate(row, start=1):
                self.add(r, c, value)

    def add(self, row: int, col: int, delta: int) -> None:
        """Add ``delta`` to the cell at (``row``, ``col``)."""
        if not (1 <= row <= self.rows and 1 <= col <= self.cols):
            raise IndexError(f"cell ({row}, {col}) out of range")
        while row <= self.rows:
            line = self._tree[row]
            c = col
            while c <= self.cols:
                line[c] += delta
                c += _lowbit(c)
            row += _lowbit(row)

    def prefix_sum(self, row: int, col: int) -> int:
        """Return the sum of the rectangle from (1, 1) to (``row``, ``col``)."""
        if not (0 <= row <= self.rows and 0 <= col <= self.cols):
            raise IndexError(f"cell ({row}, {col}) out of range")
        total = 0
        while row > 0:
            line = self._tree[row]
            c = col
            while c > 0:
                total += line[c]
                c -= _lowbit(c)
            row -= _lowbit(row)
        return total

    def range_sum(self, row1: int, col1: int, row2: int, col2: int) -> int:
        """Return the sum of the rectangle with corners (row1, col1) and (row2, col2)."""
        return (
            self.prefix_sum(row2, col2)
            - self.prefix_sum(row1 - 1, col2)
            - self.prefix_sum(row2, col1 - 1)
            + self.prefix_sum(row1 - 1, col1 - 1)
        )