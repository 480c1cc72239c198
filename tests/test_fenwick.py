from itertools import accumulate

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rangekit.fenwick import FenwickTree2D, MinFenwickTree, SumFenwickTree

int_lists = st.lists(st.integers(-1000, 1000), min_size=1, max_size=40)

matrices = st.integers(1, 6).flatmap(
    lambda width: st.lists(
        st.lists(st.integers(-50, 50), min_size=width, max_size=width),
        min_size=1,
        max_size=6,
    )
)


def _span(data, first, last):
    low = data.draw(st.integers(first, last))
    return low, data.draw(st.integers(low, last))


@given(int_lists, st.data())
def test_1d_trees_track_point_changes(values, data):
    lowest_tree, total_tree = MinFenwickTree(values), SumFenwickTree(values)
    lowest, totals = list(values), list(values)
    for _ in range(data.draw(st.integers(0, 10))):
        index = data.draw(st.integers(0, len(values) - 1))
        amount = data.draw(st.integers(-2000, 2000))
        lowest_tree.update(index, amount)
        lowest[index] = min(lowest[index], amount)
        total_tree.add(index, amount)
        totals[index] += amount
    positions = range(len(values))
    assert [lowest_tree.prefix_min(i) for i in positions] == list(accumulate(lowest, min))
    assert [total_tree.prefix_sum(i) for i in positions] == list(accumulate(totals))
    left, right = _span(data, 0, len(values) - 1)
    assert total_tree.range_sum(left, right) == sum(totals[left : right + 1])


def test_min_update_never_raises_value():
    tree = MinFenwickTree([5, 3, 8])
    tree.update(1, 100)
    assert tree.prefix_min(2) == 3


def test_prefix_sum_before_start_is_zero():
    assert SumFenwickTree([4, 5]).prefix_sum(-1) == 0


def _rect(matrix, r1, c1, r2, c2):
    return sum(sum(row[c1 - 1 : c2]) for row in matrix[r1 - 1 : r2])


@given(matrices, st.data())
def test_2d_range_sum_after_assignment(matrix, data):
    tree = FenwickTree2D(matrix)
    current = [list(row) for row in matrix]
    rows, cols = len(matrix), len(matrix[0])
    r1, r2 = _span(data, 1, rows)
    c1, c2 = _span(data, 1, cols)
    assert tree.range_sum(r1, c1, r2, c2) == _rect(current, r1, c1, r2, c2)
    r, c = data.draw(st.integers(1, rows)), data.draw(st.integers(1, cols))
    value = data.draw(st.integers(-50, 50))
    tree.add(r, c, value - current[r - 1][c - 1])
    current[r - 1][c - 1] = value
    assert tree.prefix_sum(rows, cols) == sum(map(sum, current))
    assert tree.range_sum(r, c, r, c) == value


def test_2d_prefix_with_zero_coordinate():
    tree = FenwickTree2D([[1, 2], [3, 4]])
    assert tree.prefix_sum(0, 2) == 0
    assert tree.prefix_sum(2, 0) == 0


@pytest.mark.parametrize("matrix", [[], [[]], [[1, 2], [3]]])
def test_2d_rejects_bad_matrix(matrix):
    with pytest.raises(ValueError):
        FenwickTree2D(matrix)


@pytest.mark.parametrize(
    "call",
    [
        lambda: MinFenwickTree([1, 2, 3]).prefix_min(-1),
        lambda: MinFenwickTree([1, 2, 3]).prefix_min(3),
        lambda: MinFenwickTree([1, 2, 3]).update(-1, 0),
        lambda: MinFenwickTree([1, 2, 3]).update(3, 0),
        lambda: SumFenwickTree([1, 2, 3]).add(3, 1),
        lambda: SumFenwickTree([1, 2, 3]).prefix_sum(-2),
        lambda: SumFenwickTree([1, 2, 3]).range_sum(0, 3),
        lambda: FenwickTree2D([[1, 2], [3, 4]]).add(0, 1, 5),
        lambda: FenwickTree2D([[1, 2], [3, 4]]).add(1, 3, 5),
        lambda: FenwickTree2D([[1, 2], [3, 4]]).prefix_sum(3, 1),
    ],
)
def test_bad_indices(call):
    with pytest.raises(IndexError):
        call()