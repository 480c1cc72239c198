# rangekit

Small, dependency-free data structures for range queries over integer
sequences, plus articulation-point and bridge detection for undirected graphs,
and a `rangekit` command that answers query streams read from standard input.

## Installation

```
pip install rangekit
```

For running the test suite:

```
pip install "rangekit[test]"
```

## What is inside

| Module                  | Names                                                   |
|-------------------------|---------------------------------------------------------|
| `rangekit.fenwick`      | `SumFenwickTree`, `MinFenwickTree`, `FenwickTree2D`     |
| `rangekit.segment_tree` | `SegmentTree`, `sum_tree`, `min_tree`, `gcd_tree`       |
| `rangekit.order_trees`  | `ZeroCountTree`, `MergeSortTree`                        |
| `rangekit.lazy`         | `RangeAddPointQueryTree`, `LazySumTree`                 |
| `rangekit.graph`        | `articulation_points`, `bridges`                        |
| `rangekit.cli`          | `main`, `InputError`                                    |

Unless stated otherwise, positions are 0-based and ranges `left..right` are
inclusive on both ends. Positions outside the structure raise `IndexError`.

## Fenwick trees

```python
from rangekit.fenwick import SumFenwickTree, MinFenwickTree, FenwickTree2D

sums = SumFenwickTree([1, 2, 3, 4, 5])
sums.prefix_sum(2)        # 1 + 2 + 3 == 6
sums.range_sum(1, 3)      # 2 + 3 + 4 == 9
sums.add(0, 10)           # element 0 grows by 10
sums.range_sum(0, 1)      # 11 + 2 == 13

mins = MinFenwickTree([5, 3, 8, 1])
mins.prefix_min(1)        # 3
mins.prefix_min(3)        # 1
mins.update(0, 2)         # keeps the smaller of the old and new value
mins.prefix_min(1)        # 2
```

`MinFenwickTree.update` can only lower a value; asking it to raise one has no
effect. `SumFenwickTree.prefix_sum(-1)` is 0.

`FenwickTree2D` works on a non-empty rectangular matrix with **1-based** row
and column numbers (it raises `ValueError` for an empty or ragged matrix):

```python
grid = FenwickTree2D([[1, 2], [3, 4]])
grid.prefix_sum(2, 2)         # 10
grid.range_sum(2, 1, 2, 2)    # 3 + 4 == 7
grid.add(1, 1, 5)
grid.range_sum(1, 1, 1, 1)    # 6
```

## Segment trees

`SegmentTree` takes a non-empty sequence, an associative combining function
and that function's identity value; a query over an empty range
(`left > right`) returns the identity. The helpers build the common cases.

```python
from rangekit.segment_tree import SegmentTree, sum_tree, min_tree, gcd_tree

tree = sum_tree([2, 4, 6, 8])
tree.query(1, 2)          # 10
tree.update(1, 0)         # replaces the element at position 1
tree.query(0, 3)          # 16

min_tree([7, 2, 9]).query(0, 2)        # 2 (an empty range gives math.inf)
gcd_tree([12, 18, 24]).query(0, 2)     # 6

product = SegmentTree([1, 2, 3, 4], lambda a, b: a * b, 1)
product.query(1, 3)       # 24
len(product)              # 4
```

### Order statistics

```python
from rangekit.order_trees import ZeroCountTree, MergeSortTree

zeros = ZeroCountTree([0, 5, 0, 0, 7])
zeros.count_zeros(0, 2)   # 2
zeros.kth_zero(3)         # position of the third zero: 3
zeros.kth_zero(4)         # None: there are only three zeros

sorted_ranges = MergeSortTree([5, 1, 9, 3])
sorted_ranges.lower_bound(0, 3, 4)   # smallest value >= 4 in the range: 5
sorted_ranges.lower_bound(0, 3, 10)  # None
```

`kth_zero` counts from 1 and raises `ValueError` for `k < 1`.

### Range updates

```python
from rangekit.lazy import RangeAddPointQueryTree, LazySumTree

points = RangeAddPointQueryTree([0, 0, 0, 0])
points.add(1, 2, 5)
points.get(2)             # 5

lazy = LazySumTree([1, 1, 1, 1])
lazy.add(0, 1, 3)
lazy.query(0, 3)          # 10
```

## Graph cuts

Vertices are numbered `1..n`; edges are pairs of vertices. The depth-first
search starts from `root` (default 1), so only the component containing
`root` is examined. A vertex or root outside `1..n` raises `ValueError`.

```python
from rangekit.graph import articulation_points, bridges

edges = [(1, 2), (2, 3), (3, 1), (3, 4)]
articulation_points(4, edges, 1)   # {3}
bridges(4, edges, 1)               # [(3, 4)]
```

`articulation_points` returns a set; `bridges` returns a sorted list of
`(smaller, larger)` pairs. Every edge back to a vertex's DFS parent is
skipped, so a doubled edge is still reported as a bridge.

## Command line

The `rangekit` command reads whitespace-separated integers from standard
input and prints one answer per line. Pick a mode with a subcommand:

```
rangekit --help
```

| Command               | Input                                                                 |
|-----------------------|-----------------------------------------------------------------------|
| `fenwick-sum`         | `n`, `n` values, `q`, then `q` pairs `l r`; prints each range sum      |
| `fenwick-min`         | `n`, `n` values, `q`, then `q` indices `r`; prints each prefix minimum |
| `fenwick-2d`          | `m n`, the matrix, `q`, then `1 x y val` (set a cell) or `2 x1 y1 x2 y2` (print a rectangle sum), 1-based |
| `articulation-points` | repeated `n m` and `m` edges, ended by `0 0` or end of input; prints the number of cut vertices per graph |
| `bridges`             | `t`, then `t` cases of `n m` and `m` edges; prints `Caso #k`, then `Sin bloqueos` or the bridge count followed by each bridge |
| `range-sum`           | `n`, `n` values, `q`, then `q` pairs `l r`; prints each range sum; an optional trailing `pos val` updates the tree and prints nothing |
| `lazy-sum`            | `n`, `n` values, `q`, then `1 l r` (print a range sum) or `2 l r val` (add `val` over the range) |

For example:

```
$ printf '5\n1 2 3 4 5\n2\n0 4\n1 3\n' | rangekit fenwick-sum
15
9
```

Truncated input, a non-integer token or an out-of-range position stops the
command with a message on standard error and exit status 1.

## What it does not do

The command line has no modes for `min_tree`, `gcd_tree`, `ZeroCountTree`,
`MergeSortTree` or `RangeAddPointQueryTree`; use them from Python. The graph
functions look only at the component reachable from `root`.