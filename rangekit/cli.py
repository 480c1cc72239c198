"""Command-line front end that answers range and graph queries read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterator

from .fenwick import FenwickTree2D, MinFenwickTree, SumFenwickTree
from .graph import articulation_points, bridges
from .lazy import LazySumTree
from .segment_tree import sum_tree


class InputError(ValueError):
    """Raised when the input stream is truncated or holds a non-integer token."""


class _Tokens:
    """Whitespace-separated integer tokens taken from a block of text."""

    def __init__(self, text: str) -> None:
        self._queue = deque(text.split())

    def __bool__(self) -> bool:
        return bool(self._queue)

    def next_int(self) -> int:
        if not self._queue:
            raise InputError("unexpected end of input")
        token = self._queue.popleft()
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        if count < 0:
            raise InputError(f"count must not be negative, got {count}")
        return [self.next_int() for _ in range(count)]


def _fenwick_sum(tokens: _Tokens) -> Iterator[str]:
    tree = SumFenwickTree(tokens.ints(tokens.next_int()))
    for _ in range(tokens.next_int()):
        left, right = tokens.ints(2)
        yield str(tree.range_sum(left, right))


def _fenwick_min(tokens: _Tokens) -> Iterator[str]:
    tree = MinFenwickTree(tokens.ints(tokens.next_int()))
    for _ in range(tokens.next_int()):
        yield str(tree.prefix_min(tokens.next_int()))


def _fenwick_2d(tokens: _Tokens) -> Iterator[str]:
    rows, cols = tokens.ints(2)
    matrix = [tokens.ints(cols) for _ in range(rows)]
    tree = FenwickTree2D(matrix)
    for _ in range(tokens.next_int()):
        if tokens.next_int() == 1:
            row, col, value = tokens.ints(3)
            if not (1 <= row <= rows and 1 <= col <= cols):
                raise IndexError(f"cell ({row}, {col}) out of range")
            tree.add(row, col, value - matrix[row - 1][col - 1])
            matrix[row - 1][col - 1] = value
        else:
            row1, col1, row2, col2 = tokens.ints(4)
            yield str(tree.range_sum(row1, col1, row2, col2))


def _articulation(tokens: _Tokens) -> Iterator[str]:
    while tokens:
        n, m = tokens.ints(2)
        if n == 0 and m == 0:
            break
        edges = [tuple(tokens.ints(2)) for _ in range(m)]
        yield str(len(articulation_points(n, edges, 1)))


def _bridges(tokens: _Tokens) -> Iterator[str]:
    for case in range(1, tokens.next_int() + 1):
        yield f"Caso #{case}"
        n, m = tokens.ints(2)
        edges = [tuple(tokens.ints(2)) for _ in range(m)]
        found = bridges(n, edges, 1)
        if not found:
            yield "Sin bloqueos"
            continue
        yield str(len(found))
        yield from (f"{a} {b}" for a, b in found)


def _range_sum(tokens: _Tokens) -> Iterator[str]:
    tree = sum_tree(tokens.ints(tokens.next_int()))
    for _ in range(tokens.next_int()):
        left, right = tokens.ints(2)
        yield str(tree.query(left, right))
    if tokens:
        position, value = tokens.ints(2)
        tree.update(position, value)


def _lazy_sum(tokens: _Tokens) -> Iterator[str]:
    tree = LazySumTree(tokens.ints(tokens.next_int()))
    for _ in range(tokens.next_int()):
        if tokens.next_int() == 1:
            left, right = tokens.ints(2)
            yield str(tree.query(left, right))
        else:
            left, right, delta = tokens.ints(3)
            tree.add(left, right, delta)


_COMMANDS: dict[str, tuple[Callable[[_Tokens], Iterator[str]], str]] = {
    "fenwick-sum": (_fenwick_sum, "range sums with a Fenwick tree: n, values, q, then q 'l r'"),
    "fenwick-min": (_fenwick_min, "prefix minimums with a Fenwick tree: n, values, q, then q 'r'"),
    "fenwick-2d": (
        _fenwick_2d,
        "2-D sums: m n, matrix, q, then '1 x y val' or '2 x1 y1 x2 y2'",
    ),
    "articulation-points": (
        _articulation,
        "count cut vertices: repeated 'n m' and m edges, ended by '0 0'",
    ),
    "bridges": (_bridges, "list bridges: t, then t cases of 'n m' and m edges"),
    "range-sum": (_range_sum, "range sums with a segment tree: n, values, q, then q 'l r'"),
    "lazy-sum": (
        _lazy_sum,
        "lazy range sums: n, values, q, then '1 l r' to query or '2 l r val' to add",
    ),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rangekit",
        description="Answer range and graph queries read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text, description=help_text)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one command over standard input and print its answers, one per line."""
    args = _parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    tokens = _Tokens(sys.stdin.read())
    try:
        for line in handler(tokens):
            print(line)
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())