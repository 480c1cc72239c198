"""Articulation points and bridges of an undirected graph via DFS low-links."""

from __future__ import annotations

from collections.abc import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]], root: int) -> list[list[int]]:
    if not 1 <= root <= n:
        raise ValueError(f"root {root} is not a vertex in 1..{n}")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside 1..{n}")
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _lowlink(adjacency: list[list[int]], root: int):
    """Run a DFS from ``root``; return entry times, low-links and tree edges."""
    tin = [-1] * len(adjacency)
    low = [-1] * len(adjacency)
    tree_edges: list[tuple[int, int]] = []
    tin[root] = low[root] = 0
    timer = 1
    stack = [(root, -1, iter(adjacency[root]))]
    while stack:
        vertex, parent, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt == parent:
                continue
            if tin[nxt] != -1:
                low[vertex] = min(low[vertex], tin[nxt])
            else:
                tin[nxt] = low[nxt] = timer
                timer += 1
                stack.append((nxt, vertex, iter(adjacency[nxt])))
                break
        else:
            stack.pop()
            if parent != -1:
                low[parent] = min(low[parent], low[vertex])
                tree_edges.append((parent, vertex))
    return tin, low, tree_edges


def articulation_points(n: int, edges: Iterable[tuple[int, int]], root: int = 1) -> set[int]:
    """Return the cut vertices of the component containing ``root``.

    Vertices are numbered ``1..n``.
    """
    adjacency = _adjacency(n, edges, root)
    tin, low, tree_edges = _lowlink(adjacency, root)
    points = {
        parent
        for parent, child in tree_edges
        if parent != root and low[child] >= tin[parent]
    }
    if sum(1 for parent, _ in tree_edges if parent == root) > 1:
        points.add(root)
    return points


def bridges(n: int, edges: Iterable[tuple[int, int]], root: int = 1) -> list[tuple[int, int]]:
    """Return the bridges of the component containing ``root``.

    Each bridge is a ``(smaller, larger)`` pair and the list is sorted.
    Every edge back to a DFS parent is ignored, so a doubled edge still
    counts as a bridge.
    """
    adjacency = _adjacency(n, edges, root)
    tin, low, tree_edges = _lowlink(adjacency, root)
    return sorted(
        (min(parent, child), max(parent, child))
        for parent, child in tree_edges
        if low[child] > tin[parent]
    )