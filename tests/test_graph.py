from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rangekit.graph import articulation_points, bridges


@st.composite
def simple_graphs(draw):
    n = draw(st.integers(1, 8))
    pairs = [(a, b) for a in range(1, n + 1) for b in range(a + 1, n + 1)]
    edges = draw(st.lists(st.sampled_from(pairs), unique=True)) if pairs else []
    return n, edges


def _reach(n, edges, start, banned_vertex=None, banned_edge=None):
    adjacency = {v: [] for v in range(1, n + 1)}
    for edge in edges:
        if edge == banned_edge:
            continue
        a, b = edge
        adjacency[a].append(b)
        adjacency[b].append(a)
    seen = {start}
    queue = deque([start])
    while queue:
        v = queue.popleft()
        for w in adjacency[v]:
            if w != banned_vertex and w not in seen:
                seen.add(w)
                queue.append(w)
    return seen


@given(simple_graphs())
def test_articulation_points_match_vertex_removal(graph):
    n, edges = graph
    component = _reach(n, edges, 1)
    expected = set()
    for v in component:
        rest = component - {v}
        if rest:
            start = next(iter(rest))
            if _reach(n, edges, start, banned_vertex=v) != rest:
                expected.add(v)
    assert articulation_points(n, edges) == expected


@given(simple_graphs())
def test_bridges_match_edge_removal(graph):
    n, edges = graph
    component = _reach(n, edges, 1)
    expected = sorted(
        (a, b)
        for a, b in edges
        if a in component and b not in _reach(n, edges, a, banned_edge=(a, b))
    )
    assert bridges(n, edges) == expected


def test_path_graph():
    edges = [(1, 2), (2, 3)]
    assert articulation_points(3, edges) == {2}
    assert bridges(3, edges) == [(1, 2), (2, 3)]


def test_cycle_has_no_cuts():
    edges = [(1, 2), (2, 3), (3, 1)]
    assert articulation_points(3, edges) == set()
    assert bridges(3, edges) == []


def test_root_with_two_children_is_cut_vertex():
    assert articulation_points(3, [(1, 2), (1, 3)]) == {1}


def test_bridges_are_normalised_and_sorted():
    result = bridges(4, [(4, 3), (3, 1), (2, 1)])
    assert result == sorted(result)
    assert all(a < b for a, b in result)
    assert len(result) == 3


def test_other_root():
    edges = [(1, 2), (2, 3)]
    assert articulation_points(3, edges, root=3) == {2}


def test_doubled_edge_to_parent_counts_as_bridge():
    assert bridges(2, [(1, 2), (1, 2)]) == [(1, 2)]


def test_unreached_component_is_ignored():
    edges = [(1, 2), (3, 4), (4, 5)]
    assert articulation_points(5, edges) == set()
    assert bridges(5, edges) == [(1, 2)]


@pytest.mark.parametrize("func", [articulation_points, bridges])
def test_invalid_vertices(func):
    with pytest.raises(ValueError):
        func(3, [(1, 4)])
    with pytest.raises(ValueError):
        func(3, [(1, 2)], root=0)


def test_long_path_does_not_hit_recursion_limit():
    n = 5000
    edges = [(i, i + 1) for i in range(1, n)]
    assert articulation_points(n, edges) == set(range(2, n))
    assert len(bridges(n, edges)) == n - 1