from itertools import combinations

from pathfinding.cliques import maximal_cliques, maximal_cliques_collect

EDGES = {(1, 2), (2, 3), (1, 3), (3, 4), (4, 5), (5, 6), (4, 6), (3, 5)}


def connected(a, b):
    return (a, b) in EDGES or (b, a) in EDGES


def key(cliques):
    return sorted(sorted(c) for c in cliques)


def test_triangle_with_pendant():
    edges = {(1, 2), (2, 3), (1, 3), (3, 4)}
    result = maximal_cliques_collect(
        [1, 2, 3, 4], lambda a, b: (a, b) in edges or (b, a) in edges
    )
    assert key(result) == [[1, 2, 3], [3, 4]]


def test_cliques_are_complete():
    for clique in maximal_cliques_collect(range(1, 7), connected):
        for a, b in combinations(clique, 2):
            assert connected(a, b)


def test_cliques_are_maximal():
    vertices = set(range(1, 7))
    for clique in maximal_cliques_collect(vertices, connected):
        for other in vertices - clique:
            assert not all(connected(other, n) for n in clique)


def test_every_vertex_covered():
    result = maximal_cliques_collect(range(1, 7), connected)
    assert set().union(*result) == set(range(1, 7))


def test_no_duplicates():
    result = maximal_cliques_collect(range(1, 7), connected)
    keys = key(result)
    assert len(keys) == len({tuple(k) for k in keys})


def test_isolated_vertices():
    result = maximal_cliques_collect(["x", "y", "z"], lambda a, b: False)
    assert key(result) == [["x"], ["y"], ["z"]]


def test_complete_graph():
    result = maximal_cliques_collect(range(5), lambda a, b: a != b)
    assert result == [set(range(5))]


def test_empty_graph():
    assert maximal_cliques_collect([], lambda a, b: True) == [set()]


def test_consumer_matches_collect():
    seen = []
    maximal_cliques(range(1, 7), connected, seen.append)
    assert key(seen) == key(maximal_cliques_collect(range(1, 7), connected))