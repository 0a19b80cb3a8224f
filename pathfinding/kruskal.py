"""Minimum spanning tree of an undirected graph using Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any


def _find(parents: list[int], node: int) -> int:
    """Find the root of ``node``, compressing the path by halving."""
    while parents[node] != node:
        parents[node] = parents[parents[node]]
        node = parents[node]
    return node


def _union(parents: list[int], ranks: list[int], a: int, b: int) -> None:
    if ranks[a] < ranks[b]:
        a, b = b, a
    parents[b] = a
    if ranks[a] == ranks[b]:
        ranks[a] += 1


def _spanning_edges(
    number_of_nodes: int, edges: list[tuple[int, int, Any]]
) -> Iterator[tuple[int, int, Any]]:
    parents = list(range(number_of_nodes))
    ranks = [1] * number_of_nodes
    for a, b, weight in edges:
        root_a = _find(parents, a)
        root_b = _find(parents, b)
        if root_a != root_b:
            _union(parents, ranks, root_a, root_b)
            yield (a, b, weight)


def kruskal_indices(
    number_of_nodes: int, edges: Iterable[tuple[int, int, Any]]
) -> Iterator[tuple[int, int, Any]]:
    """Yield the edges of a minimum spanning tree over nodes ``0..number_of_nodes-1``.

    Raises IndexError if an edge names a node outside that range.
    """
    edge_list = sorted(edges, key=lambda edge: edge[2])
    for a, b, _ in edge_list:
        for node in (a, b):
            if not 0 <= node < number_of_nodes:
                raise IndexError(
                    f"node {node} outside of range 0..{number_of_nodes}"
                )
    return _spanning_edges(number_of_nodes, edge_list)


def kruskal(
    edges: Iterable[tuple[Hashable, Hashable, Any]],
) -> Iterator[tuple[Hashable, Hashable, Any]]:
    """Yield the edges of a minimum spanning tree from weighted edges."""
    indices: dict[Hashable, int] = {}
    indexed = []
    for a, b, weight in edges:
        ia = indices.setdefault(a, len(indices))
        ib = indices.setdefault(b, len(indices))
        indexed.append((ia, ib, weight))
    nodes = list(indices)
    return (
        (nodes[ia], nodes[ib], weight)
        for ia, ib, weight in kruskal_indices(len(nodes), indexed)
    )