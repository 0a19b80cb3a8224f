"""Minimum spanning tree of an undirected graph using Prim's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from typing import Any


def prim(edges: Sequence[tuple[Any, Any, Any]]) -> list[tuple[Any, Any, Any]]:
    """Return the edges of a minimum spanning tree from weighted edges.

    The search starts from the first node of the first edge.
    """
    if not edges:
        return []
    start = edges[0][0]
    queue = [(cost, a, b) for a, b, cost in edges if a == start]
    heapq.heapify(queue)
    tree = []
    visited = {start}
    while queue:
        cost, origin, node = heapq.heappop(queue)
        if node in visited:
            continue
        tree.append((origin, node, cost))
        for a, b, edge_cost in edges:
            if node == a and b not in visited:
                heapq.heappush(queue, (edge_cost, node, b))
            elif node == b and a not in visited:
                heapq.heappush(queue, (edge_cost, node, a))
        visited.add(node)
    return tree