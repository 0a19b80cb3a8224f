"""Maximal cliques of an undirected graph (Bron-Kerbosch algorithm)."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable

Connected = Callable[[Hashable, Hashable], bool]
Consumer = Callable[[set], None]


def _bron_kerbosch(
    connected: Connected,
    potential_clique: set,
    remaining_nodes: set,
    skip_nodes: set,
    consumer: Consumer,
) -> None:
    if not remaining_nodes and not skip_nodes:
        consumer(set(potential_clique))
        return
    for node in list(remaining_nodes):
        new_potential = potential_clique | {node}
        new_remaining = {
            n for n in remaining_nodes if n != node and connected(node, n)
        }
        new_skip = {n for n in skip_nodes if n != node and connected(node, n)}
        _bron_kerbosch(connected, new_potential, new_remaining, new_skip, consumer)
        # Every clique containing this node has been reported already.
        remaining_nodes.discard(node)
        skip_nodes.add(node)


def maximal_cliques(
    vertices: Iterable[Hashable], connected: Connected, consumer: Consumer
) -> None:
    """Call ``consumer`` with each maximal clique of the graph."""
    _bron_kerbosch(connected, set(), set(vertices), set(), consumer)


def maximal_cliques_collect(
    vertices: Iterable[Hashable], connected: Connected
) -> list[set]:
    """Return all maximal cliques of the graph as a list of sets."""
    result: list[set] = []
    maximal_cliques(vertices, connected, result.append)
    return result