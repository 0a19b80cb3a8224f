"""Separate the components of an undirected graph into disjoint sets."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence


def _find(table: list, x: int) -> int:
    """Return the root of ``x``, halving the path on the way."""
    while table[x] != x:
        parent = table[x]
        table[x] = table[parent]
        x = parent
    return x


def separate_components(
    groups: Iterable[Iterable[Hashable]],
) -> tuple[dict[Hashable, int], list[int | None]]:
    """Assign a set identifier to every vertex and to every group.

    ``groups`` holds groups of vertices connected together; a group may
    hold a single vertex. Returns a mapping from every vertex to its set
    identifier, and the set identifier of every group in order. Identifiers
    are opaque but never exceed the number of groups. An empty group gets
    ``None`` as its identifier.
    """
    materialized = [list(group) for group in groups]
    table: list = list(range(len(materialized)))
    indices: dict[Hashable, int] = {}
    for group_index, group in enumerate(materialized):
        for element in group:
            if element in indices:
                table[group_index] = _find(table, indices[element])
                group_index = table[group_index]
            else:
                indices[element] = group_index
        if not group:
            table[group_index] = None
    for element, group_index in indices.items():
        indices[element] = _find(table, group_index)
    for group_index, entry in enumerate(table):
        if entry is not None:
            # Path halving may have left this entry one step behind.
            table[group_index] = _find(table, group_index)
    return indices, table


def components(groups: Iterable[Iterable[Hashable]]) -> list[set]:
    """Return the disjoint connected sets formed by ``groups``."""
    materialized = [list(group) for group in groups]
    _, group_indices = separate_components(materialized)
    merged: dict[int, set] = {}
    for group, identifier in zip(materialized, group_indices):
        if identifier is not None:
            merged.setdefault(identifier, set()).update(group)
    return list(merged.values())


def connected_components(
    starts: Iterable[Hashable],
    neighbours: Callable[[Hashable], Iterable[Hashable]],
) -> list[set]:
    """Return the connected sets of a graph given by its ``neighbours`` function.

    Every vertex in ``starts`` forms a group with its immediate neighbours.
    """
    return components([*neighbours(start), start] for start in starts)


def component_index(components: Sequence[Iterable[Hashable]]) -> dict[Hashable, int]:
    """Map every vertex to the index of the set holding it in ``components``."""
    return {
        node: index
        for index, component in enumerate(components)
        for node in component
    }