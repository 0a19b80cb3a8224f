"""A set of node references usable as one or several search endpoints."""

from __future__ import annotations

from collections.abc import Hashable


class NodeRefs(frozenset):
    """An immutable set of nodes, built from an iterable or a single node."""

    @classmethod
    def of(cls, node: Hashable) -> NodeRefs:
        """Build a set holding the single ``node``."""
        return cls((node,))