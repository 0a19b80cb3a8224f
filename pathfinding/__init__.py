"""Spanning trees, cliques, connected components, Kuhn-Munkres assignment and matrices."""

__version__ = "4.14.0"

__all__ = [
    "cliques",
    "connected_components",
    "kruskal",
    "kuhn_munkres",
    "matrix",
    "matrix_base",
    "noderefs",
    "prim",
    "utils",
]