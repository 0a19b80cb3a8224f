"""Maximum or minimum weight matching in a bipartite graph (Hungarian algorithm)."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from pathfinding.matrix_base import MatrixBase


def _weight_table(weights: Any) -> tuple[list[list[Any]], int]:
    """Return the weights as a list of rows, with the number of columns."""
    if isinstance(weights, MatrixBase):
        return [list(row) for row in weights], weights.columns
    table = [list(row) for row in weights]
    columns = len(table[0]) if table else 0
    if any(len(row) != columns for row in table):
        raise ValueError("all rows must have the same number of columns")
    return table, columns


def _solve(table: list[list[Any]], ny: int) -> tuple[Any, list[int]]:
    nx = len(table)
    if nx > ny:
        raise ValueError("number of rows must not be larger than number of columns")
    xy: list[int | None] = [None] * nx
    yx: list[int | None] = [None] * ny
    # Start from a feasible labelling: row maxima for rows, zero for columns.
    lx = [max(row) for row in table]
    ly: list[Any] = [0] * ny
    columns = range(ny)
    for root in range(nx):
        alternating: list[int | None] = [None] * ny
        in_path = [root]
        slack = [lx[root] + ly[y] - table[root][y] for y in columns]
        slackx = [root] * ny
        while True:
            delta: Any = math.inf
            x = y = 0
            # Smallest slack among columns not yet in the alternating tree.
            for yy, (value, origin) in enumerate(zip(slack, slackx)):
                if alternating[yy] is None and value < delta:
                    delta, x, y = value, origin, yy
            if delta > 0:
                for node in in_path:
                    lx[node] -= delta
                for yy in columns:
                    if alternating[yy] is not None:
                        ly[yy] += delta
                    else:
                        slack[yy] -= delta
            alternating[y] = x
            matched = yx[y]
            if matched is None:
                break
            in_path.append(matched)
            row = table[matched]
            for yy in columns:
                if alternating[yy] is None:
                    candidate = lx[matched] + ly[yy] - row[yy]
                    if slack[yy] > candidate:
                        slack[yy] = candidate
                        slackx[yy] = matched
        # Flip the edges along the augmenting path.
        current: int | None = y
        while current is not None:
            x = alternating[current]
            previous = xy[x]
            yx[current] = x
            xy[x] = current
            current = previous
    return sum(lx) + sum(ly), list(xy)


def kuhn_munkres(weights: MatrixBase | Iterable[Iterable[Any]]) -> tuple[Any, list[int]]:
    """Compute a maximum weight matching assigning a distinct column to every row.

    ``weights`` is a matrix or an iterable of equal-length rows. Returns the
    total weight and, for every row, the column assigned to it. Raises
    ValueError if there are more rows than columns.
    """
    return _solve(*_weight_table(weights))


def kuhn_munkres_min(
    weights: MatrixBase | Iterable[Iterable[Any]],
) -> tuple[Any, list[int]]:
    """Compute a minimum weight matching assigning a distinct column to every row."""
    table, columns = _weight_table(weights)
    total, assignments = _solve([[-value for value in row] for row in table], columns)
    return -total, assignments