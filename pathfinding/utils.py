"""Miscellaneous grid and integer utilities."""

from __future__ import annotations

import math
from collections.abc import Iterator

Coord = tuple[int, int]


def uint_sqrt(n: int) -> int | None:
    """Return the square root of ``n`` if ``n`` is a perfect square, else None."""
    if n < 0:
        raise ValueError("uint_sqrt requires a non-negative integer")
    root = math.isqrt(n)
    return root if root * root == n else None


def move_in_direction(
    start: Coord, direction: Coord, dimensions: Coord
) -> Coord | None:
    """Move ``start`` one step in ``direction`` if both ends lie inside ``dimensions``.

    Returns None if the start is outside, the direction is ``(0, 0)``,
    or the target is outside.
    """
    row, col = start
    rows, cols = dimensions
    if row >= rows or col >= cols or tuple(direction) == (0, 0):
        return None
    new_row, new_col = row + direction[0], col + direction[1]
    if 0 <= new_row < rows and 0 <= new_col < cols:
        return (new_row, new_col)
    return None


def in_direction(
    start: Coord, direction: Coord, dimensions: Coord
) -> Iterator[Coord]:
    """Yield successive cells in ``direction`` from ``start``, excluding ``start``."""
    current = move_in_direction(start, direction, dimensions)
    while current is not None:
        yield current
        current = move_in_direction(current, direction, dimensions)


def constrain(value: int, upper: int) -> int:
    """Wrap ``value`` into ``range(upper)``."""
    if upper == 0:
        raise ZeroDivisionError("upper bound must not be zero")
    return value % upper