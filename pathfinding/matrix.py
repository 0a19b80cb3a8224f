"""Matrices with rotation, flipping, transposition and flood-fill helpers."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Any

from pathfinding.matrix_base import (
    Coord,
    EmptyRowError,
    MatrixBase,
    WrongIndexError,
)

__all__ = ["Matrix", "matrix"]


def _bounds(span: range | slice) -> tuple[int, int]:
    """Return the start and stop of a contiguous range or slice."""
    step = span.step if span.step is not None else 1
    if step != 1:
        raise WrongIndexError("only contiguous ranges can be used")
    start = span.start if span.start is not None else 0
    return start, span.stop


class Matrix(MatrixBase):
    """Matrix of arbitrary values with geometric transformations."""

    def _clone(self) -> Matrix:
        return type(self)._build(self.rows, self.columns, list(self._data))

    def _row(self, r: int) -> list[Any]:
        return self._data[r * self.columns : (r + 1) * self.columns]

    def _check_transposable(self) -> None:
        if self.rows == 0 and self.columns != 0:
            raise ValueError("this operation would create a matrix with empty rows")

    def _transposed_data(self) -> list[Any]:
        return [self._data[r * self.columns + c]
                for c in range(self.columns) for r in range(self.rows)]

    def _rotated(self, times: int) -> tuple[int, int, list[Any]]:
        turns = times % 4
        rows, columns, data = self.rows, self.columns, self._data
        if turns == 0:
            return rows, columns, list(data)
        if turns == 2:
            return rows, columns, data[::-1]
        self._check_transposable()
        if turns == 1:
            new = [data[(rows - 1 - c) * columns + r]
                   for r in range(columns) for c in range(rows)]
        else:
            new = [data[c * columns + columns - 1 - r]
                   for r in range(columns) for c in range(rows)]
        return columns, rows, new

    def slice(self, rows: range | slice, columns: range | slice) -> Matrix:
        """Return a copy of the sub-matrix covered by ``rows`` and ``columns``."""
        row_start, row_stop = _bounds(rows)
        col_start, col_stop = _bounds(columns)
        if (
            row_stop > self.rows
            or col_stop > self.columns
            or row_start < 0
            or col_start < 0
            or row_start > row_stop
            or col_start > col_stop
        ):
            raise WrongIndexError()
        data = [
            value
            for r in range(row_start, row_stop)
            for value in self._data[r * self.columns + col_start : r * self.columns + col_stop]
        ]
        return type(self).from_vec(row_stop - row_start, col_stop - col_start, data)

    def rotated_cw(self, times: int) -> Matrix:
        """Return a copy rotated clockwise ``times`` quarter turns."""
        return type(self)._build(*self._rotated(times))

    def rotated_ccw(self, times: int) -> Matrix:
        """Return a copy rotated counter-clockwise ``times`` quarter turns."""
        return self.rotated_cw(4 - times % 4)

    def flipped_lr(self) -> Matrix:
        """Return a copy flipped along the vertical axis."""
        copy = self._clone()
        copy.flip_lr()
        return copy

    def flipped_ud(self) -> Matrix:
        """Return a copy flipped along the horizontal axis."""
        copy = self._clone()
        copy.flip_ud()
        return copy

    def transposed(self) -> Matrix:
        """Return a transposed copy."""
        self._check_transposable()
        return type(self)._build(self.columns, self.rows, self._transposed_data())

    def map(self, transform: Callable[[Any], Any]) -> Matrix:
        """Return a matrix of the same shape with ``transform`` applied to each value."""
        return type(self)._build(
            self.rows, self.columns, [transform(value) for value in self._data]
        )

    def set_slice(self, pos: Coord, slice: MatrixBase) -> None:
        """Copy ``slice`` into this matrix at ``pos``, clipping what falls outside."""
        row, column = pos
        if not (0 <= row <= self.rows and 0 <= column <= self.columns):
            raise IndexError(f"position {pos} outside of the matrix")
        height = min(self.rows - row, slice.rows)
        width = min(self.columns - column, slice.columns)
        for r, source in zip(range(height), slice):
            start = (row + r) * self.columns + column
            self._data[start : start + width] = source[:width]

    def __neg__(self) -> Matrix:
        return self.map(lambda value: -value)

    def flip_lr(self) -> None:
        """Flip the matrix in place around the vertical axis."""
        self._data = [value for r in range(self.rows) for value in self._row(r)[::-1]]

    def flip_ud(self) -> None:
        """Flip the matrix in place around the horizontal axis."""
        self._data = [value for r in reversed(range(self.rows)) for value in self._row(r)]

    def rotate_cw(self, times: int) -> None:
        """Rotate a square matrix in place clockwise ``times`` quarter turns."""
        if not self.is_square():
            raise ValueError("attempt to rotate a non-square matrix")
        _, _, self._data = self._rotated(times)

    def rotate_ccw(self, times: int) -> None:
        """Rotate a square matrix in place counter-clockwise ``times`` quarter turns."""
        self.rotate_cw(4 - times % 4)

    def transpose(self) -> None:
        """Transpose the matrix in place."""
        self._check_transposable()
        self._data = self._transposed_data()
        self.rows, self.columns = self.columns, self.rows

    def bfs_reachable(
        self, start: Coord, diagonals: bool, predicate: Callable[[Coord], bool]
    ) -> set[Coord]:
        """Return the cells reachable from ``start`` through cells satisfying ``predicate``.

        The exploration is breadth first; ``start`` itself is always included.
        """
        start = tuple(start)
        seen = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in self.neighbours(node, diagonals):
                if neighbour not in seen and predicate(neighbour):
                    seen.add(neighbour)
                    queue.append(neighbour)
        return seen

    def dfs_reachable(
        self, start: Coord, diagonals: bool, predicate: Callable[[Coord], bool]
    ) -> set[Coord]:
        """Return the cells reachable from ``start`` through cells satisfying ``predicate``.

        The exploration is depth first; ``start`` itself is always included.
        """
        start = tuple(start)
        seen: set[Coord] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node in seen:
                continue
            seen.add(node)
            candidates = [
                n for n in self.neighbours(node, diagonals)
                if n not in seen and predicate(n)
            ]
            stack.extend(reversed(candidates))
        return seen


def matrix(*args: Iterable[Any]) -> Matrix:
    """Build a matrix from rows given as arguments; no argument gives an empty one."""
    if not args:
        return Matrix.new_empty(0)
    first = list(args[0])
    if not first:
        raise EmptyRowError()
    result = Matrix.new_empty(len(first))
    result.extend(first)
    for row in args[1:]:
        result.extend(row)
    return result