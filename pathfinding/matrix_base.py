"""Core storage, construction and navigation for rectangular matrices."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from pathfinding.utils import constrain as _constrain
from pathfinding.utils import in_direction as _in_direction
from pathfinding.utils import move_in_direction as _move_in_direction
from pathfinding.utils import uint_sqrt

Coord = tuple[int, int]

E: Coord = (0, 1)
S: Coord = (1, 0)
W: Coord = (0, -1)
N: Coord = (-1, 0)
NE: Coord = (-1, 1)
SE: Coord = (1, 1)
NW: Coord = (-1, -1)
SW: Coord = (1, -1)
DIRECTIONS_4: tuple[Coord, ...] = (E, S, W, N)
DIRECTIONS_8: tuple[Coord, ...] = (NE, E, SE, S, SW, W, NW, N)


class MatrixFormatError(ValueError):
    """Raised when a matrix cannot be built or sliced from the given data."""

    default_message = "invalid matrix format"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyRowError(MatrixFormatError):
    """Attempt to build a matrix containing an empty row."""

    default_message = "matrix rows cannot be empty"


class WrongIndexError(MatrixFormatError):
    """Attempt to access elements not inside the matrix."""

    default_message = "index does not point to data inside the matrix"


class WrongLengthError(MatrixFormatError):
    """Attempt to build a matrix or a row from data with the wrong length."""

    default_message = "provided data does not correspond to the expected length"


class MatrixBase:
    """Matrix of arbitrary values stored row after row.

    Coordinates are ``(row, column)`` tuples.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, columns: int, value: Any) -> None:
        if rows != 0 and columns == 0:
            raise ValueError("unable to create a matrix with empty rows")
        self.rows = rows
        self.columns = columns
        self._data: list[Any] = [value] * (rows * columns)

    @classmethod
    def _build(cls, rows: int, columns: int, data: list[Any]):
        obj = cls.__new__(cls)
        obj.rows = rows
        obj.columns = columns
        obj._data = data
        return obj

    @classmethod
    def from_fn(cls, rows: int, columns: int, cb: Callable[[Coord], Any]):
        """Build a matrix whose cells are ``cb((row, column))``."""
        if rows != 0 and columns == 0:
            raise ValueError("unable to create a matrix with empty rows")
        return cls._build(
            rows,
            columns,
            [cb((r, c)) for r in range(rows) for c in range(columns)],
        )

    @classmethod
    def new_square(cls, size: int, value: Any):
        """Build a ``size`` x ``size`` matrix filled with ``value``."""
        return cls(size, size, value)

    @classmethod
    def from_vec(cls, rows: int, columns: int, values: Iterable[Any]):
        """Build a matrix from values given row after row."""
        data = list(values)
        if rows * columns != len(data):
            raise WrongLengthError()
        if rows != 0 and columns == 0:
            raise EmptyRowError()
        return cls._build(rows, columns, data)

    @classmethod
    def square_from_vec(cls, values: Iterable[Any]):
        """Build a square matrix; the number of values must be a perfect square."""
        data = list(values)
        size = uint_sqrt(len(data))
        if size is None:
            raise WrongLengthError()
        return cls.from_vec(size, size, data)

    @classmethod
    def new_empty(cls, columns: int):
        """Build a matrix with no rows, to be grown with :meth:`extend`."""
        return cls._build(0, columns, [])

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]):
        """Build a matrix from an iterable of rows of equal length."""
        iterator = iter(rows)
        try:
            first = next(iterator)
        except StopIteration:
            return cls.new_empty(0)
        data = list(first)
        number_of_columns = len(data)
        number_of_rows = 1
        for row in iterator:
            number_of_rows += 1
            data.extend(row)
            if number_of_rows * number_of_columns != len(data):
                raise WrongLengthError()
        return cls.from_vec(number_of_rows, number_of_columns, data)

    def fill(self, value: Any) -> None:
        """Set every cell to ``value``."""
        self._data = [value] * len(self._data)

    def extend(self, row: Iterable[Any]) -> None:
        """Append one full row."""
        values = list(row)
        if not values:
            raise EmptyRowError()
        if len(values) != self.columns:
            raise WrongLengthError()
        self.rows += 1
        self._data.extend(values)

    def swap(self, a: Coord, b: Coord) -> None:
        """Exchange the values at two positions."""
        ia, ib = self.idx(a), self.idx(b)
        self._data[ia], self._data[ib] = self._data[ib], self._data[ia]

    def is_empty(self) -> bool:
        """Return True if the matrix has no rows."""
        return self.rows == 0

    def is_square(self) -> bool:
        """Return True if the matrix has as many rows as columns."""
        return self.rows == self.columns

    def idx(self, index: Coord) -> int:
        """Return the position in the raw data of a cell, or raise IndexError."""
        row, column = index
        if not 0 <= row < self.rows:
            raise IndexError(f"trying to access row {row} (max {self.rows - 1})")
        if not 0 <= column < self.columns:
            raise IndexError(
                f"trying to access column {column} (max {self.columns - 1})"
            )
        return row * self.columns + column

    def constrain(self, index: Coord) -> Coord:
        """Wrap an out-of-range coordinate around so that it lies inside."""
        row, column = index
        return (_constrain(row, self.rows), _constrain(column, self.columns))

    def within_bounds(self, index: Coord) -> bool:
        """Return True if the coordinates designate a cell."""
        row, column = index
        return 0 <= row < self.rows and 0 <= column < self.columns

    def get(self, index: Coord, default: Any = None) -> Any:
        """Return the value of a cell, or ``default`` if it is outside."""
        if not self.within_bounds(index):
            return default
        row, column = index
        return self._data[row * self.columns + column]

    def neighbours(self, index: Coord, diagonals: bool) -> Iterator[Coord]:
        """Iterate over the cells adjacent to ``index``, in row-major order."""
        r, c = index
        if not self.within_bounds(index):
            return iter(())
        cells = [
            (rr, cc)
            for rr in range(max(r - 1, 0), min(self.rows, r + 2))
            for cc in range(max(c - 1, 0), min(self.columns, c + 2))
            if (rr != r or cc != c) and (diagonals or rr == r or cc == c)
        ]
        return iter(cells)

    def move_in_direction(self, start: Coord, direction: Coord) -> Coord | None:
        """Return the cell one step away in ``direction``, or None."""
        return _move_in_direction(start, direction, (self.rows, self.columns))

    def in_direction(self, start: Coord, direction: Coord) -> Iterator[Coord]:
        """Iterate over the cells in ``direction`` from ``start``, excluded."""
        return _in_direction(start, direction, (self.rows, self.columns))

    def __iter__(self) -> Iterator[list[Any]]:
        """Iterate over copies of the rows."""
        for r in range(self.rows):
            yield self._data[r * self.columns : (r + 1) * self.columns]

    def __reversed__(self) -> Iterator[list[Any]]:
        for r in reversed(range(self.rows)):
            yield self._data[r * self.columns : (r + 1) * self.columns]

    def column_iter(self) -> Iterator[list[Any]]:
        """Iterate over the columns, each as a list."""
        for c in range(self.columns):
            yield self._data[c :: self.columns] if self.columns else []

    def keys(self) -> Iterator[Coord]:
        """Iterate over all coordinates, row after row."""
        columns = self.columns
        return iter([(r, c) for r in range(self.rows) for c in range(columns)])

    def values(self) -> Iterator[Any]:
        """Iterate over all values, row after row."""
        return iter(self._data)

    def items(self) -> Iterator[tuple[Coord, Any]]:
        """Iterate over ``(coordinates, value)`` pairs, row after row."""
        return zip(self.keys(), self.values())

    def __getitem__(self, index):
        if isinstance(index, tuple):
            return self._data[self.idx(index)]
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            self._data[self.idx(index)] = value
        else:
            self._data[index] = value

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, value: Any) -> bool:
        return value in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, columns={self.columns}, data={self._data!r})"