"""Sparse matrices kept as value, column and row-start vectors.

``values`` holds the non-zero elements row by row, ``columns`` the column of
each of them, and ``row_starts[r]`` the position in ``values`` where row ``r``
begins, or -1 when the row has no non-zero elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

EPS = 1e-6
EMPTY_ROW = -1

Dense = list[list[float]]


def _shape(dense: Sequence[Sequence[float]]) -> tuple[int, int]:
    rows = len(dense)
    cols = len(dense[0]) if rows else 0
    if any(len(row) != cols for row in dense):
        raise ValueError("every row of a matrix must have the same length")
    return rows, cols


@dataclass(frozen=True)
class SparseMatrix:
    """A ``rows`` x ``cols`` matrix holding only its non-zero elements."""

    rows: int
    cols: int
    values: tuple[float, ...]
    columns: tuple[int, ...]
    row_starts: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "row_starts", tuple(self.row_starts))
        if self.rows < 0 or self.cols < 0:
            raise ValueError("matrix dimensions cannot be negative")
        if len(self.values) != len(self.columns):
            raise ValueError("values and columns must have the same length")
        if len(self.row_starts) != self.rows:
            raise ValueError("there must be one row start for every row")

    @property
    def amount(self) -> int:
        """Number of stored non-zero elements."""
        return len(self.values)

    @classmethod
    def from_dense(cls, dense: Sequence[Sequence[float]]) -> SparseMatrix:
        """Collect the elements of ``dense`` whose magnitude exceeds ``EPS``."""
        rows, cols = _shape(dense)
        values: list[float] = []
        columns: list[int] = []
        starts: list[int] = []
        for row in dense:
            start = len(values)
            for col, value in enumerate(row):
                if abs(value) > EPS:
                    values.append(value)
                    columns.append(col)
            starts.append(start if len(values) > start else EMPTY_ROW)
        return cls(rows, cols, tuple(values), tuple(columns), tuple(starts))

    def to_dense(self) -> Dense:
        """Expand into a list of rows with zeros in the empty places."""
        dense = [[0.0] * self.cols for _ in range(self.rows)]
        for row in range(self.rows):
            for col, value in self._row_entries(row):
                dense[row][col] = value
        return dense

    def _row_entries(self, row: int) -> list[tuple[int, float]]:
        start = self.row_starts[row]
        if start == EMPTY_ROW:
            return []
        end = next(
            (s for s in self.row_starts[row + 1:] if s != EMPTY_ROW), len(self.values)
        )
        return list(zip(self.columns[start:end], self.values[start:end]))


def add_dense(first: Sequence[Sequence[float]],
              second: Sequence[Sequence[float]]) -> Dense:
    """Add two matrices element by element."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices of different sizes cannot be added")
    return [[a + b for a, b in zip(left, right)] for left, right in zip(first, second)]


def _merge(left: list[tuple[int, float]],
           right: list[tuple[int, float]]) -> Iterator[tuple[int, float]]:
    i = j = 0
    while i < len(left) or j < len(right):
        if i < len(left) and j < len(right) and left[i][0] == right[j][0]:
            total = left[i][1] + right[j][1]
            col = left[i][0]
            i += 1
            j += 1
            if abs(total) > EPS:
                yield col, total
        elif j >= len(right) or (i < len(left) and left[i][0] < right[j][0]):
            yield left[i]
            i += 1
        else:
            yield right[j]
            j += 1


def add_sparse(first: SparseMatrix, second: SparseMatrix) -> SparseMatrix:
    """Add two sparse matrices row by row; sums that vanish are not stored."""
    if (first.rows, first.cols) != (second.rows, second.cols):
        raise ValueError("matrices of different sizes cannot be added")
    values: list[float] = []
    columns: list[int] = []
    starts: list[int] = []
    for row in range(first.rows):
        start = len(values)
        for col, value in _merge(first._row_entries(row), second._row_entries(row)):
            columns.append(col)
            values.append(value)
        starts.append(start if len(values) > start else EMPTY_ROW)
    return SparseMatrix(first.rows, first.cols, tuple(values), tuple(columns),
                        tuple(starts))