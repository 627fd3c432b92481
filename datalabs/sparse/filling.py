"""Filling matrices with random elements or with elements typed by hand."""

from __future__ import annotations

import random
from typing import Sequence

from .matrix import EPS, Dense


class ElementError(ValueError):
    """Raised when a hand-typed element cannot be placed in the matrix."""


def random_positions(count: int, rng: random.Random | None = None) -> list[int]:
    """Return the numbers ``0 .. count-1`` in a random order."""
    rng = rng if rng is not None else random.Random()
    positions = list(range(count))
    for i in range(count - 1, 0, -1):
        j = rng.randrange(i + 1)
        positions[i], positions[j] = positions[j], positions[i]
    return positions


def fill_random(rows: int, cols: int, amount: int,
                rng: random.Random | None = None) -> Dense:
    """Build a ``rows`` x ``cols`` matrix with ``amount`` random non-zero elements.

    Each element is ``k + 0.1`` for a random ``k`` from 0 to 9, negated where
    ``row + col`` is odd.
    """
    if rows < 1 or cols < 1:
        raise ValueError("a matrix needs at least one row and one column")
    if not 0 <= amount <= rows * cols:
        raise ValueError(f"amount must be from 0 to {rows * cols}, got {amount}")
    rng = rng if rng is not None else random.Random()
    dense = [[0.0] * cols for _ in range(rows)]
    for position in random_positions(rows * cols, rng)[:amount]:
        row, col = divmod(position, cols)
        dense[row][col] = (rng.randrange(10) + 0.1) * (-1) ** (row + col)
    return dense


def parse_element(line: str, dense: Sequence[Sequence[float]]) -> tuple[int, int, float]:
    """Read ``"i j value"`` and check it can go into the empty place ``dense[i][j]``.

    Returns ``(i, j, value)``; the matrix itself is not changed.
    """
    parts = line.strip("\r\n").split()
    try:
        if len(parts) != 3:
            raise ValueError
        row, col, value = int(parts[0]), int(parts[1]), float(parts[2])
    except ValueError:
        raise ElementError("ERROR: can't read this row") from None
    rows = len(dense)
    cols = len(dense[0]) if rows else 0
    if not 0 <= row < rows:
        raise ElementError("ERROR: incorrect number of row")
    if not 0 <= col < cols:
        raise ElementError("ERROR: incorrect number of column")
    if abs(dense[row][col]) > EPS:
        raise ElementError("ERROR: an element to this posission was already added")
    if abs(value) < EPS:
        raise ElementError(
            "ERROR: this element can't be null (or too close to null)"
        )
    return row, col, value