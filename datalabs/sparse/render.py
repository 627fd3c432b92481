"""Text forms of matrices, in full and in sparse form."""

from __future__ import annotations

from typing import Sequence

from .matrix import SparseMatrix

MAX_SHOWN = 20


def format_dense(dense: Sequence[Sequence[float]]) -> str:
    """Render every element of a matrix, one row per line."""
    return "".join(
        "|" + "".join(f" {value:3.1f} |" for value in row) + "\n" for row in dense
    )


def format_sparse(matrix: SparseMatrix) -> str:
    """Render the three vectors in blocks of ``MAX_SHOWN`` columns."""
    n, amount = matrix.rows, matrix.amount
    blocks = max(1, (n + MAX_SHOWN - 1) // MAX_SHOWN)
    parts = []
    for block in range(blocks):
        lo, hi = block * MAX_SHOWN, (block + 1) * MAX_SHOWN
        indices = range(lo, min(hi, max(n, amount)))
        stored = range(lo, min(hi, amount))
        starts = range(lo, min(hi, n))
        parts.append(
            "\n"
            + "i:  |" + "".join(f"{i:3d} |" for i in indices) + "\n"
            + "a:  |" + "".join(f"{matrix.values[i]:3.1f} |" for i in stored) + "\n"
            + "aj: |" + "".join(f"{matrix.columns[i]:3d} |" for i in stored) + "\n"
            + "ai: |" + "".join(f"{matrix.row_starts[i]:3d} |" for i in starts) + "\n"
        )
    return "".join(parts)


def format_matrix(title: str, dense: Sequence[Sequence[float]],
                  sparse: SparseMatrix) -> str:
    """Render a titled matrix; the full form only when it is small enough."""
    text = f"\n{title}\n"
    if sparse.rows <= MAX_SHOWN and sparse.cols <= MAX_SHOWN:
        text += "IN USUAL FORMAT:\n" + format_dense(dense)
    return text + "IN SPECIAL FORMAT:\n" + format_sparse(sparse)