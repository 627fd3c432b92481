"""Comparing the addition of matrices in full and in sparse form.

Both the time spent on the addition itself and the memory the three
matrices (two operands and the sum) take in each form are compared.
"""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field
from typing import Sequence

from .filling import fill_random
from .matrix import Dense, SparseMatrix, add_dense, add_sparse

DOUBLE_SIZE = 8
POINTER_SIZE = 8
INT_SIZE = 4

_RULE = "------------------------------------\n"
_SEPARATOR = "|------|---------------|-----------\n"


@dataclass(frozen=True)
class Measurement:
    """Time in nanoseconds and memory in bytes of one addition in both forms."""

    dense_time: int
    sparse_time: int
    dense_memory: int
    sparse_memory: int
    dense_sum: Dense | None = field(default=None, compare=False)
    sparse_sum: SparseMatrix | None = field(default=None, compare=False)


def _timed(action, *args):
    start = time.perf_counter_ns()
    result = action(*args)
    return result, time.perf_counter_ns() - start


def _percent(part: float, whole: float) -> float:
    if whole == 0:
        return math.inf if part else math.nan
    return part * 100 / whole


def _dense_memory(rows: int, cols: int) -> int:
    return 3 * rows * cols * DOUBLE_SIZE + 3 * rows * POINTER_SIZE


def _sparse_part(amount: int, rows: int) -> int:
    return amount * (DOUBLE_SIZE + INT_SIZE) + rows * INT_SIZE


def measure_sum(first: Sequence[Sequence[float]],
                second: Sequence[Sequence[float]]) -> Measurement:
    """Add two matrices in full and in sparse form and measure both ways."""
    sparse_first = SparseMatrix.from_dense(first)
    sparse_second = SparseMatrix.from_dense(second)
    dense_sum, dense_time = _timed(add_dense, first, second)
    sparse_sum, sparse_time = _timed(add_sparse, sparse_first, sparse_second)
    rows, cols = sparse_first.rows, sparse_first.cols
    sparse_memory = (
        (sparse_first.amount + sparse_second.amount + sparse_sum.amount)
        * (DOUBLE_SIZE + INT_SIZE)
        + 3 * rows * INT_SIZE
    )
    return Measurement(
        dense_time,
        sparse_time,
        _dense_memory(rows, cols),
        sparse_memory,
        dense_sum,
        sparse_sum,
    )


def format_single(measurement: Measurement) -> str:
    """Render the time and memory comparison table of one addition."""
    time_share = _percent(measurement.sparse_time, measurement.dense_time)
    memory_share = _percent(measurement.sparse_memory, measurement.dense_memory)
    return (
        "\nA comparative table of memory and time usage (for these two approaches)\n"
        "for this exact example:\n\n"
        + _RULE
        + "|      |      time     |   memory  \n"
        + _SEPARATOR
        + f"|usual |  {measurement.dense_time:6d} ns    | "
        f"{measurement.dense_memory:6d} bytes \n"
        + _SEPARATOR
        + f"|rare  |{time_share:3.2f}% of usual|{memory_share:3.2f}% of usual\n"
        + _SEPARATOR
    )


def compare_fill_levels(n: int, low: int, high: int, step: int) -> str:
    """Tabulate both ways for ``n`` x ``n`` matrices filled from ``low`` to ``high`` percent.

    Each fill level is measured on random matrices added to themselves; the
    time is a mean of 10 repeats, or of one when ``n`` exceeds 100.
    """
    if n < 1:
        raise ValueError("a matrix needs at least one row")
    if step < 1:
        raise ValueError("step must be positive")
    repeats = 1 if n > 100 else 10
    rng = random.Random()
    mem_usual = _dense_memory(n, n)
    lines = [
        f"\n\nComparative_table for matrix {n}x{n}\n",
        f"Counted mean time for {repeats} repeats\n",
        "% nonnul |mem_usual, bytes|mem_rare, %of usual|"
        "time_usual, ticks|time_rare, %of usual\n",
    ]
    for percent in range(low, high + 1, step):
        amount = int(n * n * percent / 100)
        dense_total = sparse_total = 0
        result_amount = 0
        for _ in range(repeats):
            dense = fill_random(n, n, amount, rng)
            sparse = SparseMatrix.from_dense(dense)
            result, sparse_time = _timed(add_sparse, sparse, sparse)
            _, dense_time = _timed(add_dense, dense, dense)
            result_amount = result.amount
            sparse_total += sparse_time
            dense_total += dense_time
        dense_mean = dense_total // repeats
        sparse_mean = sparse_total // repeats
        mem_rare = 2 * _sparse_part(amount, n) + _sparse_part(result_amount, n)
        lines.append(
            f"{percent:3d} %    | {mem_usual:10d}     |      "
            f"{_percent(mem_rare, mem_usual):3.2f}        |     "
            f"{dense_mean:6d}      |   {_percent(sparse_mean, dense_mean):3.2f} \n"
        )
    lines.append("\n\n")
    return "".join(lines)