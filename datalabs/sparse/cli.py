"""Interactive addition of two matrices in full and in sparse form."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import TextIO

from .benchmark import format_single, measure_sum
from .filling import ElementError, fill_random, parse_element
from .matrix import EPS, Dense, SparseMatrix
from .render import MAX_SHOWN, format_matrix

_INT_LINE = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def info_text() -> str:
    """Describe the sparse form and what the program does."""
    return (
        "A sparse (containing many zeros) matrix (with real values) is stored in the form of 3 objects:\n"
        "-- vector A contains the values of non-zero elements;\n"
        "-- vector JA contains column numbers for elements of vector A;\n"
        "-- vector IA with the Nk element containing the number of components in A and JA\n"
        "          that begin the description of the Nk row of the matrix A.\n"
        "          (-1 means that the row is empty)\n\n"
        "The program can:\n"
        "1) Simulate the operation of adding two matrices stored in this form,\n"
        "   with the result in the same form.\n"
        "2) perform the addition operation using the standard algorithm for working with matrices.\n"
        "3) Compare the time of operations and the amount of memory when using these 2 algorithms\n\n"
        "To add up two matrices, first input n (amount of rows) and m (amount of columns) in them.\n"
        "Then input source matrices in one of the following ways:\n"
        "0) automaticly: specify the amount of nonnull elements in matrix\n"
        "1) manually: specify the amount of nonnull elements and then input them in a coordinate format:\n"
        '   "i j value",\n'
        "   where i - the number of row (int, 0 <= i <= n-1);\n"
        "         j - the number of column (int, 0 <= j <= m-1);\n"
        f"         value - value of this element (real, |value - 0| > {EPS:f})\n"
        "You will get:\n"
        "-- the source matrices and a matrix-result of adding in the described form\n"
        f"   (if n <= {MAX_SHOWN} and m <= {MAX_SHOWN}, the matrices will be shown in a usual form as well);\n"
        "-- the the results of comparing of the time and the amount of\n"
        "   memory when using these 2 algorithms (simulated and standard) for this exact operation\n\n"
    )


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def write(self, text: str) -> None:
        self._out.write(text)

    def read(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str, low: int, high: int | None, retry: str) -> int:
        self.write(prompt)
        while True:
            match = _INT_LINE.fullmatch(self.read())
            if match is not None:
                value = int(match.group(1))
                if value >= low and (high is None or value <= high):
                    return value
            self.write(retry)


def _input_manually(console: _Console, rows: int, cols: int, amount: int) -> Dense:
    dense = [[0.0] * cols for _ in range(rows)]
    console.write(
        f"\nInput {amount} nonnull elements of matrix in coordinate format: "
        '"i j value", where:\n'
        f"-- i - number of row (int, 0 <= i <= {rows - 1})\n"
        f"-- j - number of column (int, 0 <= j <= {cols - 1})\n"
        f"-- value - value of elemnt (real, |value - 0| > {EPS:f})\n"
        "1 element in one row\n"
        "i j value\n\n"
    )
    for number in range(1, amount + 1):
        while True:
            console.write(f"Input element number {number}:\n")
            try:
                row, col, value = parse_element(console.read(), dense)
            except ElementError as error:
                console.write(f"{error}. Try to input current element again\n")
                continue
            dense[row][col] = value
            console.write("Successfully added.\n")
            break
    console.write(
        f"Input is finished.\n Successfully added {amount} nonnul elements of matrix\n\n"
    )
    return dense


def _input_matrix(console: _Console, rows: int, cols: int, ordinal: str,
                  rng: random.Random) -> Dense:
    total = rows * cols
    amount = console.ask_int(
        f"How many nonnull elements will be in {ordinal} matrix (from 0 to {total}): ",
        0, total, "ERROR: incorrect amount nonnull elements. Try again: ",
    )
    mode = 0
    if amount > 0:
        mode = console.ask_int(
            "Choose input mode: 0 - for automatically, 1 - for manually: ",
            0, 1, "ERROR: incorrect mode. Try again: ",
        )
    if mode == 1:
        return _input_manually(console, rows, cols, amount)
    dense = fill_random(rows, cols, amount, rng)
    console.write(
        f"Input is finished.\nSuccessfully added {amount} nonnul elements of matrix\n\n"
    )
    return dense


def main(argv=None) -> int:
    """Read two matrices, add them both ways and compare the two."""
    parser = argparse.ArgumentParser(
        prog="sparse", description="Add two matrices in full and in sparse form."
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for automatically filled matrices")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    console = _Console(sys.stdin, sys.stdout)
    console.write(info_text())
    try:
        rows = console.ask_int("Input number of rows n (int, >= 1): ", 1, None,
                               "ERROR: incorrect n. Try again: ")
        cols = console.ask_int("Input number of columns m (int, >= 1): ", 1, None,
                               "ERROR: incorrect m. Try again\n")
        first = _input_matrix(console, rows, cols, "first", rng)
        second = _input_matrix(console, rows, cols, "second", rng)
    except EOFError:
        console.write("\nERROR: unexpected end of input\n")
        return 1

    console.write(format_matrix("ENTERED MATRIX 1", first, SparseMatrix.from_dense(first)))
    console.write(format_matrix("ENTERED MATRIX 2", second, SparseMatrix.from_dense(second)))
    measurement = measure_sum(first, second)
    console.write(format_matrix("SUM MATRIX", measurement.dense_sum, measurement.sparse_sum))
    console.write(format_single(measurement))
    console.write(
        "\n\n To see the comparative table of using these two algorytms for different\n"
        "matricies sizes and percentage of nonnull elements, see the report\n"
    )
    console.write("Everything went ok, finishing program\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())