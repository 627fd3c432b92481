"""Timing the four ways of sorting a literature list by number of pages.

The list itself can be sorted, or only its key table of ``(index, pages)``
pairs, and each either with the bubble method or with the library sort.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from .books import Book, build_key_table, read_books
from .sorting import (
    bubble_sort_books,
    bubble_sort_keys,
    quick_sort_books,
    quick_sort_keys,
)

BOOK_RECORD_SIZE = 112
KEY_RECORD_SIZE = 8
BENCHMARK_FILE = "5000_books.txt"

_RULE = "-------------------------------------------------------------------\n"
_SEPARATOR = "------------|--------------------------|--------------------------|\n"


@dataclass(frozen=True)
class Timings:
    """Microseconds spent by each approach, and the number of records sorted."""

    main_bubble: int
    key_bubble: int
    main_quick: int
    key_quick: int
    records: int = 0


def _timed(action, *args) -> int:
    start = time.perf_counter_ns()
    action(*args)
    return (time.perf_counter_ns() - start) // 1000


def _sort_through_keys(sorter, books: list[Book], keys: list[tuple[int, int]]) -> list[Book]:
    sorter(keys)
    return [books[index] for index, _ in keys]


def measure(books: list[Book]) -> Timings:
    """Time every approach on copies of ``books``; the argument is left as it is."""
    source = list(books)
    main_bubble = _timed(bubble_sort_books, list(source))
    main_quick = _timed(quick_sort_books, list(source))
    key_bubble = _timed(
        partial(_sort_through_keys, bubble_sort_keys), source, build_key_table(source)
    )
    key_quick = _timed(
        partial(_sort_through_keys, quick_sort_keys), source, build_key_table(source)
    )
    return Timings(main_bubble, key_bubble, main_quick, key_quick, len(source))


def measure_file(path) -> Timings:
    """Read a literature file and time every approach on its records."""
    with Path(path).open(encoding="utf-8") as stream:
        books = read_books(stream)
    return measure(books)


def _percent(part: float, whole: float) -> float:
    if whole == 0:
        return math.inf if part else math.nan
    return part * 100 / whole


def format_comparison(timings: Timings, count: int | None = None) -> str:
    """Render the memory and time comparison table for ``count`` records."""
    if count is None:
        count = timings.records
    mem_main = BOOK_RECORD_SIZE * count
    mem_keys = KEY_RECORD_SIZE * count
    mem_total = mem_main + mem_keys
    return (
        f"\nMeasurements were performed on a list of {count} records\n\n"
        + _RULE
        + "            |  using literature list   |      using key table     |\n"
        + _SEPARATOR
        + f"memory      |  {mem_main:6d} bytes (100.00%)  | {mem_total:6d} bytes "
        f"({_percent(mem_total, mem_main):3.2f}%)   |\n"
        + _SEPARATOR
        + f"time bubble |  {timings.main_bubble:6d} usec (100.00%)   |  "
        f"{timings.key_bubble:6d} usec "
        f"({_percent(timings.key_bubble, timings.main_bubble):3.2f}%)    |\n"
        + f"time quick  |   {timings.main_quick:6d} usec "
        f"({_percent(timings.main_quick, timings.main_bubble):3.2f}%)    |  "
        f"{timings.key_quick:6d} usec "
        f"({_percent(timings.key_quick, timings.main_bubble):3.2f}%)     |\n"
        + _RULE
    )