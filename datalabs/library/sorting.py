"""Sorting the literature list and its key table by number of pages."""

from __future__ import annotations

from operator import attrgetter, itemgetter

from .books import Book

_PAGES = attrgetter("pages")
_KEY_PAGES = itemgetter(1)


def _bubble(items: list, key) -> None:
    for last in range(len(items) - 1, 0, -1):
        for j in range(last):
            if key(items[j]) > key(items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]


def bubble_sort_books(books: list[Book]) -> None:
    """Sort books in place by pages with the bubble method."""
    _bubble(books, _PAGES)


def bubble_sort_keys(keys: list[tuple[int, int]]) -> None:
    """Sort ``(index, pages)`` keys in place by pages with the bubble method."""
    _bubble(keys, _KEY_PAGES)


def quick_sort_books(books: list[Book]) -> None:
    """Sort books in place by pages with the library sort."""
    books.sort(key=_PAGES)


def quick_sort_keys(keys: list[tuple[int, int]]) -> None:
    """Sort ``(index, pages)`` keys in place by pages with the library sort."""
    keys.sort(key=_KEY_PAGES)