"""Text tables of the literature list and of its key table."""

from __future__ import annotations

from .books import Book, Literature

BOOKS_HEADER = (
    "|i |                   author|                     name|"
    "         publishing house|page|t||\n"
)
KEYS_HEADER = "|i |i main table |num of pages|\n"


def format_book(book: Book) -> str:
    """Render one record as a table row ending with a newline."""
    row = (
        f"|{book.author:>25}|{book.title:>25}|{book.publisher:>25}"
        f"|{book.pages:4d}|{int(book.kind):1d}"
    )
    if book.kind is Literature.TECHNICAL:
        return row + f"||{book.field:>15}|{book.origin:1d}|{book.year:4d}|\n"
    return row + f"||{book.subtype:1d}|\n"


def format_books(books: list[Book]) -> str:
    """Render the whole list with its position in front of each row."""
    rows = (f"|{index:2d}" + format_book(book) for index, book in enumerate(books))
    return BOOKS_HEADER + "".join(rows)


def format_keys(keys: list[tuple[int, int]]) -> str:
    """Render the key table of ``(index, pages)`` pairs."""
    rows = (
        f"|{position:2d}|{index:13d}|{pages:12d}|\n"
        for position, (index, pages) in enumerate(keys)
    )
    return KEYS_HEADER + "".join(rows)


def format_books_by_keys(books: list[Book], keys: list[tuple[int, int]]) -> str:
    """Render the books in the order given by the key table."""
    rows = (f"|{index:2d}" + format_book(books[index]) for index, _ in keys)
    return BOOKS_HEADER + "".join(rows)