"""Records of a literature list and reading them from a text file.

A file holds records one after another. Each record is an author surname,
a book name and a publishing house on lines of their own, then the number
of pages and the type of literature. A technical book then gives its field,
its origin and its year of publishing; a fiction or children's book gives its
subtype.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

AMOUNT = 5000
AUTHOR_LEN = 25
NAME_LEN = 25
PUB_LEN = 25
FIELD_LEN = 15

MIN_YEAR = 0
MAX_YEAR = 2100
MIN_PAGES = 1
MAX_PAGES = 9999

DOMESTIC = 1
TRANSLATED = 2

_INTEGER = re.compile(r"\s*([+-]?[0-9]+)\s*", re.ASCII)


class Literature(IntEnum):
    """Type of literature a book belongs to."""

    TECHNICAL = 1
    FICTION = 2
    CHILDISH = 3


@dataclass
class Book:
    """One record of the literature list.

    ``field``, ``origin`` and ``year`` describe technical books; ``subtype``
    is the kind of fiction (1 novel, 2 play, 3 poems) or of children's
    literature (1 fairytale, 2 poems).
    """

    author: str
    title: str
    publisher: str
    pages: int
    kind: Literature
    field: str = ""
    origin: int = 0
    year: int = 0
    subtype: int = 0


class BookFormatError(ValueError):
    """Raised when a literature file cannot be read; ``record`` is its index."""

    def __init__(self, message: str, record: int | None = None) -> None:
        super().__init__(message)
        self.record = record


class _Cursor:
    """Reads a text the way line-limited and integer reads walk a stream."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def line(self, limit: int) -> str | None:
        """Read at most ``limit`` characters up to and including a newline."""
        if self.at_end:
            return None
        end = min(self._pos + limit, len(self._text))
        newline = self._text.find("\n", self._pos, end)
        if newline != -1:
            end = newline + 1
        chunk = self._text[self._pos:end]
        self._pos = end
        return chunk[:-1] if chunk.endswith("\n") else chunk

    def integer(self) -> int | None:
        """Read an integer and skip the whitespace around it."""
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group(1))


def _failure(record: int, what: str) -> BookFormatError:
    return BookFormatError(
        f"ERROR in values in file literature.txt: {record} record, {what}", record
    )


def _text(cursor: _Cursor, limit: int, record: int, what: str) -> str:
    value = cursor.line(limit)
    if value is None:
        raise _failure(record, what)
    return value


def _number(cursor: _Cursor, low: int | None, high: int | None,
            record: int, what: str) -> int:
    value = cursor.integer()
    if value is None:
        raise _failure(record, what)
    if low is not None and value < low:
        raise _failure(record, what)
    if high is not None and value > high:
        raise _failure(record, what)
    return value


def _read_record(cursor: _Cursor, record: int) -> Book:
    author = _text(cursor, AUTHOR_LEN, record, "author surname")
    title = _text(cursor, NAME_LEN, record, "book name")
    publisher = _text(cursor, PUB_LEN, record, "publishing house")
    pages = _number(cursor, MIN_PAGES, MAX_PAGES, record, "amount of pages")
    kind = Literature(_number(cursor, 1, 3, record, "type of literature"))
    book = Book(author, title, publisher, pages, kind)
    if kind is Literature.TECHNICAL:
        book.field = _text(cursor, FIELD_LEN, record, "field")
        book.origin = _number(cursor, None, None, record, "origin")
        book.year = _number(cursor, MIN_YEAR, MAX_YEAR, record, "year")
    elif kind is Literature.FICTION:
        book.subtype = _number(cursor, 1, 3, record, "type of fictional")
    else:
        book.subtype = _number(cursor, 1, 2, record, "type of childish")
    return book


def read_books(stream: TextIO) -> list[Book]:
    """Read every record of a literature file; at most ``AMOUNT`` are allowed."""
    cursor = _Cursor(stream.read())
    books: list[Book] = []
    while not cursor.at_end:
        if len(books) == AMOUNT:
            raise BookFormatError(
                f"ERROR: too many records (> {AMOUNT}) were found in file"
            )
        books.append(_read_record(cursor, len(books)))
    if not books:
        raise BookFormatError("ERROR: file literature.txt is empty")
    return books


def build_key_table(books: list[Book]) -> list[tuple[int, int]]:
    """Pair each book's position in the list with its number of pages."""
    return [(index, book.pages) for index, book in enumerate(books)]


def delete_by_author(books: list[Book], author: str) -> int:
    """Remove, in place, every book by ``author``; return how many went."""
    wanted = author[:AUTHOR_LEN]
    kept = [book for book in books if book.author[:AUTHOR_LEN] != wanted]
    deleted = len(books) - len(kept)
    books[:] = kept
    return deleted


def domestic_technical(books: list[Book], field: str) -> list[Book]:
    """Return the domestic technical books on ``field``, in list order."""
    return [
        book
        for book in books
        if book.kind is Literature.TECHNICAL
        and book.field == field
        and book.origin == DOMESTIC
    ]