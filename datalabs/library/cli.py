"""Interactive command loop over a literature list."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from .benchmark import BENCHMARK_FILE, format_comparison, measure_file
from .books import (
    AMOUNT,
    AUTHOR_LEN,
    FIELD_LEN,
    MAX_PAGES,
    MAX_YEAR,
    MIN_PAGES,
    MIN_YEAR,
    NAME_LEN,
    PUB_LEN,
    Book,
    BookFormatError,
    Literature,
    build_key_table,
    delete_by_author,
    domestic_technical,
    read_books,
)
from .render import format_book, format_books, format_books_by_keys, format_keys
from .sorting import (
    bubble_sort_books,
    bubble_sort_keys,
    quick_sort_books,
    quick_sort_keys,
)

LITERATURE_FILE = "literature.txt"

_INT_LINE = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)

_NO_LIST = "ERROR: don't have an existing list of literature yet\n"
_EMPTY_KEYS = "ERROR: the current table of keys is empty\n"
_EMPTY_LIST = "ERROR: the current list of literature is empty\n"
_CLEAN_FIRST = (
    "ERROR: first clean the existing in the program\n"
    'list of literature and key table by command "clean"\n'
)


def main_information() -> str:
    """Describe the records the program keeps and their ranges."""
    return (
        f"This program works with a list of literature (up to {AMOUNT} records),"
        " each record contains:\n\n"
        f"-author surname (up to {AUTHOR_LEN} symbols);\n"
        f"-book name (up to {NAME_LEN} symbols);\n"
        f"-publishing house (up to {PUB_LEN} symbols);\n"
        f"-number of pages (from {MIN_PAGES} to {MAX_PAGES});\n"
        "-type of literature: (1 or 2 or 3)\n"
        "    1 - technical\n"
        f"        field (up to {FIELD_LEN} symbols);\n"
        "        origin: (1 or 2)\n"
        "            1 - domestic\n"
        "            2 - translated;\n"
        f"        year of publishing (from {MIN_YEAR} to {MAX_YEAR});\n"
        "    2 - fiction\n"
        "        type: (1 or 2 or 3)\n"
        "            1 - novel\n"
        "            2 - play\n"
        "            3 - poems;\n"
        "    3 - childish\n"
        "        type: (1 or 2)\n"
        "            1 - fairytale\n"
        "            2 - poems;\n\n"
    )


def commands_help() -> str:
    """List the commands the loop understands."""
    return (
        "Interaction with the program is carried out via the command line using only English.\n"
        'Symbol "$" means that the program is waiting for your command.\n\n'
        "Possible commands:\n"
        "help             |show information about the program and a list of possible commands;\n"
        "how              |show the information about the range of input values;\n\n"
        "amount           |show the amount of records in the existing literature list;\n\n"
        "clean            |clean the existing in the program list of literature;\n"
        "delete           |delete records by a value of author surname;\n\n"
        f"input_prepared   |import the prepared list of literature from file {LITERATURE_FILE};\n"
        "input_my         |input your own list of literature;\n"
        "input_one        |add one book to the end of the existing list of literature;\n\n"
        "show_compare     |show a comparative table of the efficiency of using different sorting\n"
        "                  algoriythms and approaches;\n"
        "show_tech        |show the list of domestic technical literature on the specified field;\n"
        "show_key_table   |show the current state of the table of keys;\n"
        "show_main_table  |show the current state of the list of literature;\n\n"
        "sort_main_bubble |sort and show the list of literature by inc. of number"
        ' of pages using "bubble" algorythm;\n'
        "sort_main_quick  |sort and show the list of literature by inc. of number"
        ' of pages using "quick" algorythm;\n'
        "sort_key_bubble  |show the list of literature in sorted form by sorting key table by inc. of\n"
        '                  number of pages using "bubble" algorythm;\n'
        "sort_key_quick   |show the list of literature in sorted form by sorting key table by inc. of\n"
        '                  number of pages using "quick" algorythm;\n'
        "exit             |exit the program\n\n"
    )


class Session:
    """A literature list, its key table and the commands that work on them."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        literature_path: str = LITERATURE_FILE,
        benchmark_path: str = BENCHMARK_FILE,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.literature_path = literature_path
        self.benchmark_path = benchmark_path
        self.books: list[Book] = []
        self.keys: list[tuple[int, int]] = []
        self._commands = {
            "help": self._help,
            "how": self._how,
            "amount": self._amount,
            "clean": self._clean,
            "delete": self._delete,
            "input_prepared": self._input_prepared,
            "input_my": self._input_my,
            "input_one": self._input_one,
            "show_compare": self._show_compare,
            "show_tech": self._show_tech,
            "show_key_table": self._show_key_table,
            "show_main_table": self._show_main_table,
            "sort_main_bubble": self._sort_main_bubble,
            "sort_main_quick": self._sort_main_quick,
            "sort_key_bubble": self._sort_key_bubble,
            "sort_key_quick": self._sort_key_quick,
        }

    # input helpers

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _read(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _ask_text(self, prompt: str, limit: int, what: str) -> str:
        self._write(prompt)
        line = self._read()
        if not line or len(line) > limit:
            raise BookFormatError(f"ERROR: couldn't read {what}")
        return line

    def _ask_int(self, prompt: str, low: int, high: int, what: str) -> int:
        self._write(prompt)
        match = _INT_LINE.fullmatch(self._read())
        if match is None or not low <= int(match.group(1)) <= high:
            raise BookFormatError(f"ERROR: couldn't read {what}")
        return int(match.group(1))

    # the loop

    def run(self) -> None:
        """Read and carry out commands until ``exit`` or the end of input."""
        while True:
            self._write("\n$ ")
            try:
                if not self.handle(self._read()):
                    break
            except EOFError:
                break
        self._write("\nExited the program\n")

    def handle(self, command: str) -> bool:
        """Carry out one command; return False when the loop should stop."""
        if command == "exit":
            return False
        action = self._commands.get(command)
        if action is None:
            self._write("ERROR: unknown command\n")
            self._write(commands_help())
        else:
            action()
        return True

    def prompt_book(self) -> Book:
        """Ask for every field of one record; raise BookFormatError on bad input."""
        author = self._ask_text(
            f"Input author surname (up to {AUTHOR_LEN} symbols): ", AUTHOR_LEN,
            "author surname",
        )
        title = self._ask_text(
            f"Input book name (up to {NAME_LEN} symbols): ", NAME_LEN, "book name"
        )
        publisher = self._ask_text(
            f"Input publishing house (up to {PUB_LEN} symbols): ", PUB_LEN,
            "publishing house",
        )
        pages = self._ask_int(
            f"Input number of pages (from {MIN_PAGES} to {MAX_PAGES}): ",
            MIN_PAGES, MAX_PAGES, "amount of pages",
        )
        self._write("1 - technical, 2 - fiction, 3 - childish\n")
        kind = Literature(
            self._ask_int("Input type of literature (1 or 2 or 3): ", 1, 3,
                          "type of literature")
        )
        book = Book(author, title, publisher, pages, kind)
        if kind is Literature.TECHNICAL:
            book.field = self._ask_text(
                f"Input field (up to {FIELD_LEN} symbols): ", FIELD_LEN, "field"
            )
            self._write("1 - domestic, 2 - translated\n")
            book.origin = self._ask_int("Input origin (1 or 2): ", 1, 2, "origin")
            book.year = self._ask_int(
                f"Input year of publishing (from {MIN_YEAR} to {MAX_YEAR}): ",
                MIN_YEAR, MAX_YEAR, "year",
            )
        elif kind is Literature.FICTION:
            self._write("1 - novel, 2 - play, 3 - poems\n")
            book.subtype = self._ask_int(
                "Input type of fictional literature (1 or 2 or 3): ", 1, 3,
                "type of fictional",
            )
        else:
            self._write("1 - fairytale, 2 - poems\n")
            book.subtype = self._ask_int(
                "Input type of childish literature (1 or 2): ", 1, 2,
                "type of childish",
            )
        return book

    # commands

    def _help(self) -> None:
        self._write(main_information() + commands_help())

    def _how(self) -> None:
        self._write(main_information())

    def _amount(self) -> None:
        self._write(
            f"The existing list of literature contains {len(self.books)} records\n"
        )

    def _clean(self) -> None:
        if not self.books:
            self._write(_NO_LIST)
            return
        self.books.clear()
        self.keys.clear()

    def _delete(self) -> None:
        if not self.books:
            self._write(_NO_LIST)
            return
        try:
            author = self._ask_text(
                f"Input author surname (up to {AUTHOR_LEN} symbols): ", AUTHOR_LEN,
                "author surname",
            )
        except BookFormatError as error:
            self._write(f"{error}\n")
            return
        deleted = delete_by_author(self.books, author)
        self.keys = build_key_table(self.books)
        if deleted:
            self._write(
                f"Deleted {deleted} records. {len(self.books)} records are left in the list\n"
            )
        else:
            self._write("ERROR: no one match was found\n")

    def _input_prepared(self) -> None:
        if self.books:
            self._write(_CLEAN_FIRST)
            return
        try:
            stream = open(self.literature_path, encoding="utf-8")
        except OSError:
            self._write(f"ERROR: couldn't open {LITERATURE_FILE}\n")
            return
        with stream:
            try:
                books = read_books(stream)
            except BookFormatError as error:
                self._write(f"{error}\n")
                return
        self.books = books
        self.keys = build_key_table(books)
        self._write(f"Successfully read {len(books)} elements of list\n")

    def _input_my(self) -> None:
        if self.books:
            self._write(_CLEAN_FIRST)
            return
        self._write(f"How many records will be in your list (up to {AMOUNT})?\n")
        match = _INT_LINE.fullmatch(self._read())
        if match is None or not 1 <= int(match.group(1)) <= AMOUNT:
            self._write("ERROR: incorrect amount\n")
            return
        books: list[Book] = []
        for _ in range(int(match.group(1))):
            while True:
                try:
                    books.append(self.prompt_book())
                    break
                except BookFormatError as error:
                    self._write(f"{error}\n")
                    self._write(
                        "This record wasn't added. Try to input it one more time\n"
                    )
            self._write("\nThis record was successfully added\n")
        self.books = books
        self.keys = build_key_table(books)
        self._write(f"{len(books)} records were successfully added\n")

    def _input_one(self) -> None:
        if not self.books:
            self._write(_NO_LIST)
            return
        if len(self.books) == AMOUNT:
            self._write(f"ERROR: will get more than {AMOUNT} records\n")
            return
        try:
            book = self.prompt_book()
        except BookFormatError as error:
            self._write(f"{error}\n")
            return
        self.keys.append((len(self.books), book.pages))
        self.books.append(book)
        self._write("This record was successfully added\n")

    def _show_compare(self) -> None:
        try:
            timings = measure_file(self.benchmark_path)
        except BookFormatError as error:
            self._write(f"{error}\n")
        except OSError:
            pass
        else:
            self._write(format_comparison(timings, timings.records))
            return
        self._write('ERROR: couldn\'t execute "show_compare"\n')

    def _show_tech(self) -> None:
        if not self.books:
            self._write(_EMPTY_KEYS)
            return
        try:
            field = self._ask_text(
                f"Input field (up to {FIELD_LEN} symbols): ", FIELD_LEN, "field"
            )
        except BookFormatError as error:
            self._write(f"{error}\n")
            return
        found = domestic_technical(self.books, field)
        if not found:
            self._write("ERROR: no such books found\n")
        for book in found:
            self._write(format_book(book))

    def _show_key_table(self) -> None:
        if not self.books:
            self._write(_EMPTY_KEYS)
            return
        self._write("Current table of keys\n" + format_keys(self.keys))

    def _show_main_table(self) -> None:
        if not self.books:
            self._write(_EMPTY_LIST)
            return
        self._write("Current list of literature\n" + format_books(self.books))

    def _sort_main(self, sorter) -> None:
        if not self.books:
            self._write(_EMPTY_LIST)
            return
        sorter(self.books)
        self.keys = build_key_table(self.books)
        self._write("Current list of literature\n" + format_books(self.books))

    def _sort_keys(self, sorter) -> None:
        if not self.books:
            self._write(_EMPTY_LIST)
            return
        sorter(self.keys)
        self._write("Current table of keys\n" + format_keys(self.keys))
        self._write(
            "form of list of literature\n" + format_books_by_keys(self.books, self.keys)
        )

    def _sort_main_bubble(self) -> None:
        self._sort_main(bubble_sort_books)

    def _sort_main_quick(self) -> None:
        self._sort_main(quick_sort_books)

    def _sort_key_bubble(self) -> None:
        self._sort_keys(bubble_sort_keys)

    def _sort_key_quick(self) -> None:
        self._sort_keys(quick_sort_keys)


def main(argv=None) -> int:
    """Start the interactive literature list."""
    parser = argparse.ArgumentParser(
        prog="library", description="Keep and sort a list of literature."
    )
    parser.add_argument("--literature", default=LITERATURE_FILE,
                        help="file read by input_prepared")
    parser.add_argument("--benchmark", default=BENCHMARK_FILE,
                        help="file used by show_compare")
    args = parser.parse_args(argv)
    session = Session(literature_path=args.literature, benchmark_path=args.benchmark)
    session.stdout.write(main_information() + commands_help())
    session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())