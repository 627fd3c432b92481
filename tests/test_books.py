import io

import pytest

from datalabs.library.books import (
    AMOUNT,
    Book,
    BookFormatError,
    Literature,
    build_key_table,
    delete_by_author,
    domestic_technical,
    read_books,
)

SAMPLE = (
    "Ivanov\nPhysics\nNauka\n300\n1\nphysics\n1\n1999\n"
    "Petrov\nNovel one\nEksmo\n120\n2\n3\n"
    "Sidorov\nTales\nDetgiz\n40\n3\n1\n"
)


def _read(text):
    return read_books(io.StringIO(text))


def test_reads_all_record_kinds():
    books = _read(SAMPLE)
    assert [b.author for b in books] == ["Ivanov", "Petrov", "Sidorov"]
    tech, fiction, child = books
    assert tech.kind is Literature.TECHNICAL
    assert (tech.title, tech.publisher, tech.pages) == ("Physics", "Nauka", 300)
    assert (tech.field, tech.origin, tech.year) == ("physics", 1, 1999)
    assert fiction.kind is Literature.FICTION and fiction.subtype == 3
    assert child.kind is Literature.CHILDISH and child.subtype == 1


def test_empty_file_is_rejected():
    with pytest.raises(BookFormatError, match="is empty"):
        _read("")


@pytest.mark.parametrize(
    "text, what",
    [
        ("A\nB\nC\n0\n2\n1\n", "amount of pages"),
        ("A\nB\nC\n10000\n2\n1\n", "amount of pages"),
        ("A\nB\nC\nmany\n2\n1\n", "amount of pages"),
        ("A\nB\nC\n10\n4\n1\n", "type of literature"),
        ("A\nB\nC\n10\n2\n4\n", "type of fictional"),
        ("A\nB\nC\n10\n3\n3\n", "type of childish"),
        ("A\nB\nC\n10\n1\nmath\n1\n2101\n", "year"),
        ("A\nB\nC\n10\n1\nmath\nx\n", "origin"),
        ("A\n", "book name"),
        ("A\nB\n", "publishing house"),
    ],
)
def test_bad_values_name_the_field(text, what):
    with pytest.raises(BookFormatError, match=what) as info:
        _read(text)
    assert info.value.record == 0


def test_error_reports_record_index():
    with pytest.raises(BookFormatError) as info:
        _read(SAMPLE + "Last\nName\nPub\n0\n2\n1\n")
    assert info.value.record == 3


def test_origin_is_not_range_checked():
    books = _read("A\nB\nC\n10\n1\nmath\n7\n2000\n")
    assert books[0].origin == 7


def test_overlong_line_spills_into_next_field():
    text = "A" * 26 + "\nTitle\nPub\n10\n2\n1\n"
    with pytest.raises(BookFormatError, match="amount of pages"):
        _read(text)
    books = _read("A" * 26 + "\nPub\n10\n2\n1\n")
    assert books[0].author == "A" * 25
    assert books[0].title == "A"
    assert books[0].publisher == "Pub"


def test_too_many_records():
    record = "A\nB\nC\n10\n2\n1\n"
    assert len(_read(record * AMOUNT)) == AMOUNT
    with pytest.raises(BookFormatError, match="too many"):
        _read(record * (AMOUNT + 1))


def test_key_table_pairs_index_and_pages():
    books = _read(SAMPLE)
    assert build_key_table(books) == [(i, b.pages) for i, b in enumerate(books)]


def test_delete_by_author_removes_all_matches():
    books = _read(SAMPLE + SAMPLE)
    assert delete_by_author(books, "Petrov") == 2
    assert [b.author for b in books] == ["Ivanov", "Sidorov", "Ivanov", "Sidorov"]
    assert delete_by_author(books, "Nobody") == 0
    assert len(books) == 4


def test_domestic_technical_filters_field_and_origin():
    books = [
        Book("A", "T1", "P", 10, Literature.TECHNICAL, "math", 1, 2000),
        Book("B", "T2", "P", 10, Literature.TECHNICAL, "math", 2, 2000),
        Book("C", "T3", "P", 10, Literature.TECHNICAL, "chem", 1, 2000),
        Book("D", "T4", "P", 10, Literature.FICTION, subtype=1),
    ]
    found = domestic_technical(books, "math")
    assert [b.author for b in found] == ["A"]
    assert domestic_technical(books, "bio") == []