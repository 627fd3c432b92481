# datalabs

Three small console programs built around classic data-structure exercises.
There are no runtime dependencies beyond the Python standard library
(Python 3.10 or newer).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Dividing a long real number by a long integer

```
datalabs-bigdiv
```

The program reads two lines from standard input: a real number in the form
`S1m.nES2K` and then an integer in the form `Sd`.

* `S1` is the sign of the mantissa and must be given; `S2` is the sign of
  the exponent and may be left out;
* the mantissa holds up to 30 significant digits;
* the exponent `K` is in the range -99999 to 99999; `e` and `E` are both
  accepted;
* the integer has a mandatory sign and up to 30 significant digits.

For example:

```
-123456789012345.678901234567890E-12345
+123456789012345678901234567890
```

The quotient is computed by long division on a 31-digit working mantissa,
rounded to 30 significant digits and printed in normalised form
`S0.mantissaEorder`. On a bad input or an unrepresentable result the program
prints the reason (missing sign, too many digits, unknown symbol, bad
exponent, no significant digits, division by zero, machine zero, exponent
overflow, empty input) and exits with a negative status code.

The same steps are available from Python in `datalabs.bigdiv`:
`parse_real`, `parse_integer`, `normalize`, `divide`, `round_mantissa` and
`format_real`, working on the frozen dataclasses `RealNumber` and
`IntegerNumber`. Failures raise `DivisionError`; its `kind` attribute is an
`ErrorKind` whose value is the exit code and whose `message` is the text
printed.

```python
from datalabs.bigdiv import parse_real, parse_integer, divide, round_mantissa, normalize, format_real

result = normalize(round_mantissa(divide(parse_real("+1"), parse_integer("+3"))))
print(format_real(result))   # +0.333333333333333333333333333333E0
```

## Literature catalogue

```
datalabs-library [--literature PATH] [--benchmark PATH]
```

An interactive session over a list of up to 5000 books. Each record holds an
author surname, a title and a publishing house (up to 25 characters each), a
page count (1 to 9999) and a kind of literature: technical (field of up to
15 characters, origin 1 domestic or 2 translated, year 0 to 2100), fiction
(1 novel, 2 play, 3 poems) or children's (1 fairy tale, 2 poems). Alongside
the list the session keeps a key table of `(record index, page count)` pairs.

`--literature` names the file read by `input_prepared` (default
`literature.txt`), `--benchmark` the file used by `show_compare` (default
`5000_books.txt`). Both are plain text: for each record the author, title and
publisher on lines of their own, then the page count and the kind, then
field, origin and year for a technical book or the subtype otherwise.

At the `$` prompt, type one of:

| command            | effect |
|--------------------|--------|
| `help`             | show the description and this list of commands |
| `how`              | show the accepted ranges of values |
| `amount`           | show how many records are loaded |
| `clean`            | drop the current list and key table |
| `delete`           | ask for an author surname and delete every record by that author |
| `input_prepared`   | load the literature file (only when the list is empty) |
| `input_my`         | type in a new list record by record (only when the list is empty) |
| `input_one`        | append one typed record to the list |
| `show_compare`     | time the four sorting approaches on the benchmark file |
| `show_tech`        | ask for a field and list the domestic technical books in it |
| `show_key_table`   | show the key table |
| `show_main_table`  | show the list of books |
| `sort_main_bubble` | sort the books by page count with bubble sort |
| `sort_main_quick`  | sort the books by page count with the built-in sort |
| `sort_key_bubble`  | sort the key table with bubble sort and show the books in that order |
| `sort_key_quick`   | sort the key table with the built-in sort and show the books in that order |
| `exit`             | leave the program |

The session also ends at the end of input.

From Python:

* `datalabs.library.books` — `Book`, `Literature`, `read_books` (raises
  `BookFormatError`, whose `record` is the failing record's index),
  `build_key_table`, `delete_by_author` and `domestic_technical`;
* `datalabs.library.sorting` — `bubble_sort_books`, `bubble_sort_keys`,
  `quick_sort_books` and `quick_sort_keys`, all sorting in place by pages;
* `datalabs.library.render` — `format_book`, `format_books`, `format_keys`
  and `format_books_by_keys`;
* `datalabs.library.benchmark` — `measure` and `measure_file` return
  `Timings` in microseconds; `format_comparison` renders the memory and time
  table;
* `datalabs.library.cli.Session` — the command loop, with `run`, `handle` and
  `prompt_book`, reading and writing any text streams passed to it.

## Sparse matrix addition

```
datalabs-sparse [--seed N]
```

Enter the number of rows and columns, then for each of the two matrices the
count of non-zero elements and how to fill them: randomly (values `k + 0.1`
for `k` from 0 to 9, negated where row plus column is odd), or by hand as
`i j value` lines. Invalid answers are asked for again. `--seed` makes the
random filling repeatable.

The program prints both matrices and their sum in compressed row form
(vectors `A`, `JA`, `IA`, where `-1` in `IA` marks an empty row), also as an
ordinary table when both dimensions are at most 20, and compares the time
(in nanoseconds) and memory of ordinary and sparse addition.

From Python:

* `datalabs.sparse.matrix` — `SparseMatrix` (`from_dense`, `to_dense`,
  `amount`), `add_dense` and `add_sparse`; sums whose magnitude is at most
  `1e-6` are not stored;
* `datalabs.sparse.filling` — `random_positions`, `fill_random` and
  `parse_element` (raises `ElementError`);
* `datalabs.sparse.render` — `format_dense`, `format_sparse` and
  `format_matrix`;
* `datalabs.sparse.benchmark` — `measure_sum` returns a `Measurement`,
  `format_single` renders it, and `compare_fill_levels(n, low, high, step)`
  returns a comparison table across fill percentages for an `n` x `n`
  matrix.

## What is not included

The catalogue lives only for the length of a session: there is no command to
save the list back to a file. The sparse matrix program only adds matrices;
it offers no other matrix operations and does not read matrices from files.