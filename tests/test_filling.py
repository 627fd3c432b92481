import random

import pytest

from datalabs.sparse.filling import (
    ElementError,
    fill_random,
    parse_element,
    random_positions,
)


@pytest.mark.parametrize("count", [0, 1, 2, 17, 100])
def test_random_positions_is_a_permutation(count):
    positions = random_positions(count, random.Random(3))
    assert sorted(positions) == list(range(count))


def test_random_positions_repeat_with_same_seed():
    first = random_positions(50, random.Random(9))
    second = random_positions(50, random.Random(9))
    assert len(first) == 50
    assert sorted(first) == list(range(50))
    assert first == second
    assert first != list(range(50))


@pytest.mark.parametrize("rows,cols,amount", [(1, 1, 1), (3, 4, 5), (5, 5, 25), (4, 2, 0)])
def test_fill_random_places_amount_elements(rows, cols, amount):
    dense = fill_random(rows, cols, amount, random.Random(1))
    assert len(dense) == rows
    assert all(len(row) == cols for row in dense)
    assert sum(1 for row in dense for v in row if v != 0.0) == amount


def test_fill_random_values_and_signs():
    dense = fill_random(6, 6, 30, random.Random(5))
    for r, row in enumerate(dense):
        for c, value in enumerate(row):
            if value:
                assert (value > 0) == ((r + c) % 2 == 0)
                magnitude = abs(value) - 0.1
                assert abs(magnitude - round(magnitude)) < 1e-9
                assert 0 <= round(magnitude) <= 9


def test_fill_random_refuses_too_many():
    with pytest.raises(ValueError):
        fill_random(2, 2, 5, random.Random(0))
    with pytest.raises(ValueError):
        fill_random(0, 2, 0, random.Random(0))


def test_parse_element_accepts_valid_line():
    dense = [[0.0] * 3 for _ in range(3)]
    assert parse_element("1 2 3.5\n", dense) == (1, 2, 3.5)
    assert dense[1][2] == 0.0


@pytest.mark.parametrize(
    "line,pattern",
    [
        ("x y z", "can't read"),
        ("1 2", "can't read"),
        ("1 2 3 4", "can't read"),
        ("5 0 1.0", "number of row"),
        ("-1 0 1.0", "number of row"),
        ("0 3 1.0", "number of column"),
        ("1 1 1.0", "already added"),
        ("0 0 0", "can't be null"),
    ],
)
def test_parse_element_errors(line, pattern):
    dense = [[0.0, 0.0, 0.0], [0.0, 4.0, 0.0]]
    with pytest.raises(ElementError, match=pattern):
        parse_element(line, dense)