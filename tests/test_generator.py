"""
Tests for multiplication table generation
"""

import types

import pytest

from tablegen.models.schemas import TableFormat, TableOrder, TableRequest
from tablegen.services.generator import generate_for_request, generate_table, multiply


VALUES = range(1, 11)


@pytest.mark.parametrize("base", VALUES)
def test_products_are_exact(base):
    rows = list(generate_table(base, 1, 10))

    assert [m for m, _ in rows] == list(VALUES)
    for multiplier, product in rows:
        assert product == base * multiplier


@pytest.mark.parametrize(
    "start,end",
    [(s, e) for s in VALUES for e in VALUES if s <= e],
)
def test_partial_range_covers_closed_interval(start, end):
    rows = list(generate_table(3, start, end))

    assert len(rows) == end - start + 1
    assert [m for m, _ in rows] == list(range(start, end + 1))


@pytest.mark.parametrize("start,end", [(1, 10), (4, 7), (5, 5), (9, 10)])
def test_descending_is_reverse_of_ascending(start, end):
    ascending = list(generate_table(7, start, end, TableOrder.ASCENDING))
    descending = list(generate_table(7, start, end, TableOrder.DESCENDING))

    assert ascending == list(reversed(descending))
    assert descending[0][0] == end
    assert descending[-1][0] == start


def test_generator_is_lazy():
    rows = generate_table(2, 1, 10)

    assert isinstance(rows, types.GeneratorType)
    assert next(rows) == (1, 2)
    assert next(rows) == (2, 4)


def test_single_row_range():
    assert list(generate_table(9, 10, 10, TableOrder.DESCENDING)) == [(10, 90)]


def test_generate_for_request_uses_request_fields():
    request = TableRequest(
        base=4,
        range_start=2,
        range_end=4,
        format=TableFormat.BOXED,
        order=TableOrder.DESCENDING,
    )

    assert list(generate_for_request(request)) == [(4, 16), (3, 12), (2, 8)]


def test_multiply():
    assert multiply(6, 7) == 42
    assert multiply(10, 10) == 100
