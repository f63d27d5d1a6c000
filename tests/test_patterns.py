import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsasteps.patterns import square_pattern, times_table


def test_default_times_table_ends():
    table = times_table()
    assert len(table) == 10
    assert table[0] == "2*1=2"
    assert table[-1] == "2*10=20"


@given(st.integers(min_value=-50, max_value=50), st.integers(min_value=0, max_value=30))
def test_times_table_lines_are_consistent(factor, upto):
    table = times_table(factor, upto)
    assert len(table) == upto
    for index, line in enumerate(table, start=1):
        left, product = line.rsplit("=", 1)
        head, multiplier = left.rsplit("*", 1)
        assert int(head) == factor
        assert int(multiplier) == index
        assert int(product) == factor * index


def test_times_table_empty_when_upto_zero():
    assert times_table(3, 0) == []


@given(st.integers(min_value=0, max_value=40))
def test_square_pattern_is_square(n):
    rows = square_pattern(n)
    assert len(rows) == n
    assert all(row == "*" * n for row in rows)


@pytest.mark.parametrize("symbol", ["#", "@", "x"])
def test_square_pattern_custom_symbol(symbol):
    rows = square_pattern(3, symbol)
    assert rows == [symbol * 3] * 3


def test_square_pattern_negative_is_empty():
    assert square_pattern(-2) == []