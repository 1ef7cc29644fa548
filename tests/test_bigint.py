import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.bigint import add, larger, multiply, remainder, subtract, to_int

naturals = st.integers(min_value=0, max_value=10**40)


def test_multiply_source_example():
    assert multiply("656545", "455") == str(656545 * 455)


def test_remainder_source_example():
    assert remainder("50", 6) == 2


def test_add_keeps_leading_zeros():
    assert add("007", "1") == "008"


def test_subtract_with_chained_borrow():
    assert subtract("100", "1") == str(100 - 1)


def test_subtract_equal_is_zero():
    assert subtract("123", "123") == "0"


def test_multiply_by_zero_strips_zeros():
    assert multiply("000", "98765") == "0"


def test_larger_equal_values_with_padding():
    assert larger("007", "7") is None


def test_larger_returns_original_string():
    assert larger("9", "10") == "10"
    assert larger("10", "9") == "10"


@given(naturals, naturals)
def test_add_matches_int(x, y):
    assert add(str(x), str(y)) == str(x + y)


@given(naturals, naturals)
def test_subtract_matches_int(x, y):
    assert subtract(str(x), str(y)) == str(x - y)


@given(naturals, naturals)
def test_multiply_matches_int(x, y):
    assert multiply(str(x), str(y)) == str(x * y)


@given(naturals, st.integers(min_value=1, max_value=10**12))
def test_remainder_matches_int(x, y):
    assert remainder(str(x), y) == x % y


@given(naturals, naturals)
def test_larger_agrees_with_ordering(x, y):
    result = larger(str(x), str(y))
    if x == y:
        assert result is None
    else:
        assert result == str(max(x, y))


@given(naturals)
def test_to_int_round_trip(x):
    assert to_int(str(x)) == x


@pytest.mark.parametrize("func", [add, subtract, multiply, larger])
@pytest.mark.parametrize("bad", ["", "12a", "-5", " 1"])
def test_rejects_non_digit_strings(func, bad):
    with pytest.raises(ValueError):
        func(bad, "1")


def test_to_int_rejects_empty():
    with pytest.raises(ValueError):
        to_int("")


def test_remainder_by_zero():
    with pytest.raises(ZeroDivisionError):
        remainder("5", 0)


def test_remainder_by_negative():
    with pytest.raises(ValueError):
        remainder("5", -3)