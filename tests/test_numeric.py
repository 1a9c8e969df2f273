import pytest
from hypothesis import given
from hypothesis import strategies as st

from algorium.numeric import (
    fahrenheit_table,
    gradient,
    is_prime,
    sum_below,
    weekday_name,
)


def test_source_prime():
    assert is_prime(137)


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_primes(n):
    assert is_prime(n)


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 25, 49])
def test_non_primes(n):
    assert not is_prime(n)


@given(st.integers(2, 200), st.integers(2, 200))
def test_products_are_composite(a, b):
    assert not is_prime(a * b)


@given(
    st.integers(-100, 100),
    st.integers(-100, 100),
    st.integers(1, 50),
    st.integers(-20, 20),
)
def test_gradient_of_known_slope(x, y, dx, k):
    assert gradient((x, y), (x + dx, y + k * dx)) == k


def test_gradient_vertical():
    with pytest.raises(ZeroDivisionError):
        gradient((3, 1), (3, 9))


def test_boiling_point():
    assert fahrenheit_table(212, 213, 1) == [(212, 100)]


def test_celsius_truncates_towards_zero():
    assert fahrenheit_table(0, 1, 1) == [(0, -17)]


@given(st.integers(-100, 300), st.integers(-100, 300), st.integers(1, 30))
def test_fahrenheit_column(start, end, step):
    table = fahrenheit_table(start, end, step)
    assert [f for f, _ in table] == list(range(start, end, step))
    celsius = [c for _, c in table]
    assert celsius == sorted(celsius)


def test_fahrenheit_bad_step():
    with pytest.raises(ValueError):
        fahrenheit_table(0, 100, 0)


@given(st.integers(0, 1000))
def test_sum_below_steps(n):
    assert sum_below(n + 1) - sum_below(n) == n


def test_sum_below_non_positive():
    assert sum_below(0) == 0
    assert sum_below(-5) == 0


def test_weekday_names():
    assert weekday_name(1) == "Sunday"
    assert weekday_name(2) == "Monday"
    assert weekday_name(7) == "Saturday"


@pytest.mark.parametrize("day", [0, 8, -1])
def test_weekday_out_of_range(day):
    with pytest.raises(ValueError):
        weekday_name(day)