import calendar
import math

import pytest

from drillbook.numbers import (
    add,
    arithmetic_swap,
    calculate,
    circle_area,
    count_digits,
    factorial,
    fibonacci,
    is_armstrong,
    is_even,
    is_leap_year,
    is_palindrome_number,
    is_prime,
    larger,
    multiplication_table,
    reverse_number,
    sieve,
    sign_label,
    sum_natural,
    sum_of_digits,
    swap,
    to_binary,
    xor_swap,
)


@pytest.mark.parametrize("a,b", [(2, 3), (-4, 9), (0, 0), (100, -100)])
def test_add_is_commutative_with_identity(a, b):
    assert add(a, b) == add(b, a)
    assert add(a, 0) == a


def test_is_even_alternates():
    assert is_even(0)
    assert not is_even(-3)
    for n in range(-20, 20):
        assert is_even(n) != is_even(n + 1)


@pytest.mark.parametrize("a,b,expected", [(3, 9, 9), (9, 3, 9), (5, 5, 5), (-2, -7, -2)])
def test_larger(a, b, expected):
    assert larger(a, b) == expected


@pytest.mark.parametrize(
    "n,label", [(5, "Positive"), (-5, "Negative"), (0, "Zero")]
)
def test_sign_label(n, label):
    assert sign_label(n) == label


def test_circle_area_uses_fixed_pi():
    assert circle_area(1) == pytest.approx(3.1416)
    assert circle_area(2) == pytest.approx(4 * circle_area(1))
    assert circle_area(0) == 0


@pytest.mark.parametrize("swapper", [swap, arithmetic_swap, xor_swap])
@pytest.mark.parametrize("a,b", [(3, 7), (-5, 12), (0, 0), (42, 42)])
def test_swaps_exchange_values(swapper, a, b):
    assert swapper(a, b) == (b, a)


def test_is_leap_year_matches_calendar():
    for year in range(1, 2500):
        assert is_leap_year(year) == calendar.isleap(year)


def test_calculate_operations():
    assert calculate("+", 1.5, 2.5) == calculate("+", 2.5, 1.5)
    assert calculate("-", 7, 3) == -calculate("-", 3, 7)
    assert calculate("*", 6.5, 1) == 6.5
    assert calculate("/", 9, 1) == 9
    assert calculate("/", 9, 3) * 3 == pytest.approx(9)


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="Division by zero not allowed"):
        calculate("/", 4, 0)


def test_calculate_invalid_operator():
    with pytest.raises(ValueError, match="Invalid operator"):
        calculate("%", 4, 2)


def test_sum_natural():
    for n in range(0, 50):
        assert sum_natural(n) == n * (n + 1) // 2
    assert sum_natural(-5) == sum_natural(0)


def test_factorial():
    for n in range(0, 13):
        assert factorial(n) == math.factorial(n)
    assert factorial(-3) == factorial(0)


def test_multiplication_table():
    lines = multiplication_table(7)
    assert len(lines) == 10
    for i, line in enumerate(lines, start=1):
        left, right = line.split(" = ")
        base, factor = left.split(" x ")
        assert (int(base), int(factor)) == (7, i)
        assert int(right) == 7 * i


def test_fibonacci():
    assert fibonacci(0) == []
    terms = fibonacci(20)
    assert len(terms) == 20
    assert terms[:2] == [0, 1]
    for previous, current, following in zip(terms, terms[1:], terms[2:]):
        assert following == previous + current


def test_reverse_number():
    assert reverse_number(1200) == 21
    for n in [1, 12, 12345, 908070605]:
        assert reverse_number(reverse_number(n)) == n
        assert reverse_number(-n) == -reverse_number(n)
    assert reverse_number(0) == 0


def test_is_palindrome_number():
    assert is_palindrome_number(12321)
    assert is_palindrome_number(7)
    assert not is_palindrome_number(12345)
    assert not is_palindrome_number(10)


def test_is_armstrong():
    for n in [153, 370, 371, 407, 1634]:
        assert is_armstrong(n)
    for n in range(1, 10):
        assert is_armstrong(n)
    assert not is_armstrong(154)
    assert not is_armstrong(10)


def test_count_digits():
    assert count_digits(0) == 0
    for k in range(0, 15):
        assert count_digits(10**k) == k + 1
        assert count_digits(-(10**k)) == k + 1


def test_sum_of_digits():
    assert sum_of_digits(7) == 7
    for k in range(0, 10):
        assert sum_of_digits(10**k) == sum_of_digits(1)
    for n in [18, 12345, 99999, 40302]:
        assert sum_of_digits(n) % 9 == n % 9
        assert sum_of_digits(-n) == -sum_of_digits(n)


def test_is_prime_agrees_with_sieve():
    assert [n for n in range(-5, 200) if is_prime(n)] == sieve(199)
    assert not is_prime(1)
    assert not is_prime(0)


def test_to_binary_round_trip():
    assert to_binary(0) == "0"
    for n in [1, 2, 5, 255, 256, 2**31 - 1, 2**32 - 1]:
        assert int(to_binary(n), 2) == n
        assert to_binary(n).startswith("1")


def test_to_binary_negative():
    with pytest.raises(ValueError):
        to_binary(-1)


def test_sieve():
    assert sieve(2) == [2]
    primes = sieve(500)
    assert primes == sorted(set(primes))
    for p in primes:
        assert all(p % d for d in range(2, p))


@pytest.mark.parametrize("n", [1, 0, -10])
def test_sieve_rejects_small_limits(n):
    with pytest.raises(ValueError):
        sieve(n)