"""Small integer and arithmetic exercises: parity, digits, primes, swaps."""

from __future__ import annotations

import math
from collections.abc import Iterator

PI = 3.1416

_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
}


def _digits(n: int) -> Iterator[int]:
    """Yield the digits of ``n`` from least significant, each carrying the sign of ``n``."""
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    while remaining:
        remaining, digit = divmod(remaining, 10)
        yield sign * digit


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def is_even(n: int) -> bool:
    """Return True when ``n`` is divisible by two."""
    return n % 2 == 0


def larger(a: int, b: int) -> int:
    """Return the larger of two numbers (``b`` when they are equal)."""
    return a if a > b else b


def sign_label(n: int) -> str:
    """Describe the sign of ``n`` as 'Positive', 'Negative' or 'Zero'."""
    if n > 0:
        return "Positive"
    if n < 0:
        return "Negative"
    return "Zero"


def circle_area(radius: float) -> float:
    """Return the area of a circle, using 3.1416 for pi."""
    return PI * radius * radius


def swap(a, b):
    """Return the two values exchanged."""
    return b, a


def arithmetic_swap(a: int, b: int) -> tuple[int, int]:
    """Exchange two numbers using only addition and subtraction."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Exchange two integers using bitwise exclusive or."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def calculate(op: str, a: float, b: float) -> float:
    """Apply one of ``+ - * /`` to two numbers.

    Raises ValueError for an unknown operator and ZeroDivisionError when
    dividing by zero.
    """
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError("Invalid operator") from None
    if op == "/" and b == 0:
        raise ZeroDivisionError("Division by zero not allowed")
    return float(operation(a, b))


def sum_natural(n: int) -> int:
    """Return 1 + 2 + ... + n (0 when ``n`` is below 1)."""
    return sum(range(1, n + 1))


def factorial(n: int) -> int:
    """Return n! (1 when ``n`` is below 1)."""
    return math.prod(range(1, n + 1))


def multiplication_table(n: int) -> list[str]:
    """Return the ten lines 'n x i = n*i' for i from 1 to 10."""
    return [f"{n} x {i} = {n * i}" for i in range(1, 11)]


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting from 0."""
    terms = []
    current, following = 0, 1
    for _ in range(n):
        terms.append(current)
        current, following = following, current + following
    return terms


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    result = 0
    for digit in _digits(n):
        result = result * 10 + digit
    return result


def is_palindrome_number(n: int) -> bool:
    """Return True when ``n`` reads the same reversed."""
    return reverse_number(n) == n


def is_armstrong(n: int) -> bool:
    """Return True when ``n`` equals the sum of its digits raised to the digit count."""
    digits = list(_digits(n))
    power = len(digits)
    return sum(digit**power for digit in digits) == n


def count_digits(n: int) -> int:
    """Count the decimal digits of ``n``; zero has none."""
    return sum(1 for _ in _digits(n))


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of ``n``, signed like ``n``."""
    return sum(_digits(n))


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def to_binary(n: int) -> str:
    """Return the binary representation of a non-negative integer."""
    if n < 0:
        raise ValueError("expected a non-negative integer")
    return format(n, "b")


def sieve(n: int) -> list[int]:
    """Return all primes up to and including ``n`` (which must be at least 2)."""
    if n < 2:
        raise ValueError("n must be at least 2")
    flags = [False, False] + [True] * (n - 1)
    for p in range(2, math.isqrt(n) + 1):
        if flags[p]:
            flags[p * p :: p] = [False] * len(range(p * p, n + 1, p))
    return [value for value, prime in enumerate(flags) if prime]