"""Small recursive building blocks: factorials, Fibonacci numbers, counting and palindromes."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from typing import Any


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} is not defined for negative numbers: {n}")


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    _require_non_negative(n, "factorial")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _require_non_negative(n, "fibonacci")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def _fibonacci_stream() -> Iterator[int]:
    previous, current = 0, 1
    while True:
        yield previous
        previous, current = current, previous + current


def fibonacci_terms(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from 0."""
    if count <= 0:
        return []
    terms = []
    for term in _fibonacci_stream():
        terms.append(term)
        if len(terms) == count:
            return terms
    return terms


def fibonacci_series(n: int) -> list[int]:
    """Return the Fibonacci numbers from the 0th up to and including the n-th term."""
    _require_non_negative(n, "fibonacci series")
    return fibonacci_terms(n + 1)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways, ignoring case and non-alphanumerics."""
    letters = [ch.lower() for ch in text if ch.isalnum()]
    return letters == letters[::-1]


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse a mutable sequence in place."""
    values[:] = values[::-1]


def count_up(n: int) -> Iterator[int]:
    """Yield 1, 2, ..., n."""
    yield from range(1, n + 1)


def count_down(n: int) -> Iterator[int]:
    """Yield n, n - 1, ..., 1."""
    yield from range(n, 0, -1)


def repeat(text: str, n: int) -> Iterator[str]:
    """Yield ``text`` n times."""
    for _ in range(max(n, 0)):
        yield text


def sum_first_n(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    _require_non_negative(n, "sum of first n numbers")
    if n == 0:
        return 0
    return n + sum_first_n(n - 1)