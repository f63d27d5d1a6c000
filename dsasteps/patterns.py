"""Printable text patterns: multiplication tables and star squares."""

from __future__ import annotations


def times_table(factor: int = 2, upto: int = 10) -> list[str]:
    """Return lines ``factor*i=product`` for i from 1 to ``upto``."""
    return [f"{factor}*{i}={factor * i}" for i in range(1, upto + 1)]


def square_pattern(n: int, symbol: str = "*") -> list[str]:
    """Return ``n`` rows, each holding ``symbol`` repeated ``n`` times."""
    size = max(n, 0)
    return [symbol * size for _ in range(size)]