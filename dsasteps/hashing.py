"""Frequency counting with fixed-size tables and with maps."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable


class FrequencyError(ValueError):
    """Raised when a value does not fit the counting table it is meant for."""


def count_small_numbers(values: Iterable[int], limit: int = 13) -> list[int]:
    """Count integers in ``range(limit)``; the result is indexed by the value."""
    counts = [0] * limit
    for value in values:
        if not 0 <= value < limit:
            raise FrequencyError(f"{value} is outside the table range 0..{limit - 1}")
        counts[value] += 1
    return counts


def count_lowercase(text: str) -> dict[str, int]:
    """Count each letter a-z in ``text``; every letter appears in the result."""
    counts = dict.fromkeys(string.ascii_lowercase, 0)
    for ch in text:
        if ch not in counts:
            raise FrequencyError(f"{ch!r} is not a lowercase letter a-z")
        counts[ch] += 1
    return counts


def count_characters(text: str) -> Counter[str]:
    """Count every character of ``text``, which must fit in a single byte."""
    for ch in text:
        if ord(ch) > 0xFF:
            raise FrequencyError(f"{ch!r} does not fit in a 256-entry table")
    return Counter(text)


def count_numbers(values: Iterable[int]) -> Counter[int]:
    """Count occurrences of arbitrary integers."""
    return Counter(values)