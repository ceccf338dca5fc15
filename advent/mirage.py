"""Extrapolating sensor histories by repeated differences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def next_value(values: Sequence[int]) -> int:
    """Extrapolate the value that follows the sequence."""
    row = list(values)
    if not row:
        raise ValueError("cannot extrapolate an empty history")
    total = 0
    while any(row):
        total += row[-1]
        row = [after - before for before, after in pairwise(row)]
    return total


def previous_value(values: Sequence[int]) -> int:
    """Extrapolate the value that comes before the sequence."""
    return next_value(list(reversed(values)))


def _histories(lines: Iterable[str]) -> list[list[int]]:
    return [[int(field) for field in line.split()] for line in lines if line.strip()]


def sum_next(lines: Iterable[str]) -> int:
    """Sum the next values of every history line."""
    return sum(next_value(history) for history in _histories(lines))


def sum_previous(lines: Iterable[str]) -> int:
    """Sum the previous values of every history line."""
    return sum(previous_value(history) for history in _histories(lines))