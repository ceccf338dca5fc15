"""Comparing two columns of location IDs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def parse_lists(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated numbers into a left and right list."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise ValueError(f"expected two numbers: {line!r}")
        try:
            first, second = int(fields[0]), int(fields[1])
        except ValueError:
            raise ValueError(f"expected two numbers: {line!r}") from None
        left.append(first)
        right.append(second)
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Pair the lists smallest to smallest and sum the distances of each pair."""
    if len(left) != len(right):
        raise ValueError("both lists must hold the same number of locations")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left number times how often it appears in the right list."""
    counts = Counter(right)
    return sum(number * counts[number] for number in left)