"""Reactor safety reports: gently and steadily rising or falling levels."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

MAX_STEP = 3


def is_safe(levels: Sequence[int]) -> bool:
    """All steps go the same way and change by one to three."""
    levels = list(levels)
    if not levels:
        raise ValueError("a report needs at least one level")
    diffs = [after - before for before, after in pairwise(levels)]
    return all(1 <= d <= MAX_STEP for d in diffs) or all(
        -MAX_STEP <= d <= -1 for d in diffs
    )


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """Safe as it is, or safe once any single level is removed."""
    levels = list(levels)
    if is_safe(levels):
        return True
    return any(
        is_safe(levels[:index] + levels[index + 1:]) for index in range(len(levels))
    )


def _reports(lines: Iterable[str]) -> list[list[int]]:
    try:
        return [[int(field) for field in line.split()] for line in lines if line.strip()]
    except ValueError:
        raise ValueError("reports must contain whole numbers only") from None


def count_safe(lines: Iterable[str]) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in _reports(lines))


def count_dampened(lines: Iterable[str]) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(is_safe_dampened(report) for report in _reports(lines))