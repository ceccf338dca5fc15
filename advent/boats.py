"""Boat races: how many button hold times beat the record."""

from __future__ import annotations

import math
from collections.abc import Sequence


def winning_margin(time: int, record: int) -> int:
    """Count whole numbers between the floored roots of h*(time-h) = record.

    The count is ``floor((t+sqrt(d))/2) - floor((t-sqrt(d))/2)`` with
    ``d = t*t - 4*record``, computed exactly; no roots means no margin.
    """
    disc = time * time - 4 * record
    if disc < 0:
        return 0
    root = math.isqrt(disc)
    exact = root * root == disc
    upper = (time + root) // 2
    lower = (time - root - (0 if exact else 1)) // 2
    return upper - lower


def margin_product(times: Sequence[int], records: Sequence[int]) -> int:
    """Multiply together the margins of every race."""
    return math.prod(
        winning_margin(time, record) for time, record in zip(times, records, strict=True)
    )


def _joined(numbers: Sequence[int]) -> int:
    return int("".join(str(number) for number in numbers))


def combined_margin(times: Sequence[int], records: Sequence[int]) -> int:
    """The margin of the single race whose figures are the digits run together."""
    if len(times) != len(records) or not times:
        raise ValueError("times and records must be non-empty and of equal length")
    return winning_margin(_joined(times), _joined(records))


def parse_races(text: str) -> tuple[list[int], list[int]]:
    """Parse the ``Time:`` and ``Distance:`` lines into two lists."""
    rows: dict[str, list[int]] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        label, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"not a race line: {line!r}")
        rows[label.strip().lower()] = [int(field) for field in rest.split()]
    try:
        times, records = rows["time"], rows["distance"]
    except KeyError:
        raise ValueError("both Time and Distance lines are needed") from None
    if len(times) != len(records):
        raise ValueError("there must be as many records as times")
    return times, records