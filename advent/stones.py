"""Engraved stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

MULTIPLIER = 2024


def split_even(number: int) -> tuple[int, int] | None:
    """Split a number with an even count of digits into its two halves.

    Returns ``None`` for zero and for numbers with an odd count of digits.
    """
    if number < 0:
        raise ValueError(f"stones carry non-negative numbers: {number}")
    digits = str(number)
    if number == 0 or len(digits) % 2:
        return None
    half = len(digits) // 2
    return int(digits[:half]), int(digits[half:])


def blink(stones: Iterable[int]) -> list[int]:
    """Apply one blink to the row of stones, keeping their order."""
    result: list[int] = []
    for stone in stones:
        if stone == 0:
            result.append(1)
            continue
        halves = split_even(stone)
        if halves is None:
            result.append(stone * MULTIPLIER)
        else:
            result.extend(halves)
    return result


def count_after(stones: Iterable[int], blinks: int) -> int:
    """Number of stones present after blinking ``blinks`` times."""
    if blinks < 0:
        raise ValueError("the number of blinks cannot be negative")
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in counts.items():
            for new_stone in blink([stone]):
                following[new_stone] += count
        counts = following
    return sum(counts.values())