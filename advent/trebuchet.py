"""Calibration values recovered from lines of amended text."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator

_SPELLED = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _combine(digits: list[int]) -> int:
    """Join the first and last digit into a two-digit number, or 0 if none."""
    if not digits:
        return 0
    return digits[0] * 10 + digits[-1]


def _spelled_digits(line: str) -> Iterator[int]:
    """Yield digits and spelled-out digit words in the order they start."""
    for index, char in enumerate(line):
        if char in string.digits:
            yield int(char)
            continue
        for word, value in _SPELLED.items():
            if line.startswith(word, index):
                yield value


def calibration_value(line: str) -> int:
    """Return the number formed by the first and last digit of ``line``."""
    return _combine([int(char) for char in line if char in string.digits])


def spelled_calibration_value(line: str) -> int:
    """Like :func:`calibration_value`, but words such as "seven" count too."""
    return _combine(list(_spelled_digits(line)))


def total_calibration(lines: Iterable[str], spelled: bool = False) -> int:
    """Sum the calibration values of all lines."""
    value_of = spelled_calibration_value if spelled else calibration_value
    return sum(value_of(line) for line in lines)