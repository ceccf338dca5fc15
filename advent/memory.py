"""Corrupted memory: summing enabled ``mul(a,b)`` instructions."""

from __future__ import annotations

import re
from collections.abc import Iterable

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")

ENABLE = "do()"
DISABLE = "don't()"


def enabled_at(index: int, line: str) -> bool:
    """Whether instructions starting at ``index`` are enabled.

    The nearest ``do()`` or ``don't()`` before ``index`` decides; with neither,
    instructions are enabled.
    """
    if not 0 <= index <= len(line):
        raise ValueError(f"index {index} is outside the line")
    prefix = line[:index]
    return prefix.rfind(ENABLE) >= prefix.rfind(DISABLE)


def enabled_products(line: str) -> list[int]:
    """Products of every enabled, well-formed ``mul`` instruction in the line."""
    return [
        int(match.group(1)) * int(match.group(2))
        for match in _MUL.finditer(line)
        if enabled_at(match.start(), line)
    ]


def total_products(lines: Iterable[str]) -> int:
    """Sum the enabled products of every line; each line starts enabled."""
    return sum(sum(enabled_products(line)) for line in lines)