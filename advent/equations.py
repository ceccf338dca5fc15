"""Bridge calibration: can operators between the numbers reach the target?"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence


def concatenate(left: int, right: int) -> int:
    """Join the decimal digits of two numbers: 12 and 345 give 12345."""
    if left < 0 or right < 0:
        raise ValueError("only non-negative numbers can be concatenated")
    return int(f"{left}{right}")


def parse_equation(line: str) -> tuple[int, list[int]]:
    """Parse ``190: 10 19`` into the target and its numbers."""
    head, sep, rest = line.partition(":")
    try:
        if not sep:
            raise ValueError
        target = int(head)
        numbers = [int(field) for field in rest.split()]
    except ValueError:
        raise ValueError(f"not an equation: {line!r}") from None
    if not numbers:
        raise ValueError(f"an equation needs numbers: {line!r}")
    return target, numbers


def solvable(target: int, numbers: Sequence[int], concat: bool = False) -> bool:
    """Whether +, * (and, with ``concat``, ||) evaluated left to right hit ``target``."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    ops: list[Callable[[int, int], int]] = [operator.add, operator.mul]
    if concat:
        ops.append(concatenate)

    def search(value: int, rest: Sequence[int]) -> bool:
        if value > target:
            return False
        if not rest:
            return value == target
        head, tail = rest[0], rest[1:]
        return any(search(op(value, head), tail) for op in ops)

    return search(numbers[0], numbers[1:])


def calibration_total(lines: Iterable[str], concat: bool = False) -> int:
    """Sum the targets of the equations that can be made true."""
    total = 0
    for line in lines:
        if not line.strip():
            continue
        target, numbers = parse_equation(line)
        if solvable(target, numbers, concat):
            total += target
    return total