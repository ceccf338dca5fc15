"""Part numbers and gear ratios in an engine schematic."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass

Position = tuple[int, int]

_NUMBER = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PartNumber:
    """A number in the schematic, spanning columns ``start`` to ``end - 1``."""

    value: int
    row: int
    start: int
    end: int

    def neighbours(self) -> set[Position]:
        """Every position touching the number, diagonals included."""
        return {
            (row, col)
            for row in range(self.row - 1, self.row + 2)
            for col in range(self.start - 1, self.end + 1)
            if not (row == self.row and self.start <= col < self.end)
        }


def _cell(grid: Sequence[str], position: Position) -> str:
    row, col = position
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return "."


def _is_symbol(char: str) -> bool:
    return char != "." and not char.isdigit() and not char.isspace()


def find_numbers(grid: Sequence[str]) -> list[PartNumber]:
    """Return every number in the schematic in reading order."""
    return [
        PartNumber(int(match.group()), row, match.start(), match.end())
        for row, line in enumerate(grid)
        for match in _NUMBER.finditer(line)
    ]


def part_number_sum(grid: Sequence[str]) -> int:
    """Sum the numbers that touch at least one symbol."""
    return sum(
        number.value
        for number in find_numbers(grid)
        if any(_is_symbol(_cell(grid, spot)) for spot in number.neighbours())
    )


def gear_ratio_sum(grid: Sequence[str]) -> int:
    """Sum the products of the two numbers around each ``*`` touching exactly two."""
    around: dict[Position, list[int]] = defaultdict(list)
    for number in find_numbers(grid):
        for spot in number.neighbours():
            if _cell(grid, spot) == "*":
                around[spot].append(number.value)
    return sum(
        values[0] * values[1] for values in around.values() if len(values) == 2
    )