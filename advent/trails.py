"""Hiking trails on a topographic map, rising one step at a time from 0 to 9."""

from __future__ import annotations

import string
from collections.abc import Sequence

Position = tuple[int, int]
Grid = Sequence[Sequence[int]]

PEAK = 9
IMPASSABLE = -1

# Up, down, left, right.
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_map(text: str) -> list[list[int]]:
    """Turn the map text into rows of heights; non-digits become impassable."""
    return [
        [int(char) if char in string.digits else IMPASSABLE for char in line]
        for line in text.splitlines()
        if line.strip()
    ]


def _height(grid: Grid, row: int, col: int) -> int | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def trail_ends(grid: Grid, row: int, col: int) -> list[Position]:
    """The peak reached by every distinct trail from a trailhead, one entry per trail."""
    if _height(grid, row, col) is None:
        raise ValueError(f"position {(row, col)} is outside the map")
    if grid[row][col] != 0:
        return []
    ends: list[Position] = []
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        height = grid[r][c]
        if height == PEAK:
            ends.append((r, c))
            continue
        for d_row, d_col in reversed(_STEPS):
            if _height(grid, r + d_row, c + d_col) == height + 1:
                stack.append((r + d_row, c + d_col))
    return ends


def trailhead_rating(grid: Grid, row: int, col: int) -> int:
    """Number of distinct trails that start at this position."""
    return len(trail_ends(grid, row, col))


def trailhead_score(grid: Grid, row: int, col: int) -> int:
    """Number of different peaks reachable from this position."""
    return len(set(trail_ends(grid, row, col)))


def _cells(grid: Grid):
    return ((r, c) for r, line in enumerate(grid) for c in range(len(line)))


def total_rating(grid: Grid) -> int:
    """Sum of the ratings of every trailhead."""
    return sum(trailhead_rating(grid, r, c) for r, c in _cells(grid))


def total_score(grid: Grid) -> int:
    """Sum of the scores of every trailhead."""
    return sum(trailhead_score(grid, r, c) for r, c in _cells(grid))