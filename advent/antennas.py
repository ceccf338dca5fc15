"""Antinodes created by pairs of antennas on the same frequency."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Sequence
from itertools import combinations

Position = tuple[int, int]

EMPTY = "."


def _inside(grid: Sequence[str], position: Position) -> bool:
    row, col = position
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def antenna_locations(grid: Sequence[str]) -> dict[str, list[Position]]:
    """Positions of each antenna frequency, in reading order."""
    locations: dict[str, list[Position]] = defaultdict(list)
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char != EMPTY:
                locations[char].append((row, col))
    return dict(locations)


def antinodes(grid: Sequence[str]) -> set[Position]:
    """Points beyond each pair of same-frequency antennas at the pair's spacing."""
    found: set[Position] = set()
    for positions in antenna_locations(grid).values():
        for (r1, c1), (r2, c2) in combinations(positions, 2):
            dr, dc = r2 - r1, c2 - c1
            for point in ((r1 - dr, c1 - dc), (r2 + dr, c2 + dc)):
                if _inside(grid, point):
                    found.add(point)
    return found


def resonant_antinodes(grid: Sequence[str]) -> set[Position]:
    """Every antenna plus the empty cells on the lines running outward from pairs."""
    locations = antenna_locations(grid)
    found: set[Position] = set()
    for positions in locations.values():
        found.update(positions)
        for (r1, c1), (r2, c2) in combinations(positions, 2):
            dr, dc = r2 - r1, c2 - c1
            divisor = math.gcd(dr, dc)
            dr, dc = dr // divisor, dc // divisor
            for (row, col), sign in (((r1, c1), -1), ((r2, c2), 1)):
                point = (row + sign * dr, col + sign * dc)
                while _inside(grid, point):
                    if grid[point[0]][point[1]] == EMPTY:
                        found.add(point)
                    point = (point[0] + sign * dr, point[1] + sign * dc)
    return found