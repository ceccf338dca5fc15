"""Garden plots: regions of one crop and the cost of fencing them."""

from __future__ import annotations

from collections.abc import Sequence

Position = tuple[int, int]

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_garden(text: str) -> list[str]:
    """Split the garden map into its non-empty rows."""
    return [line for line in text.splitlines() if line.strip()]


def _cell(grid: Sequence[str], position: Position) -> str | None:
    row, col = position
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def find_regions(grid: Sequence[str]) -> list[set[Position]]:
    """Every region of orthogonally connected plots growing the same crop."""
    seen: set[Position] = set()
    regions: list[set[Position]] = []
    for row, line in enumerate(grid):
        for col, crop in enumerate(line):
            if (row, col) in seen:
                continue
            region = {(row, col)}
            frontier = [(row, col)]
            while frontier:
                r, c = frontier.pop()
                for d_row, d_col in _STEPS:
                    neighbour = (r + d_row, c + d_col)
                    if neighbour not in region and _cell(grid, neighbour) == crop:
                        region.add(neighbour)
                        frontier.append(neighbour)
            seen |= region
            regions.append(region)
    return regions


def region_perimeter(region: set[Position], grid: Sequence[str]) -> int:
    """Count plot sides that border a different crop or the edge of the map."""
    return sum(
        1
        for row, col in region
        for d_row, d_col in _STEPS
        if _cell(grid, (row + d_row, col + d_col)) != grid[row][col]
    )


def fencing_cost(grid: Sequence[str]) -> int:
    """Sum of area times perimeter over all regions."""
    return sum(
        len(region) * region_perimeter(region, grid) for region in find_regions(grid)
    )