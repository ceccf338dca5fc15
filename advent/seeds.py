"""Seed almanac: mapping seeds through each category to a location."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple


class _Range(NamedTuple):
    destination: int
    source: int
    length: int


@dataclass(frozen=True)
class Almanac:
    """The seeds to plant and the ordered category maps they pass through."""

    seeds: tuple[int, ...]
    maps: tuple[tuple[_Range, ...], ...]

    def convert(self, value: int) -> int:
        """Map a seed number through every category in turn."""
        for ranges in self.maps:
            for entry in ranges:
                if entry.source <= value < entry.source + entry.length:
                    value = value - entry.source + entry.destination
                    break
        return value

    def locations(self) -> list[int]:
        """The location number of each seed, in seed order."""
        return [self.convert(seed) for seed in self.seeds]


def _ints(text: str) -> list[int]:
    try:
        return [int(field) for field in text.split()]
    except ValueError:
        raise ValueError(f"expected numbers, got {text!r}") from None


def parse_almanac(text: str) -> Almanac:
    """Parse the ``seeds:`` line and the map blocks that follow it."""
    blocks = [block for block in re.split(r"\n\s*\n", text.strip()) if block.strip()]
    if not blocks or not blocks[0].startswith("seeds:"):
        raise ValueError("the almanac does not start with a seeds line")
    seeds = tuple(_ints(blocks[0][len("seeds:"):]))
    maps = []
    for block in blocks[1:]:
        header, *rows = block.splitlines()
        if not header.rstrip().endswith("map:"):
            raise ValueError(f"not a map header: {header!r}")
        ranges = []
        for row in rows:
            fields = _ints(row)
            if len(fields) != 3:
                raise ValueError(f"a map row needs three numbers: {row!r}")
            ranges.append(_Range(*fields))
        maps.append(tuple(ranges))
    return Almanac(seeds, tuple(maps))


def lowest_location(text: str) -> int:
    """The lowest location any seed of the almanac maps to."""
    locations = parse_almanac(text).locations()
    if not locations:
        raise ValueError("the almanac lists no seeds")
    return min(locations)