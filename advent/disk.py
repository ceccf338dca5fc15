"""Disk compaction: moving file blocks into free space and the checksum."""

from __future__ import annotations

from collections.abc import Sequence


def parse_disk_map(text: str) -> tuple[list[int], list[int]]:
    """Split the dense digit map into file lengths and the gap lengths between them."""
    digits = text.strip()
    if not digits.isascii() or not digits.isdigit():
        raise ValueError("a disk map is made of digits only")
    return [int(d) for d in digits[0::2]], [int(d) for d in digits[1::2]]


def compact(files: Sequence[int], gaps: Sequence[int]) -> list[int]:
    """File IDs block by block after moving end blocks into the leftmost gaps."""
    if len(gaps) not in (len(files), len(files) - 1):
        raise ValueError("there must be one gap between each pair of files")
    layout: list[int | None] = []
    for file_id, length in enumerate(files):
        layout.extend([file_id] * length)
        if file_id < len(gaps):
            layout.extend([None] * gaps[file_id])
    left, right = 0, len(layout) - 1
    while left < right:
        if layout[left] is not None:
            left += 1
        elif layout[right] is None:
            right -= 1
        else:
            layout[left], layout[right] = layout[right], None
    return [block for block in layout if block is not None]


def checksum(blocks: Sequence[int]) -> int:
    """Sum of each block's position times its file ID."""
    return sum(position * file_id for position, file_id in enumerate(blocks))