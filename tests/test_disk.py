from collections import Counter

import pytest

from advent.disk import checksum, compact, parse_disk_map

EXAMPLE = "2333133121414131402"


def test_example_checksum():
    assert checksum(compact(*parse_disk_map(EXAMPLE))) == 1928


def test_small_compaction():
    assert compact(*parse_disk_map("12345")) == [0, 2, 2, 1, 1, 1, 2, 2, 2]


def test_parse_splits_files_and_gaps():
    assert parse_disk_map("12345\n") == ([1, 3, 5], [2, 4])


def test_compact_keeps_every_block():
    files, gaps = parse_disk_map(EXAMPLE)
    blocks = compact(files, gaps)
    assert Counter(blocks) == Counter({file_id: n for file_id, n in enumerate(files) if n})


def test_compact_without_gaps_is_identity():
    assert compact([2, 1], [0]) == [0, 0, 1]


def test_checksum_empty():
    assert checksum([]) == 0


def test_non_digit_raises():
    with pytest.raises(ValueError):
        parse_disk_map("12a")


def test_gap_count_mismatch_raises():
    with pytest.raises(ValueError):
        compact([1, 2], [1, 1, 1])