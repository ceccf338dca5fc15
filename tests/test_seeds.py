import pytest

from advent.seeds import lowest_location, parse_almanac

TEXT = """seeds: 5 20

seed-to-soil map:
50 0 10

soil-to-fertilizer map:
0 100 5
"""


def test_parse_seeds_and_maps():
    almanac = parse_almanac(TEXT)
    assert almanac.seeds == (5, 20)
    assert len(almanac.maps) == 2


def test_convert_through_range():
    assert parse_almanac(TEXT).convert(5) == 55


def test_unmapped_value_passes_through():
    assert parse_almanac(TEXT).convert(20) == 20


def test_range_end_is_exclusive():
    assert parse_almanac(TEXT).convert(10) == 10


def test_locations_follow_seed_order():
    almanac = parse_almanac(TEXT)
    assert almanac.locations() == [almanac.convert(5), almanac.convert(20)]


def test_lowest_location_is_minimum():
    assert lowest_location(TEXT) == min(parse_almanac(TEXT).locations())


def test_no_maps_is_identity():
    almanac = parse_almanac("seeds: 3 9 1")
    assert almanac.locations() == [3, 9, 1]


def test_missing_seeds_line_rejected():
    with pytest.raises(ValueError):
        parse_almanac("seed-to-soil map:\n1 2 3")


def test_bad_row_rejected():
    with pytest.raises(ValueError):
        parse_almanac("seeds: 1\n\nx-to-y map:\n1 2")


def test_empty_seeds_has_no_lowest():
    with pytest.raises(ValueError):
        lowest_location("seeds:")