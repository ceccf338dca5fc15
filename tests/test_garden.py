from advent.garden import fencing_cost, find_regions, parse_garden, region_perimeter

SMALL = """\
AAAA
BBCD
BBCC
EEEC
"""

LARGE = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""


def test_parse_garden_drops_blank_lines():
    assert parse_garden("AB\n\nCD\n") == ["AB", "CD"]


def test_fencing_cost_small_example():
    assert fencing_cost(parse_garden(SMALL)) == 140


def test_fencing_cost_large_example():
    assert fencing_cost(parse_garden(LARGE)) == 1930


def test_regions_partition_grid():
    grid = parse_garden(LARGE)
    regions = find_regions(grid)
    cells = {(r, c) for r, line in enumerate(grid) for c in range(len(line))}
    assert set().union(*regions) == cells
    assert sum(len(region) for region in regions) == len(cells)


def test_regions_hold_one_crop():
    grid = parse_garden(LARGE)
    for region in find_regions(grid):
        assert len({grid[r][c] for r, c in region}) == 1


def test_separate_regions_of_same_crop():
    grid = parse_garden("ABA")
    regions = find_regions(grid)
    assert {(0, 0)} in regions
    assert {(0, 2)} in regions
    assert len(regions) == len("ABA")


def test_single_plot_perimeter():
    grid = parse_garden(SMALL)
    region = next(region for region in find_regions(grid) if (1, 3) in region)
    assert region == {(1, 3)}
    assert region_perimeter(region, grid) == 4