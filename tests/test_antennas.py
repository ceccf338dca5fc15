from advent.antennas import antenna_locations, antinodes, resonant_antinodes

EXAMPLE = [
    "............",
    "........0...",
    ".....0......",
    ".......0....",
    "....0.......",
    "......A.....",
    "............",
    "............",
    "........A...",
    ".........A..",
    "............",
    "............",
]


def _inside(grid, point):
    return 0 <= point[0] < len(grid) and 0 <= point[1] < len(grid[0])


def test_example_antinodes():
    assert len(antinodes(EXAMPLE)) == 14


def test_example_resonant():
    assert len(resonant_antinodes(EXAMPLE)) == 34


def test_locations_by_frequency():
    locations = antenna_locations(EXAMPLE)
    assert sorted(locations) == ["0", "A"]
    assert locations["A"] == [(5, 6), (8, 8), (9, 9)]


def test_antinodes_inside_map():
    plain = antinodes(EXAMPLE)
    resonant = resonant_antinodes(EXAMPLE)
    assert [point for point in plain if not _inside(EXAMPLE, point)] == []
    assert [point for point in resonant if not _inside(EXAMPLE, point)] == []
    assert len(plain) == 14


def test_antinodes_within_resonant():
    assert antinodes(EXAMPLE) <= resonant_antinodes(EXAMPLE)


def test_pair_antinodes_mirror_spacing():
    grid = [".....", ".a...", "..a..", ".....", "....."]
    assert antinodes(grid) == {(0, 0), (3, 3)}


def test_single_antenna():
    grid = ["...", ".x.", "..."]
    assert antinodes(grid) == set()
    assert resonant_antinodes(grid) == {(1, 1)}