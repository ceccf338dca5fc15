# advent

Solvers for a set of Advent of Code puzzles: days 1 to 10 of the 2023 season
and days 1 to 12 of the 2024 season. Each puzzle lives in its own module and
works on plain strings and lists of lines, so you can feed it your puzzle
input however you like. There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides an `advent` command. It reads an input file
(or standard input when the path is `-`), solves one puzzle and prints the
answer:

```
advent trebuchet trebuchet_input.txt
advent stones stones_input.txt --blinks 75
cat list_input.txt | advent lists -
advent --help
```

The exit status is 0 on success and 1 when the file cannot be read or the
input cannot be solved; the reason is printed to standard error.

Puzzle names:

| Name | Answer |
| --- | --- |
| `trebuchet` | sum of calibration values (digits only) |
| `trebuchet-spelled` | sum of calibration values, spelled digits counted |
| `cubes` | sum of ids of games possible with 12 red, 13 green, 14 blue |
| `cubes-power` | sum of game powers |
| `gears` | sum of part numbers touching a symbol |
| `gears-ratio` | sum of gear ratios |
| `scratch-cards` | total scratchcard points |
| `scratch-copies` | total cards held once copies are won |
| `seeds` | lowest location of the listed seeds |
| `boats` | product of the race margins |
| `boats-combined` | margin of the single race with the digits joined |
| `camel-cards` | total winnings |
| `camel-jokers` | total winnings with `J` as a weak joker |
| `haunted` | steps from `AAA` to `ZZZ` |
| `mirage` | sum of extrapolated next values |
| `mirage-previous` | sum of extrapolated previous values |
| `pipe-maze` | steps to the farthest point of the loop |
| `lists` | total distance between the two lists |
| `lists-similarity` | similarity score of the two lists |
| `reports` | number of safe reports |
| `reports-dampened` | number of safe reports with one level removable |
| `memory` | sum of enabled `mul(a,b)` products |
| `word-search` | occurrences of `XMAS` in any direction |
| `x-mas` | number of `MAS` crosses |
| `print-queue` | sum of middle pages of correctly ordered updates |
| `print-queue-fixed` | sum of middle pages of reordered updates |
| `guard` | distinct positions the guard visits |
| `equations` | calibration total with `+` and `*` |
| `equations-concat` | calibration total with `+`, `*` and `\|\|` |
| `antennas` | number of antinodes |
| `antennas-resonant` | number of antinodes counting whole lines |
| `disk` | checksum after moving blocks into free space |
| `trails` | sum of trailhead scores |
| `trails-rating` | sum of trailhead ratings |
| `stones` | stones left after `--blinks` blinks (default 25) |
| `garden` | total fencing cost |

For `print-queue` the file holds the `a|b` rules, a blank line, then the
comma-separated updates. For `pipe-maze` the loop is followed from `S` by
first stepping to the tile north of it.

## Library use

Every module exposes small functions that take the puzzle input and return
the answer.

```python
from pathlib import Path

from advent.trebuchet import calibration_value, total_calibration

calibration_value("pqr3stu8vwx")  # 38

lines = Path("trebuchet_input.txt").read_text().splitlines()
print(total_calibration(lines))                # digits only
print(total_calibration(lines, spelled=True))  # "one", "two", ... count too
```

```python
from advent.camel_cards import total_winnings

lines = Path("camel_cards.txt").read_text().splitlines()
print(total_winnings(lines, jokers=True))
```

```python
from advent.stones import blink, count_after

blink([0, 1, 10, 99, 999])   # [1, 2024, 1, 0, 9, 9, 2021976]
print(count_after([125, 17], 25))
```

```python
from advent.haunted import parse_network

network = parse_network(Path("haunted_input.txt").read_text())
network.steps_to_zzz()
network.ghost_steps()   # {start: steps} for every node ending in "A"
```

Invalid input raises `ValueError`.

### Modules

2023 season:

| Module | Puzzle | Main functions |
| --- | --- | --- |
| `advent.trebuchet` | Day 1 | `calibration_value`, `spelled_calibration_value`, `total_calibration` |
| `advent.cube_conundrum` | Day 2 | `parse_game`, `Game`, `sum_possible`, `sum_power` |
| `advent.gear_ratios` | Day 3 | `find_numbers`, `PartNumber`, `part_number_sum`, `gear_ratio_sum` |
| `advent.scratch_cards` | Day 4 | `parse_card`, `Card`, `total_points`, `total_cards`, `total_copy_points` |
| `advent.seeds` | Day 5 | `parse_almanac`, `Almanac`, `lowest_location` |
| `advent.boats` | Day 6 | `winning_margin`, `margin_product`, `combined_margin`, `parse_races` |
| `advent.camel_cards` | Day 7 | `HandType`, `Hand`, `hand_type`, `card_value`, `parse_hands`, `total_winnings` |
| `advent.haunted` | Day 8 | `parse_network`, `Network` |
| `advent.mirage` | Day 9 | `next_value`, `previous_value`, `sum_next`, `sum_previous` |
| `advent.pipe_maze` | Day 10 | `parse_grid`, `find_start`, `next_tile`, `trace_loop`, `farthest_distance`, `mark_loop` |

2024 season:

| Module | Puzzle | Main functions |
| --- | --- | --- |
| `advent.location_lists` | Day 1 | `parse_lists`, `total_distance`, `similarity_score` |
| `advent.reports` | Day 2 | `is_safe`, `is_safe_dampened`, `count_safe`, `count_dampened` |
| `advent.memory` | Day 3 | `enabled_at`, `enabled_products`, `total_products` |
| `advent.word_search` | Day 4 | `count_word`, `count_x_mas` |
| `advent.print_queue` | Day 5 | `parse_rules`, `parse_update`, `Rules`, `ordered_middle_sum`, `reordered_middle_sum` |
| `advent.guard_route` | Day 6 | `Direction`, `find_guard`, `walk`, `visited_count` |
| `advent.equations` | Day 7 | `concatenate`, `parse_equation`, `solvable`, `calibration_total` |
| `advent.antennas` | Day 8 | `antenna_locations`, `antinodes`, `resonant_antinodes` |
| `advent.disk` | Day 9 | `parse_disk_map`, `compact`, `checksum` |
| `advent.trails` | Day 10 | `parse_map`, `trail_ends`, `trailhead_score`, `trailhead_rating`, `total_score`, `total_rating` |
| `advent.stones` | Day 11 | `split_even`, `blink`, `count_after` |
| `advent.garden` | Day 12 | `parse_garden`, `find_regions`, `region_perimeter`, `fencing_cost` |

## What it does not do

Some second halves of these puzzles are not solved:

- `advent.seeds` maps individual seed numbers only; it does not treat the
  seeds line as ranges.
- `advent.haunted` gives each ghost's step count on its own
  (`Network.ghost_steps`) but does not combine them into the step at which
  all ghosts finish together; the command line offers only `haunted`.
- `advent.pipe_maze` does not count the tiles enclosed by the loop;
  `mark_loop` only marks the loop's tiles.
- `advent.guard_route` does not search for obstructions that would trap the
  guard in a loop; `walk` raises `ValueError` if the given map already does.
- `advent.disk` moves single blocks; it does not move whole files.
- `advent.garden` prices fences by perimeter only, not by number of sides.