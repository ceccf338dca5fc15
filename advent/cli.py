"""Command line entry point: solve a puzzle from an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from advent import (
    antennas,
    boats,
    camel_cards,
    cube_conundrum,
    disk,
    equations,
    garden,
    gear_ratios,
    guard_route,
    haunted,
    location_lists,
    memory,
    mirage,
    pipe_maze,
    print_queue,
    reports,
    scratch_cards,
    seeds,
    stones,
    trails,
    trebuchet,
    word_search,
)

DEFAULT_BLINKS = 25


def _rows(text: str) -> list[str]:
    """Non-empty lines of the input."""
    return [line for line in text.splitlines() if line.strip()]


def _print_queue(text: str, reordered: bool) -> int:
    rule_text, _, update_text = text.strip().partition("\n\n")
    rules = print_queue.parse_rules(rule_text.splitlines())
    updates = [print_queue.parse_update(line) for line in _rows(update_text)]
    if reordered:
        return print_queue.reordered_middle_sum(rules, updates)
    return print_queue.ordered_middle_sum(rules, updates)


def _stones(text: str, blinks: int) -> int:
    try:
        row = [int(field) for field in text.split()]
    except ValueError:
        raise ValueError("stones must be whole numbers") from None
    return stones.count_after(row, blinks)


def _disk(text: str) -> int:
    return disk.checksum(disk.compact(*disk.parse_disk_map(text)))


_SOLVERS: dict[str, Callable[[str], int]] = {
    "trebuchet": lambda text: trebuchet.total_calibration(text.splitlines()),
    "trebuchet-spelled": lambda text: trebuchet.total_calibration(
        text.splitlines(), spelled=True
    ),
    "pipe-maze": lambda text: pipe_maze.farthest_distance(pipe_maze.parse_grid(text)),
    "cubes": lambda text: cube_conundrum.sum_possible(text.splitlines()),
    "cubes-power": lambda text: cube_conundrum.sum_power(text.splitlines()),
    "gears": lambda text: gear_ratios.part_number_sum(_rows(text)),
    "gears-ratio": lambda text: gear_ratios.gear_ratio_sum(_rows(text)),
    "scratch-cards": lambda text: scratch_cards.total_points(text.splitlines()),
    "scratch-copies": lambda text: scratch_cards.total_cards(text.splitlines()),
    "seeds": seeds.lowest_location,
    "boats": lambda text: boats.margin_product(*boats.parse_races(text)),
    "boats-combined": lambda text: boats.combined_margin(*boats.parse_races(text)),
    "camel-cards": lambda text: camel_cards.total_winnings(text.splitlines()),
    "camel-jokers": lambda text: camel_cards.total_winnings(
        text.splitlines(), jokers=True
    ),
    "haunted": lambda text: haunted.parse_network(text).steps_to_zzz(),
    "mirage": lambda text: mirage.sum_next(text.splitlines()),
    "mirage-previous": lambda text: mirage.sum_previous(text.splitlines()),
    "lists": lambda text: location_lists.total_distance(
        *location_lists.parse_lists(text.splitlines())
    ),
    "lists-similarity": lambda text: location_lists.similarity_score(
        *location_lists.parse_lists(text.splitlines())
    ),
    "trails": lambda text: trails.total_score(trails.parse_map(text)),
    "trails-rating": lambda text: trails.total_rating(trails.parse_map(text)),
    "garden": lambda text: garden.fencing_cost(garden.parse_garden(text)),
    "reports": lambda text: reports.count_safe(text.splitlines()),
    "reports-dampened": lambda text: reports.count_dampened(text.splitlines()),
    "memory": lambda text: memory.total_products(text.splitlines()),
    "word-search": lambda text: word_search.count_word(_rows(text)),
    "x-mas": lambda text: word_search.count_x_mas(_rows(text)),
    "print-queue": lambda text: _print_queue(text, reordered=False),
    "print-queue-fixed": lambda text: _print_queue(text, reordered=True),
    "guard": lambda text: guard_route.visited_count(_rows(text)),
    "equations": lambda text: equations.calibration_total(text.splitlines()),
    "equations-concat": lambda text: equations.calibration_total(
        text.splitlines(), concat=True
    ),
    "antennas": lambda text: len(antennas.antinodes(_rows(text))),
    "antennas-resonant": lambda text: len(antennas.resonant_antinodes(_rows(text))),
    "disk": _disk,
}

PUZZLES = ("stones", *_SOLVERS)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent", description="Solve a puzzle and print its answer."
    )
    parser.add_argument("puzzle", choices=sorted(PUZZLES), help="puzzle to solve")
    parser.add_argument("path", help="input file, or - for standard input")
    parser.add_argument(
        "--blinks",
        type=int,
        default=DEFAULT_BLINKS,
        help="number of blinks for the stones puzzle",
    )
    return parser


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return 0 on success and 1 if the input cannot be solved."""
    args = _parser().parse_args(argv)
    try:
        text = _read(args.path)
    except OSError as error:
        print(f"advent: cannot read {args.path}: {error.strerror}", file=sys.stderr)
        return 1
    try:
        if args.puzzle == "stones":
            answer = _stones(text, args.blinks)
        else:
            answer = _SOLVERS[args.puzzle](text)
    except ValueError as error:
        print(f"advent: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())