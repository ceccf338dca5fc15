"""Print queue: page ordering rules and the updates that follow them."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations


@dataclass(frozen=True)
class Rules:
    """For each page, the set of pages that must be printed after it."""

    after: dict[int, frozenset[int]]

    def _must_follow(self, earlier: int, later: int) -> bool:
        return later in self.after.get(earlier, frozenset())

    def is_ordered(self, pages: Sequence[int]) -> bool:
        """Whether every page is required to come after each page before it."""
        return all(self._must_follow(a, b) for a, b in combinations(pages, 2))

    def reorder(self, pages: Sequence[int]) -> list[int]:
        """Pages sorted so those with the most required followers come first."""
        def followers(page: int) -> int:
            return sum(self._must_follow(page, other) for other in pages)

        return sorted(pages, key=lambda page: -followers(page))


def parse_rules(lines: Iterable[str]) -> Rules:
    """Parse ``47|53`` lines; blank lines are skipped."""
    after: dict[int, set[int]] = defaultdict(set)
    for line in lines:
        if not line.strip():
            continue
        left, sep, right = line.partition("|")
        try:
            if not sep:
                raise ValueError
            before, later = int(left), int(right)
        except ValueError:
            raise ValueError(f"not an ordering rule: {line!r}") from None
        after[before].add(later)
    return Rules({page: frozenset(pages) for page, pages in after.items()})


def parse_update(line: str) -> list[int]:
    """Parse a comma-separated list of page numbers."""
    try:
        return [int(field) for field in line.strip().split(",")]
    except ValueError:
        raise ValueError(f"not an update: {line!r}") from None


def _middle(pages: Sequence[int]) -> int:
    if not pages:
        raise ValueError("an update needs at least one page")
    return pages[len(pages) // 2]


def ordered_middle_sum(rules: Rules, updates: Iterable[Sequence[int]]) -> int:
    """Sum the middle pages of the updates already in the right order."""
    return sum(_middle(pages) for pages in updates if rules.is_ordered(pages))


def reordered_middle_sum(rules: Rules, updates: Iterable[Sequence[int]]) -> int:
    """Sum the middle pages of the out-of-order updates once they are reordered."""
    total = 0
    for pages in updates:
        fixed = rules.reorder(pages)
        if fixed != list(pages):
            total += _middle(fixed)
    return total