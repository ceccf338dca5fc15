"""Walking a left/right node network by its repeating instructions."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

_NODE = re.compile(r"(\w{3})\s*=\s*\((\w{3}),\s*(\w{3})\)")


@dataclass(frozen=True)
class Network:
    """Repeating L/R instructions and each node's left and right neighbours."""

    instructions: str
    nodes: dict[str, tuple[str, str]]

    def steps(self, start: str, is_end: Callable[[str], bool]) -> int:
        """Count moves from ``start`` until a node satisfying ``is_end`` is reached."""
        if not self.instructions:
            raise ValueError("the network has no instructions")
        node = start
        seen: set[tuple[str, int]] = set()
        count = 0
        while True:
            index = count % len(self.instructions)
            state = (node, index)
            if state in seen:
                raise ValueError(f"no end is ever reached from {start!r}")
            seen.add(state)
            try:
                left, right = self.nodes[node]
            except KeyError:
                raise ValueError(f"unknown node {node!r}") from None
            node = left if self.instructions[index] == "L" else right
            count += 1
            if is_end(node):
                return count

    def steps_to_zzz(self) -> int:
        """Moves from ``AAA`` to ``ZZZ``."""
        return self.steps("AAA", lambda node: node == "ZZZ")

    def ghost_steps(self) -> dict[str, int]:
        """Moves from each node ending in ``A`` to the first node ending in ``Z``."""
        return {
            start: self.steps(start, lambda node: node.endswith("Z"))
            for start in self.nodes
            if start.endswith("A")
        }


def parse_network(text: str) -> Network:
    """Parse the instruction line and the ``AAA = (BBB, CCC)`` node lines."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("empty network")
    instructions, *rows = lines
    if not instructions or set(instructions) - {"L", "R"}:
        raise ValueError(f"instructions must be L and R only: {instructions!r}")
    nodes = {}
    for row in rows:
        match = _NODE.fullmatch(row)
        if match is None:
            raise ValueError(f"not a node line: {row!r}")
        nodes[match.group(1)] = (match.group(2), match.group(3))
    return Network(instructions, nodes)