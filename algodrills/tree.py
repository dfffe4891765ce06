"""Binary trees built from pre-order input and read level by level."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

_EMPTY = -1


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Node | None = None
    right: Node | None = None


def _build(values: Iterator[int]) -> Node | None:
    try:
        data = next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None
    if data == _EMPTY:
        return None
    node = Node(data)
    node.left = _build(values)
    node.right = _build(values)
    return node


def build_tree(values: Iterable[int]) -> Node | None:
    """Build a tree from pre-order values where -1 marks an empty subtree."""
    return _build(iter(values))


def level_order(root: Node | None) -> list[list[int]]:
    """The tree's values grouped by depth, left to right."""
    levels: list[list[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            queue.extend(child for child in (node.left, node.right) if child)
        levels.append(level)
    return levels


def main(argv: Sequence[str] | None = None) -> int:
    """Read pre-order values from the arguments or stdin and print each level."""
    parser = argparse.ArgumentParser(description="Print a binary tree level by level.")
    parser.add_argument("values", nargs="*", type=int, help="pre-order values, -1 for empty")
    args = parser.parse_args(argv)
    values = args.values or [int(token) for token in sys.stdin.read().split()]
    for level in level_order(build_tree(values)):
        print("".join(f"{value}   " for value in level))
    return 0