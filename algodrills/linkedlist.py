"""Singly linked list exercises."""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd
from typing import Iterable, Iterator


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def _values(head: ListNode | None) -> list[int]:
    return list(head) if head is not None else []


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding values in order; None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def insertion_sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list's values into ascending order, in place."""
    node = head
    for value in sorted(_values(head)):
        assert node is not None
        node.val = value
        node = node.next
    return head


def merge_nodes(head: ListNode | None) -> ListNode | None:
    """Replace each run between zero nodes by one node holding its sum.

    The head node is taken to be the leading zero; values after the last
    zero are dropped.
    """
    if head is None:
        raise ValueError("list must not be empty")
    sums = []
    running = 0
    for value in _values(head.next):
        if value == 0:
            sums.append(running)
            running = 0
        else:
            running += value
    return build_list(sums)


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Return a new list with every full group of k values reversed."""
    if k < 1:
        raise ValueError("k must be at least 1")
    values = _values(head)
    full = len(values) - len(values) % k
    for start in range(0, full, k):
        values[start:start + k] = values[start:start + k][::-1]
    return build_list(values)


def _spiral(m: int, n: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, m - 1, 0, n - 1
    direction = 0
    while top <= bottom and left <= right:
        if direction == 0:
            for col in range(left, right + 1):
                yield top, col
            top += 1
        elif direction == 1:
            for row in range(top, bottom + 1):
                yield row, right
            right -= 1
        elif direction == 2:
            for col in range(right, left - 1, -1):
                yield bottom, col
            bottom -= 1
        else:
            for row in range(bottom, top - 1, -1):
                yield row, left
            left += 1
        direction = (direction + 1) % 4


def spiral_matrix(m: int, n: int, head: ListNode | None) -> list[list[int]]:
    """Lay the list's values into an m-by-n grid in spiral order; -1 elsewhere."""
    grid = [[-1] * n for _ in range(m)]
    for (row, col), value in zip(_spiral(m, n), _values(head)):
        grid[row][col] = value
    return grid


def insert_greatest_common_divisors(head: ListNode | None) -> ListNode | None:
    """Insert the gcd of each adjacent pair between them, in place."""
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(gcd(node.val, following.val), following)
        node = following
    return head


def modified_list(nums: Iterable[int], head: ListNode | None) -> ListNode | None:
    """Unlink every node whose value appears in nums."""
    banned = set(nums)
    anchor = ListNode(0, head)
    node = anchor
    while node.next is not None:
        if node.next.val in banned:
            node.next = node.next.next
        else:
            node = node.next
    return anchor.next


def split_list_to_parts(head: ListNode | None, k: int) -> list[ListNode | None]:
    """Cut the list into k consecutive parts whose sizes differ by at most one."""
    if k < 1:
        raise ValueError("k must be at least 1")
    base, extra = divmod(len(_values(head)), k)
    parts: list[ListNode | None] = [None] * k
    node = head
    for index in range(k):
        if node is None:
            break
        parts[index] = node
        size = base + (1 if index < extra else 0)
        tail = node
        for _ in range(size - 1):
            assert tail.next is not None
            tail = tail.next
        node = tail.next
        tail.next = None
    return parts