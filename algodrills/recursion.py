"""Small recursion drills."""

from __future__ import annotations

_COUNT_LIMIT = 5


def sum_to(n: int) -> int:
    """Sum of the integers from 1 to n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return sum(range(1, n + 1))


def count_up(n: int) -> list[int]:
    """The numbers counted from n up to, but not including, 5."""
    if n > _COUNT_LIMIT:
        raise ValueError(f"counting from {n} never reaches {_COUNT_LIMIT}")
    return list(range(n, _COUNT_LIMIT))


def printer(i: int, n: int) -> list[int]:
    """The numbers 1 to i in order, as produced by recursing down from i."""
    if i < 1:
        return []
    return printer(i - 1, n) + [i]