"""Text patterns of stars, digits and letters."""

from __future__ import annotations

import argparse
from itertools import count, cycle
from typing import Iterable, Sequence


def _render(lines: Iterable[str]) -> str:
    return "".join(line + "\n" for line in lines)


def _pyramid_rows(n: int) -> list[str]:
    return [" " * (n - i + 1) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def _inverted_rows(n: int, first: int = 1) -> list[str]:
    return [" " * i + "*" * (2 * (n - i) + 1) for i in range(first, n + 1)]


def pattern1(n: int) -> str:
    """An n-by-n square of stars."""
    return _render("*" * n for _ in range(n))


def pattern2(n: int) -> str:
    """A right triangle of stars growing by one per row."""
    return _render("*" * i for i in range(1, n + 1))


def pattern3(n: int) -> str:
    """A right triangle of stars shrinking by one per row."""
    return _render("*" * i for i in range(n, 0, -1))


def pattern4(n: int) -> str:
    """Rows counting 1 up to the row number."""
    return _render("".join(str(j) for j in range(1, i + 1)) for i in range(1, n + 1))


def pattern5(n: int) -> str:
    """Each row repeats its own number that many times."""
    return _render(str(i) * i for i in range(1, n + 1))


def pattern6(n: int) -> str:
    """Floyd's triangle of consecutive numbers."""
    numbers = count(1)
    return _render(
        "".join(str(next(numbers)) for _ in range(i)) for i in range(1, n + 1)
    )


def pattern7(n: int) -> str:
    """A centred pyramid of stars."""
    return _render(_pyramid_rows(n))


def pattern8(n: int) -> str:
    """An inverted centred pyramid of stars."""
    return _render(_inverted_rows(n))


def pattern9(n: int) -> str:
    """A diamond: a pyramid followed by its inversion without the widest row."""
    return _render(_pyramid_rows(n) + _inverted_rows(n, first=2))


def pattern10(n: int) -> str:
    """A star triangle rising to n and falling back to an empty row."""
    rising = ["*" * i for i in range(1, n + 1)]
    falling = ["*" * (n - i) for i in range(1, n + 1)]
    return _render(rising + falling)


def pattern11(n: int) -> str:
    """A triangle of alternating ones and zeros, continuing across rows."""
    bits = cycle("10")
    return _render("".join(next(bits) for _ in range(i)) for i in range(1, n + 1))


def pattern12(n: int) -> str:
    """Mirrored number triangles separated by a shrinking gap."""
    lines = []
    for i in range(1, n + 1):
        ascending = "".join(str(j) for j in range(1, i + 1))
        descending = "".join(str(j) for j in range(i, 0, -1))
        lines.append(ascending + " " * (2 * (n - i)) + descending)
    return _render(lines)


def pattern13(n: int) -> str:
    """Rows spelling the alphabet from 'A' up to the row length."""
    return _render(
        "".join(chr(ord("A") + j) for j in range(i)) for i in range(1, n + 1)
    )


def pattern14(n: int) -> str:
    """Each row repeats the next letter that many times."""
    return _render(chr(ord("A") + i - 1) * i for i in range(1, n + 1))


def _border(n: int, cell: Iterable[str]) -> str:
    cells = iter(cell)
    lines = []
    for i in range(1, n + 1):
        lines.append("".join(
            next(cells) if i in (1, n) or j in (1, n) else "   "
            for j in range(1, n + 1)
        ))
    return _render(lines)


def pattern15(n: int) -> str:
    """The outline of an n-by-n square drawn with spaced stars."""
    return _border(n, cycle([" * "]))


def pattern16(n: int) -> str:
    """The outline of an n-by-n square drawn with successive letters."""
    return _border(n, (f" {chr(code)} " for code in count(ord("A"))))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the lettered square outline for a size given or asked for."""
    parser = argparse.ArgumentParser(description="Print a lettered square outline.")
    parser.add_argument("n", nargs="?", type=int, help="size of the square")
    args = parser.parse_args(argv)
    n = args.n if args.n is not None else int(input("Enter value of N : "))
    print(pattern16(n), end="")
    return 0