"""Exercises over strings of letters."""

from __future__ import annotations

from typing import Sequence

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"

_MOVES = {
    "R": (0, 1),
    "L": (0, -1),
    "U": (-1, 0),
}
_DOWN = (1, 0)

_FLIPPED_BIT = {"0": "1", "1": "0"}


def reverse_parentheses(s: str) -> str:
    """Reverse the lowercase text inside each bracket pair, innermost first.

    Characters other than lowercase letters and brackets are dropped.
    """
    stack: list[str] = []
    for ch in s:
        if "a" <= ch <= "z" or ch == "(":
            stack.append(ch)
        elif ch == ")":
            segment: list[str] = []
            while stack and stack[-1] != "(":
                segment.append(stack.pop())
            if stack:
                stack.pop()
            stack.extend(segment)
    return "".join(stack)


def balanced_string_split(s: str) -> int:
    """Count the prefixes in which 'L' and every other character balance."""
    balance = 0
    count = 0
    for ch in s:
        balance += 1 if ch == "L" else -1
        if balance == 0:
            count += 1
    return count


def restore_string(s: str, indices: Sequence[int]) -> str:
    """Place each character of s at the position indices gives for it."""
    placed = [""] * len(indices)
    for ch, position in zip(s, indices):
        placed[position] = ch
    return "".join(placed) + s[len(indices):]


def find_kth_bit(n: int, k: int) -> str:
    """The k-th bit (1-based) of the n-th invert-and-reverse sequence."""
    if n < 1:
        raise ValueError("n must be at least 1")
    length = (1 << n) - 1
    if not 1 <= k <= length:
        raise ValueError(f"k must be between 1 and {length}")
    if n == 1:
        return "0"
    mid = length // 2 + 1
    if k == mid:
        return "1"
    if k < mid:
        return find_kth_bit(n - 1, k)
    return _FLIPPED_BIT[find_kth_bit(n - 1, length - k + 1)]


def modify_string(s: str) -> str:
    """Replace each '?' by the first letter unlike either neighbour."""
    chars = list(s)
    last = len(chars) - 1
    for i, ch in enumerate(chars):
        if ch != "?":
            continue
        for candidate in _ALPHABET:
            if i > 0 and chars[i - 1] == candidate:
                continue
            if i < last and chars[i + 1] == candidate:
                continue
            chars[i] = candidate
            break
    return "".join(chars)


def minimum_deletions(s: str) -> int:
    """Fewest deletions leaving no 'b' before an 'a'."""
    a_to_right = s.count("a")
    b_to_left = 0
    best = len(s)
    for ch in s:
        if ch == "a":
            a_to_right -= 1
        best = min(best, a_to_right + b_to_left)
        if ch == "b":
            b_to_left += 1
    return best


def get_lucky(s: str, k: int) -> int:
    """Spell letters as alphabet positions, then sum the digits k times."""
    number = "".join(str(ord(ch) - 96) for ch in s)
    for _ in range(k):
        number = str(sum(int(digit) for digit in number))
    return int(number)


def execute_instructions(n: int, start_pos: Sequence[int], s: str) -> list[int]:
    """For each suffix of s, count the moves made before leaving the n-by-n grid."""
    start_row, start_col = start_pos[0], start_pos[1]
    result = []
    for begin in range(len(s)):
        row, col = start_row, start_col
        executed = 0
        for instruction in s[begin:]:
            d_row, d_col = _MOVES.get(instruction, _DOWN)
            row += d_row
            col += d_col
            if not (0 <= row < n and 0 <= col < n):
                break
            executed += 1
        result.append(executed)
    return result


def cells_in_range(s: str) -> list[str]:
    """List the spreadsheet cells in a range such as 'K1:L2', column by column."""
    first_col, first_row, last_col, last_row = s[0], int(s[1]), s[3], int(s[4])
    return [
        f"{chr(col)}{row}"
        for col in range(ord(first_col), ord(last_col) + 1)
        for row in range(first_row, last_row + 1)
    ]


def min_length(s: str) -> int:
    """Length left after repeatedly removing every 'AB' and 'CD'."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] + ch in ("AB", "CD"):
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def count_key_changes(s: str) -> int:
    """Count neighbouring characters that need a different key, ignoring case."""
    return sum(
        1 for a, b in zip(s, s[1:]) if abs(ord(a) - ord(b)) not in (0, 32)
    )


def _expand(s: str, left: int, right: int) -> str:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1:right]


def longest_palindrome(s: str) -> str:
    """The first longest palindromic substring of s."""
    best = ""
    for centre in range(len(s)):
        for candidate in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def convert(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it row by row."""
    if num_rows <= 1 or len(s) <= 1:
        return s
    rows = [""] * min(num_rows, len(s))
    current = 0
    step = -1
    for ch in s:
        rows[current] += ch
        if current == 0 or current == num_rows - 1:
            step = -step
        current += step
    return "".join(rows)


def convert_to_title(column_number: int) -> str:
    """Spreadsheet column title for a 1-based column number."""
    letters = []
    while column_number > 0:
        column_number, digit = divmod(column_number - 1, 26)
        letters.append(chr(ord("A") + digit))
    return "".join(reversed(letters))