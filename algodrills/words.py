"""Exercises over words, sentences and short records."""

from __future__ import annotations

import re
from collections import Counter, defaultdict
from typing import Iterable, Sequence

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
_KEYS_PER_ROUND = 8
_SENIOR_AGE = 60

_FORMULA_PARTS = re.compile(
    r"(?P<element>[A-Z][a-z]*)(?P<count>\d*)"
    r"|(?P<open>\()"
    r"|(?P<close>\))(?P<multiplier>\d*)"
)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ransom_note can be cut from the letters of magazine."""
    available = Counter(magazine)
    for ch in ransom_note:
        if available[ch] <= 0:
            return False
        available[ch] -= 1
    return True


def min_operations(logs: Iterable[str]) -> int:
    """Depth below the main folder after following the change-folder logs."""
    depth = 0
    for entry in logs:
        if entry == "../":
            depth = max(depth - 1, 0)
        elif entry != "./":
            depth += 1
    return depth


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Count the words made only of characters in allowed."""
    permitted = set(allowed)
    return sum(1 for word in words if set(word) <= permitted)


def kth_distinct(arr: Sequence[str], k: int) -> str:
    """The k-th string (1-based) that occurs exactly once, or ''."""
    if k <= 0:
        return ""
    counts = Counter(arr)
    for value in arr:
        if counts[value] == 1:
            k -= 1
            if k == 0:
                return value
    return ""


def decode_message(key: str, message: str) -> str:
    """Decode message with the substitution table given by key's first letters.

    Spaces are kept; characters the key never names decode to NUL.
    """
    table: dict[str, str] = {}
    letters = iter(_ALPHABET)
    for ch in key:
        if ch != " " and ch not in table:
            table[ch] = next(letters, "\0")
    return "".join(" " if ch == " " else table.get(ch, "\0") for ch in message)


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t is a rearrangement of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def count_seniors(details: Iterable[str]) -> int:
    """Count passenger records whose age field exceeds 60."""
    return sum(1 for record in details if int(record[11:13]) > _SENIOR_AGE)


def word_pattern(pattern: str, s: str) -> bool:
    """Tell whether the space-separated words of s follow pattern one-to-one."""
    words = s.split(" ")
    if len(pattern) != len(words):
        return False
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for letter, word in zip(pattern, words):
        if letter in mapping:
            if mapping[letter] != word:
                return False
        else:
            if word in used:
                return False
            mapping[letter] = word
            used.add(word)
    return True


def minimum_pushes(word: str) -> int:
    """Fewest key presses to type word with letters remapped to eight keys."""
    if len(word) <= _KEYS_PER_ROUND:
        return len(word)
    frequencies = sorted(Counter(word).values(), reverse=True)
    return sum(
        count * (rank // _KEYS_PER_ROUND + 1)
        for rank, count in enumerate(frequencies)
    )


def find_permutation_difference(s: str, t: str) -> int:
    """Sum of distances between each character's positions in s and t."""
    total = 0
    for i, ch in enumerate(s):
        j = t.find(ch)
        if j != -1:
            total += abs(i - j)
    return total


def _words(sentence: str) -> list[str]:
    return [word for word in sentence.split(" ") if word]


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Words that occur exactly once across both sentences."""
    counts = Counter(_words(s1) + _words(s2))
    return [word for word, count in counts.items() if count == 1]


def count_of_atoms(formula: str) -> str:
    """Count the atoms of a chemical formula, elements in sorted order.

    Raises ValueError when the brackets do not balance.
    """
    stack: list[defaultdict[str, int]] = [defaultdict(int)]
    for match in _FORMULA_PARTS.finditer(formula):
        if match.group("element"):
            stack[-1][match.group("element")] += int(match.group("count") or "1")
        elif match.group("open"):
            stack.append(defaultdict(int))
        else:
            if len(stack) == 1:
                raise ValueError("unmatched ')' in formula")
            multiplier = int(match.group("multiplier") or "1")
            group = stack.pop()
            for element, count in group.items():
                stack[-1][element] += count * multiplier
    if len(stack) != 1:
        raise ValueError("unmatched '(' in formula")
    return "".join(
        element + ("" if count == 1 else str(count))
        for element, count in sorted(stack[0].items())
    )