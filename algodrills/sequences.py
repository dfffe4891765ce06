"""Exercises that search, reorder and combine integer sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from itertools import accumulate
from typing import Sequence


def rotate(nums: list[int], k: int) -> None:
    """Rotate nums to the right by k positions, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of two values adding up to target, or [-1, -1].

    The smaller value's index comes first.
    """
    ordered = sorted(nums)
    pair: tuple[int, int] | None = None
    for i, value in enumerate(ordered[:-1]):
        wanted = target - value
        j = bisect_left(ordered, wanted, i + 1)
        if j < len(ordered) and ordered[j] == wanted:
            pair = (value, wanted)
            break
    if pair is None:
        return [-1, -1]

    smaller, larger = pair
    first = second = -1
    for index, value in enumerate(nums):
        if value == smaller and first == -1:
            first = index
        elif value == larger and second == -1:
            second = index
    return [first, second]


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triplets whose values sum to zero."""
    ordered = sorted(nums)
    last = len(ordered) - 1
    triplets: list[list[int]] = []
    for i, value in enumerate(ordered):
        if i > 0 and value == ordered[i - 1]:
            continue
        lo, hi = i + 1, last
        while lo < hi:
            total = value + ordered[lo] + ordered[hi]
            if total > 0:
                hi -= 1
            elif total < 0:
                lo += 1
            else:
                triplets.append([value, ordered[lo], ordered[hi]])
                while lo < hi and ordered[lo] == ordered[lo + 1]:
                    lo += 1
                while lo < hi and ordered[hi] == ordered[hi - 1]:
                    hi -= 1
                lo += 1
                hi -= 1
    return triplets


def create_target_array(nums: Sequence[int], index: Sequence[int]) -> list[int]:
    """Insert each nums value at the matching index position, in turn."""
    result: list[int] = []
    for value, position in zip(nums, index, strict=True):
        result.insert(position, value)
    return result


def decode(encoded: Sequence[int], first: int) -> list[int]:
    """Recover an array from the XORs of its neighbours and its first value."""
    return list(accumulate(encoded, lambda prev, code: prev ^ code, initial=first))


def build_array(nums: Sequence[int]) -> list[int]:
    """Return [nums[nums[i]] for each position i]."""
    return [nums[value] for value in nums]


def min_max_game(nums: Sequence[int]) -> int:
    """Repeatedly fold pairs alternately by min and max until one value remains."""
    if not nums:
        raise ValueError("nums must not be empty")
    values = list(nums)
    while len(values) != 1:
        values = [
            (min if position % 2 == 0 else max)(a, b)
            for position, (a, b) in enumerate(zip(values[0::2], values[1::2]))
        ]
        if not values:
            raise ValueError("nums cannot be folded to a single value")
    return values[0]


def search(nums: Sequence[int], target: int) -> int:
    """Binary search a sorted sequence; return the index of target or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def _merge_sort(values: list[int]) -> list[int]:
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    left = _merge_sort(values[:mid])
    right = _merge_sort(values[mid:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def sort_array(nums: list[int]) -> list[int]:
    """Merge-sort nums in place and return it."""
    nums[:] = _merge_sort(list(nums))
    return nums


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Sorted multiset intersection of two sequences."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def can_be_equal(target: Sequence[int], arr: Sequence[int]) -> bool:
    """Tell whether arr can be rearranged into target."""
    return sorted(arr) == sorted(target)


def array_rank_transform(arr: Sequence[int]) -> list[int]:
    """Replace each value by its dense rank, starting at 1."""
    ranks = {value: rank for rank, value in enumerate(sorted(set(arr)), start=1)}
    return [ranks[value] for value in arr]


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Names ordered by height, tallest first."""
    ranked = sorted(zip(heights, names, strict=True), reverse=True)
    return [name for _, name in ranked]