"""Exercises over lists of integers."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, combinations
from typing import Sequence

_MODULUS = 1_000_000_007


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than len(nums) // 2 times, or -1."""
    half = len(nums) // 2
    for value, count in Counter(nums).items():
        if count > half:
            return value
    return -1


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from a single buy followed by a later sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    buy = sell = prices[0]
    for price in prices:
        if price > sell:
            sell = price
        elif price < buy:
            buy = sell = price
        best = max(best, sell - buy)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Best profit when any number of buy/sell transactions is allowed."""
    if not prices:
        raise ValueError("prices must not be empty")
    profit = 0
    buy = prices[0]
    for price in prices[1:]:
        if price > buy:
            profit += price - buy
            buy = price
        if price < buy:
            buy = price
    return profit


def num_teams(rating: Sequence[int]) -> int:
    """Count strictly increasing or strictly decreasing index triples."""
    n = len(rating)
    count = 0
    for i in range(1, n - 1):
        middle = rating[i]
        left_smaller = sum(1 for value in rating[:i] if value < middle)
        right_larger = sum(1 for value in rating[i + 1:] if value > middle)
        left_larger = i - left_smaller
        right_smaller = n - i - 1 - right_larger
        count += left_smaller * right_larger + left_larger * right_smaller
    return count


def range_sum(nums: Sequence[int], n: int, left: int, right: int) -> int:
    """Sum of sorted subarray sums from position left to right (1-based)."""
    sums = sorted(
        total
        for start in range(n)
        for total in accumulate(nums[start:n])
    )
    return sum(sums[left - 1:right]) % _MODULUS


def count_good_triplets(arr: Sequence[int], a: int, b: int, c: int) -> int:
    """Count index triples whose pairwise differences stay within a, b, c."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(y - z) <= b and abs(x - z) <= c
    )


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether equal values occur at most k positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def max_frequency_elements(nums: Sequence[int]) -> int:
    """Total occurrences of all values that share the highest frequency."""
    counts = Counter(nums)
    highest = max(counts.values(), default=0)
    return sum(count for count in counts.values() if count == highest)


def number_of_pairs(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """Count pairs (i, j) where nums1[i] is divisible by nums2[j] * k."""
    return sum(1 for x in nums1 for y in nums2 if x % (y * k) == 0)


def count_complete_day_pairs(hours: Sequence[int]) -> int:
    """Count pairs of hours whose sum is a whole number of days."""
    return sum(1 for x, y in combinations(hours, 2) if (x + y) % 24 == 0)


def minimum_operations(nums: Sequence[int]) -> int:
    """Number of values that are not multiples of three."""
    return sum(1 for value in nums if value % 3 != 0)


def trap(heights: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    if len(heights) < 3:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    water = 0
    for i in range(1, len(heights) - 1):
        level = min(left_max[i - 1], right_max[i + 1]) - heights[i]
        if level > 0:
            water += level
    return water


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones."""
    best = streak = 0
    for value in nums:
        if value == 1:
            streak += 1
        else:
            best = max(best, streak)
            streak = 0
    return max(best, streak)


def lemonade_change(bills: Sequence[int]) -> bool:
    """Tell whether every customer paying 5, 10 or 20 can get change."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            tens += 1
            fives -= 1
        elif tens and fives:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def average_waiting_time(customers: Sequence[Sequence[int]]) -> float:
    """Mean wait of customers given as (arrival, preparation time) pairs."""
    if not customers:
        raise ValueError("customers must not be empty")
    finish = customers[0][0]
    total_wait = 0
    for arrival, duration in customers:
        finish = max(finish, arrival) + duration
        total_wait += finish - arrival
    return total_wait / len(customers)