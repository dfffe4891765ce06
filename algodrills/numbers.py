"""Integer and digit-string exercises."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeros in n!."""
    total = 0
    while n // 5 > 0:
        n //= 5
        total += n
    return total


def _complement(value: int) -> int:
    if value < 0:
        raise ValueError("complement is defined for non-negative integers only")
    if value == 0:
        return 1
    mask = (1 << value.bit_length()) - 1
    return value ^ mask


def bitwise_complement(n: int) -> int:
    """Flip every bit of n below its highest set bit."""
    return _complement(n)


def find_complement(num: int) -> int:
    """Flip every bit of num below its highest set bit."""
    return _complement(num)


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing digit squares of n reaches 1."""
    seen = {n}
    while n != 1:
        n = n * n if n <= 9 else _digit_square_sum(n)
        if n in seen:
            return False
        seen.add(n)
    return True


def _power(x: float, n: int) -> float:
    if n == 0:
        return 1.0
    half = _power(x, n // 2)
    return half * half if n % 2 == 0 else half * half * x


def my_pow(x: float, n: int) -> float:
    """Raise x to the integer power n by repeated squaring."""
    if n < 0:
        x = 1 / x
        return _power(x, -(n + 1)) * x
    return _power(x, n)


def min_steps(n: int) -> int:
    """Fewest copy-all/paste operations to get n characters from one."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 0
    steps = [0] * (max(n, 2) + 1)
    steps[2] = 2
    for i in range(3, n + 1):
        steps[i] = i
        for j in range(i // 2, 0, -1):
            if i % j == 0:
                steps[i] = min(steps[i], steps[j] + i // j)
    return steps[n]


def num_water_bottles(bottles: int, exchange: int) -> int:
    """Total bottles drunk when `exchange` empties buy one full bottle."""
    if exchange < 2:
        raise ValueError("exchange must be at least 2")
    total = empty = bottles
    while empty >= exchange:
        bought, leftover = divmod(empty, exchange)
        total += bought
        empty = bought + leftover
    return total


def difference_of_sum(nums: Iterable[int]) -> int:
    """Absolute difference between the element sum and the digit sum."""
    element_sum = 0
    digit_sum = 0
    for value in nums:
        element_sum += value
        if value <= 9:
            digit_sum += value
        else:
            digit_sum += sum(int(digit) for digit in str(value))
    return abs(element_sum - digit_sum)


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative decimal strings."""
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def multiply(num1: str, num2: str) -> str:
    """Multiply two non-negative decimal strings by long multiplication."""
    result = "0"
    for shift, multiplier in enumerate(reversed(num2)):
        row = []
        carry = 0
        for digit in reversed(num1):
            carry, value = divmod(int(digit) * int(multiplier) + carry, 10)
            row.append(str(value))
        if carry:
            row.append(str(carry))
        partial = "".join(reversed(row)) + "0" * shift
        result = add_strings(result, partial)
    stripped = result.lstrip("0")
    return stripped or "0"