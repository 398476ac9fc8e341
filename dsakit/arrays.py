"""Algorithms over one-dimensional integer sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from functools import reduce
from itertools import pairwise
from operator import xor
from typing import Iterable, Sequence


def max_area(heights: Sequence[int]) -> int:
    """Return the largest water area held between two of the given walls."""
    if not heights:
        raise ValueError("heights must not be empty")
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        width = right - left
        if heights[left] <= heights[right]:
            best = max(best, heights[left] * width)
            left += 1
        else:
            best = max(best, heights[right] * width)
            right -= 1
    return best


def find_duplicates(nums: Iterable[int]) -> list[int]:
    """Return the values seen twice, in the order their second copy appears.

    Every value must lie between 1 and the length of the input.
    """
    values = list(nums)
    limit = len(values)
    pending: set[int] = set()
    duplicates = []
    for value in values:
        if not 1 <= value <= limit:
            raise ValueError(f"value {value} outside 1..{limit}")
        if value in pending:
            duplicates.append(value)
            pending.remove(value)
        else:
            pending.add(value)
    return duplicates


def max_product(values: Sequence[int]) -> int:
    """Return the largest product of a contiguous, non-empty subarray."""
    if not values:
        raise ValueError("values must not be empty")
    first = values[0]
    high = low = best = first
    for value in values[1:]:
        if value < 0:
            high, low = low, high
        high = max(value * high, value)
        low = min(value * low, value)
        best = max(best, high)
    return best


def missing_number(values: Iterable[int]) -> int:
    """Return the one number of 1..n+1 absent from the n given values."""
    items = list(values)
    present = reduce(xor, items, 0)
    expected = reduce(xor, range(1, len(items) + 2), 0)
    return present ^ expected


def or_with_next(values: Sequence[int]) -> list[int]:
    """Replace each value but the last with its bitwise OR with its successor."""
    if not values:
        return []
    return [a | b for a, b in pairwise(values)] + [values[-1]]


def floor_value(values: Sequence[int], target: int) -> int:
    """Return the largest value not above target in sorted values, else target."""
    index = bisect_right(values, target)
    return values[index - 1] if index else target


def ceil_value(values: Sequence[int], target: int) -> int:
    """Return the smallest value not below target in sorted values, else target."""
    index = bisect_left(values, target)
    return values[index] if index < len(values) else target


def largest_element(values: Iterable[int]) -> int:
    """Return the largest value."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return max(items)


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous, non-empty subarray."""
    if not values:
        raise ValueError("values must not be empty")
    if all(value <= 0 for value in values):
        return max(values)
    current = best = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def is_palindromic_array(values: Iterable[int]) -> bool:
    """Tell whether every value reads the same with its digits reversed."""
    for value in values:
        if value < 0:
            return False
        digits = str(value)
        if digits != digits[::-1]:
            return False
    return True


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Return the values with repeats dropped, keeping first occurrences in order."""
    return list(dict.fromkeys(values))


def rotate(values: Sequence[int], k: int) -> list[int]:
    """Rotate the values k places to the right."""
    items = list(values)
    if not items:
        return []
    shift = k % len(items)
    if not shift:
        return items
    return items[-shift:] + items[:-shift]