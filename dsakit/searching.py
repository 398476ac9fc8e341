"""Searching in sequences; each search returns an index or None."""

from __future__ import annotations

from math import isqrt
from typing import Sequence


def jump_search(values: Sequence[int], target: int) -> int | None:
    """Find target in sorted values by jumping in blocks of sqrt(n)."""
    n = len(values)
    if n == 0:
        return None
    jump = isqrt(n)
    step = jump
    prev = 0
    while values[min(step, n) - 1] < target:
        prev = step
        step += jump
        if prev >= n:
            return None
    while values[prev] < target:
        prev += 1
        if prev == min(step, n):
            return None
    return prev if values[prev] == target else None


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Find target in sorted values by halving the range iteratively."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search_recursive(values: Sequence[int], target: int) -> int | None:
    """Find target in sorted values by halving the range recursively."""

    def search(low: int, high: int) -> int | None:
        if high < low:
            return None
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(values) - 1)


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first occurrence of target."""
    return next((i for i, value in enumerate(values) if value == target), None)