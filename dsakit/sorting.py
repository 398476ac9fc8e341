"""Comparison and distribution sorts; each returns a new sorted list."""

from __future__ import annotations

from typing import Iterable


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort by building a max-heap and moving its root to the end repeatedly."""
    items = list(values)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, root)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each value into the sorted prefix before it."""
    items: list[int] = []
    for key in values:
        position = len(items)
        while position > 0 and items[position - 1] > key:
            position -= 1
        items.insert(position, key)
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by swapping neighbours, stopping after a pass with no swaps."""
    items = list(values)
    n = len(items)
    for done in range(n):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _require_non_negative(items: list[int]) -> None:
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    items = list(values)
    if not items:
        return items
    _require_non_negative(items)
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting how often each value occurs."""
    items = list(values)
    if not items:
        return items
    _require_non_negative(items)
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def cycle_sort(values: Iterable[int]) -> list[int]:
    """Sort by rotating each cycle of misplaced values into place."""
    items = list(values)
    n = len(items)
    for start in range(n - 1):
        item = items[start]
        pos = start + sum(1 for value in items[start + 1:] if value < item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = start + sum(1 for value in items[start + 1:] if value < item)
            while item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Sort stably by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Sort by partitioning around the last element of each range."""
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot = _partition(items, low, high)
            ranges.append((low, pivot - 1))
            ranges.append((pivot + 1, high))
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining value to the front each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items