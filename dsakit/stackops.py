"""Stack-based sequence problems."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def next_greater(values: Sequence[int]) -> list[int | None]:
    """For each value, return the first later value that is larger, or None."""
    result: list[int | None] = [None] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def next_greater_frequency(values: Sequence[int]) -> list[int | None]:
    """For each value, return the nearest later value occurring more often, or None."""
    freq = Counter(values)
    result: list[int | None] = [None] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and freq[values[waiting[-1]]] < freq[value]:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def reverse_words(text: str) -> str:
    """Reverse the letters of every space-separated word, keeping the spaces."""
    return " ".join(word[::-1] for word in text.split(" "))


def sort_stack(stack: Iterable[int]) -> list[int]:
    """Return the stack sorted so that its largest item is on top (the end)."""
    return sorted(stack)


def reverse_stack(stack: Iterable[int]) -> list[int]:
    """Return the stack with its bottom and top exchanged."""
    return list(stack)[::-1]