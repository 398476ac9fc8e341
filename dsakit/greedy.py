"""Greedy counting problems: refuelling stops, coins and bank notes."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable

_LOTTERY_BILLS = (100, 20, 10, 5, 1)


def min_refills(distance: int, mileage: int, stops: Iterable[int]) -> int:
    """Return the fewest refills needed to drive distance miles.

    The tank holds mileage miles and starts full; stops are the sorted
    distances of the fuel stations from home. Raises ValueError when some
    gap between consecutive points is longer than a full tank.
    """
    points = [0, *stops, distance]
    if any(after - before > mileage for before, after in pairwise(points)):
        raise ValueError("destination cannot be reached")
    refills = 0
    last = 0
    for here, following in pairwise(points):
        if here - last < mileage and following - last > mileage:
            last = here
            refills += 1
        elif here - last == mileage:
            last = here
            refills += 1
    if distance - last > mileage:
        refills += 1
    return refills


def coin_change(amount: int) -> int:
    """Return the fewest coins worth 1, 5 and 10 that make up amount."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    tens, rest = divmod(amount, 10)
    fives, ones = divmod(rest, 5)
    return tens + fives + ones


def lottery_bills(amount: int) -> int:
    """Return the fewest bills of 1, 5, 10, 20 and 100 that make up amount."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    count = 0
    for bill in _LOTTERY_BILLS:
        used, amount = divmod(amount, bill)
        count += used
    return count