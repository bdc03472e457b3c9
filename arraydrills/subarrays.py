"""Subarray and prefix-product problems over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate, islice
from operator import mul


@dataclass(frozen=True)
class SubarrayResult:
    """A contiguous run ``values[start:stop]`` and its sum."""

    total: int
    start: int
    stop: int
    items: tuple[int, ...]


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def max_product_subarray(values: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous run."""
    if not values:
        raise ValueError("sequence must not be empty")
    high = low = best = values[0]
    for value in islice(values, 1, None):
        if value < 0:
            high, low = low, high
        high = max(value, value * high)
        low = min(value, value * low)
        best = max(best, high)
    return best


def max_subarray(values: Sequence[int]) -> SubarrayResult:
    """Largest-sum contiguous run, found with Kadane's method."""
    if not values:
        raise ValueError("sequence must not be empty")
    running = best = values[0]
    candidate_start = start = end = 0
    for index, value in enumerate(islice(values, 1, None), start=1):
        if running < 0:
            running = value
            candidate_start = index
        else:
            running += value
        if best < running:
            best = running
            start = candidate_start
            end = index
    return SubarrayResult(best, start, end + 1, tuple(values[start : end + 1]))


def trapped_rain_water(heights: Sequence[int]) -> int:
    """Units of water held between bars of the given heights."""
    if not heights:
        return 0
    left = accumulate(heights, max)
    right = reversed(list(accumulate(reversed(heights), max)))
    return sum(max(0, min(l, r) - h) for l, r, h in zip(left, right, heights))


def product_except_self(values: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    prefix = [1, *accumulate(values[:-1], mul)] if values else []
    result = []
    suffix = 1
    for before, value in zip(reversed(prefix), reversed(values)):
        result.append(before * suffix)
        suffix *= value
    result.reverse()
    return result