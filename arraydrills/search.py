"""Searching in rotated sorted sequences and order-statistic selection."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def find_rotation_minimum(values: Sequence[int]) -> int:
    """Return the smallest element of a rotated ascending sequence."""
    if not values:
        raise ValueError("cannot find the minimum of an empty sequence")
    left, right = 0, len(values) - 1
    while left < right:
        mid = (left + right) // 2
        if values[mid] > values[right]:
            left = mid + 1
        else:
            right = mid
    return values[left]


def rotate_from_index(values: Sequence[int], index: int) -> list[int]:
    """Return a copy of ``values`` rotated so that it starts at ``index``."""
    if not 0 <= index <= len(values):
        raise ValueError(f"rotation index {index} out of range for length {len(values)}")
    return [*values[index:], *values[:index]]


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Binary-search a rotated ascending sequence; return the index or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == target:
            return mid
        if values[left] <= values[mid]:
            if values[left] <= target < values[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif values[mid] < target <= values[right]:
            left = mid + 1
        else:
            right = mid - 1
    return None


def pair_with_sum_rotated(values: Sequence[int], key: int) -> tuple[int, int] | None:
    """Find two elements of a rotated ascending sequence adding up to ``key``.

    Returns the pair as ``(smaller, larger)`` or None when there is none.
    """
    n = len(values)
    if n < 2:
        return None
    pivot = next((i for i, (a, b) in enumerate(pairwise(values)) if a > b), n - 1)
    low = (pivot + 1) % n
    high = pivot
    while low != high:
        total = values[low] + values[high]
        if total == key:
            return values[low], values[high]
        if total < key:
            low = (low + 1) % n
        else:
            high = (high - 1) % n
    return None


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] > pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def kth_largest(values: Sequence[int], k: int) -> int:
    """Return the k-th largest element (1-based) using quickselect."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k={k} out of range for {len(values)} elements")
    items = list(values)
    target = k - 1
    low, high = 0, len(items) - 1
    while True:
        pos = _partition(items, low, high)
        if pos == target:
            return items[pos]
        if pos > target:
            high = pos - 1
        else:
            low = pos + 1