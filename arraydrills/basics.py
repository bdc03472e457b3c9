"""Elementary array exercises: extremes, duplicates, permutations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence
from itertools import pairwise


def chocolate_distribution(packets: Sequence[int], students: int) -> int:
    """Smallest spread between the largest and smallest of ``students`` packets."""
    if students < 1:
        raise ValueError("there must be at least one student")
    if students > len(packets):
        raise ValueError("not enough packets for every student")
    ordered = sorted(packets)
    return min(high - low for low, high in zip(ordered, ordered[students - 1 :]))


def first_duplicate(values: Sequence[Hashable]) -> Hashable | None:
    """The earliest element that occurs again later, or None."""
    counts = Counter(values)
    return next((value for value in values if counts[value] > 1), None)


def max_min(values: Sequence[int]) -> tuple[int, int]:
    """Return ``(maximum, minimum)`` of a non-empty sequence."""
    if not values:
        raise ValueError("sequence must not be empty")
    return max(values), min(values)


def missing_and_repeating(values: Sequence[int]) -> tuple[int, int]:
    """For numbers 1..n with one value repeated and one missing, return ``(repeated, missing)``."""
    n = len(values)
    if n == 0:
        raise ValueError("sequence must not be empty")
    diff = sum(values) - n * (n + 1) // 2
    square_diff = sum(v * v for v in values) - n * (n + 1) * (2 * n + 1) // 6
    if diff == 0 or square_diff % diff:
        raise ValueError("values are not 1..n with exactly one repeat and one gap")
    both = square_diff // diff
    if (diff + both) % 2:
        raise ValueError("values are not 1..n with exactly one repeat and one gap")
    repeated = (diff + both) // 2
    missing = repeated - diff
    if not (1 <= missing <= n and 1 <= repeated <= n):
        raise ValueError("values are not 1..n with exactly one repeat and one gap")
    return repeated, missing


def next_permutation(values: Sequence[int]) -> list[int]:
    """The next lexicographic arrangement; the last one wraps to ascending order."""
    items = list(values)
    pivot = next(
        (i for i, (a, b) in reversed(list(enumerate(pairwise(items)))) if a < b),
        None,
    )
    if pivot is not None:
        successor = next(k for k in reversed(range(len(items))) if items[k] > items[pivot])
        items[pivot], items[successor] = items[successor], items[pivot]
        start = pivot + 1
    else:
        start = 0
    items[start:] = reversed(items[start:])
    return items


def reversed_copy(values: Sequence[int]) -> list[int]:
    """A new list holding ``values`` in reverse order."""
    return list(reversed(values))