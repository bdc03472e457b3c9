from itertools import combinations, pairwise, permutations

import pytest

from arraydrills.basics import (
    chocolate_distribution,
    first_duplicate,
    max_min,
    missing_and_repeating,
    next_permutation,
    reversed_copy,
)

PACKETS = [7, 8, 9, 10, 5, 4, 5, 3, 2]


def test_chocolate_source_example():
    assert chocolate_distribution(PACKETS, 3) == 1


@pytest.mark.parametrize("students", range(1, len(PACKETS) + 1))
def test_chocolate_matches_every_choice(students):
    best = min(max(c) - min(c) for c in combinations(PACKETS, students))
    assert chocolate_distribution(PACKETS, students) == best


def test_chocolate_does_not_mutate():
    packets = list(PACKETS)
    chocolate_distribution(packets, 4)
    assert packets == PACKETS


@pytest.mark.parametrize("students", [0, 10])
def test_chocolate_bad_student_count(students):
    with pytest.raises(ValueError):
        chocolate_distribution(PACKETS, students)


def test_first_duplicate_source_example():
    assert first_duplicate([1, 4, 6, 8, 9, 9, 8]) == 8


def test_first_duplicate_none():
    assert first_duplicate([1, 2, 3]) is None
    assert first_duplicate([]) is None


def test_first_duplicate_appears_twice():
    values = [5, 3, 7, 3, 5]
    dup = first_duplicate(values)
    assert values.count(dup) > 1
    assert values.index(dup) == 0


def test_max_min():
    assert max_min([4, -2, 9, 0]) == (9, -2)
    assert max_min([7]) == (7, 7)


def test_max_min_empty_raises():
    with pytest.raises(ValueError):
        max_min([])


def test_missing_and_repeating_source_example():
    assert missing_and_repeating([1, 3, 3, 4, 5]) == (3, 2)


@pytest.mark.parametrize("n", [2, 5, 8])
def test_missing_and_repeating_all_cases(n):
    for repeated in range(1, n + 1):
        for missing in range(1, n + 1):
            if repeated == missing:
                continue
            values = [repeated if v == missing else v for v in range(1, n + 1)]
            assert missing_and_repeating(values) == (repeated, missing)


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [], [2, 2, 2]])
def test_missing_and_repeating_invalid(values):
    with pytest.raises(ValueError):
        missing_and_repeating(values)


@pytest.mark.parametrize("base", [[1, 2, 3, 4], [1, 1, 5, 4], [2, 2, 3, 3]])
def test_next_permutation_follows_lexicographic_order(base):
    ordered = sorted(set(permutations(base)))
    for current, following in pairwise(ordered):
        assert next_permutation(current) == list(following)
    assert next_permutation(ordered[-1]) == list(ordered[0])


def test_next_permutation_source_example_is_successor():
    values = [1, 1, 5, 4, 1]
    ordered = sorted(set(permutations(values)))
    position = ordered.index(tuple(values))
    assert next_permutation(values) == list(ordered[position + 1])
    assert values == [1, 1, 5, 4, 1]


def test_reversed_copy():
    values = [1, 2, 3, 4, 5]
    result = reversed_copy(values)
    assert result[0] == values[-1] and result[-1] == values[0]
    assert reversed_copy(result) == values
    assert values == [1, 2, 3, 4, 5]