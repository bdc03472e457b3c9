# arraydrills

A small collection of well-known array algorithms written in plain Python.
It needs only the standard library. None of the functions change the
sequences they are given. Where a function needs a copy to work on, it
makes one.

## Installation

```
pip install arraydrills
```

## Modules

### `arraydrills.search`

- `find_rotation_minimum(values)`: finds the smallest element of a rotated ascending sequence by binary search. It raises `ValueError` if the sequence is empty.
- `rotate_from_index(values, index)`: returns a new list that starts at `index` and wraps around to the front. It raises `ValueError` unless `0 <= index <= len(values)`.
- `search_rotated(values, target)`: binary-searches a rotated ascending sequence. It returns the index of `target`, or `None` if `target` is not there.
- `pair_with_sum_rotated(values, key)`: finds two elements of a rotated ascending sequence whose sum is `key`. It returns them as `(smaller, larger)`, or `None` if there is no such pair. It also returns `None` when the sequence has fewer than two elements.
- `kth_largest(values, k)`: returns the k-th largest element, counting from 1, found by quickselect. It raises `ValueError` unless `1 <= k <= len(values)`.

### `arraydrills.subarrays`

- `max_profit(prices)`: the best profit from one buy followed by one later sell. It returns `0` if no trade makes a profit.
- `max_product_subarray(values)`: the largest product of a non-empty contiguous run. It raises `ValueError` if the sequence is empty.
- `max_subarray(values)`: finds the largest-sum contiguous run with Kadane's method. It returns a frozen `SubarrayResult` with these fields:
  - `total`
  - `start`
  - `stop`
  - `items`

  The run is `values[start:stop]`. The function raises `ValueError` if the sequence is empty.
- `trapped_rain_water(heights)`: the units of water held between bars of the given heights. It returns `0` for an empty sequence.
- `product_except_self(values)`: a list that holds, for each position, the product of every other element. It uses no division.

### `arraydrills.basics`

- `chocolate_distribution(packets, students)`: gives one packet to each student and returns the smallest possible difference between the largest and the smallest packet given out. It raises `ValueError` if there are no students or if there are more students than packets.
- `first_duplicate(values)`: the earliest element of the sequence whose value occurs more than once, or `None` if there is none.
- `max_min(values)`: returns `(maximum, minimum)`. It raises `ValueError` if the sequence is empty.
- `missing_and_repeating(values)`: takes the numbers `1..n` with one value repeated and one value missing, and returns `(repeated, missing)`. It raises `ValueError` if the input does not have that shape.
- `next_permutation(values)`: returns the next arrangement in lexicographic order as a new list. After the last arrangement it wraps around to ascending order.
- `reversed_copy(values)`: a new list that holds the elements in reverse order.

## Example

```python
from arraydrills.search import kth_largest, search_rotated
from arraydrills.subarrays import max_profit, max_subarray, trapped_rain_water
from arraydrills.basics import next_permutation

max_profit([7, 1, 10, 3, 6, 4])            # 9
trapped_rain_water([0, 1, 0, 3, 0, 2])     # 3
kth_largest([7, 10, 4, 3, 20, 15], 4)      # 7
search_rotated([4, 5, 6, 1, 2, 3], 2)      # 4
search_rotated([4, 5, 6, 1, 2, 3], 9)      # None
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]).items   # (4, -1, 2, 1)
next_permutation([3, 2, 1])                # [1, 2, 3]
```

## What it does not do

This is a library of functions only. It has no command-line program and
does not prompt for input. To run an algorithm, call the function from
your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```