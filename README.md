# arraykit

A small collection of algorithms over integer sequences. It needs nothing
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `arraykit.inplace`: in-place compaction and merging

These functions change the list they are given. The compaction functions
return the length of the meaningful prefix. Anything after that prefix is
unspecified.

- `remove_duplicates(nums)` compacts a sorted list so that each value appears
  once, and returns the number of distinct values.
- `remove_duplicates_keep_two(nums)` compacts a sorted list so that each value
  appears at most twice, and returns the length of the kept prefix.
- `remove_element(nums, val)` moves every element not equal to `val` to the
  front, in order, and returns how many were kept.
- `merge_sorted(nums1, m, nums2, n)` merges the first `n` items of `nums2` into
  `nums1`. The first `m` items of `nums1` must be sorted, and `nums1` must have
  room for `m + n` items. It returns `None`. It raises `ValueError` when `m` or
  `n` is negative, when `nums1` is shorter than `m + n`, or when `nums2` is
  shorter than `n`.

```python
from arraykit.inplace import remove_duplicates, merge_sorted

nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
k = remove_duplicates(nums)
assert nums[:k] == [0, 1, 2, 3, 4]

a = [1, 2, 3, 0, 0, 0]
merge_sorted(a, 3, [2, 5, 6], 3)
assert a == [1, 2, 2, 3, 5, 6]
```

### `arraykit.partition`: grouping by spread

- `partition_array(nums, k)` returns the fewest groups such that, within each
  group, the largest and smallest values differ by at most `k`. It raises
  `ValueError` for an empty input.
- `divide_array(nums, k)` sorts the values and splits them into consecutive
  triples. It returns `[]` if any triple spreads by more than `k`. It raises
  `ValueError` if the number of values is not a multiple of three.

The input is not modified.

```python
from arraykit.partition import partition_array, divide_array

assert partition_array([3, 6, 1, 2, 5], 2) == 2
assert divide_array([1, 3, 4, 8, 7, 9, 3, 5, 1], 2) == [[1, 1, 3], [3, 4, 5], [7, 8, 9]]
assert divide_array([2, 4, 2, 2, 5, 2], 2) == []
```

### `arraykit.scan`: single-pass scans

- `majority_element(nums)` returns the value that appears in more than half of
  `nums`, using Boyer–Moore voting. If no value has a strict majority, the
  result is the last surviving candidate.
- `maximum_difference(nums)` returns the largest `nums[j] - nums[i]` with
  `i < j` and `nums[i] < nums[j]`, or `-1` if no such pair exists.

Both functions accept any iterable. Both raise `ValueError` when it is empty.

```python
from arraykit.scan import majority_element, maximum_difference

assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2
assert maximum_difference([7, 1, 5, 4]) == 4
assert maximum_difference([9, 4, 3, 2]) == -1
```

### `arraykit.counting`

- `count_good_arrays(n, m, k)` counts the arrays of length `n` over the values
  `1..m` that have exactly `k` equal adjacent pairs. The count is taken modulo
  `MOD` (10^9 + 7). It raises `ValueError` when `n < 1`, `m < 1` or `k < 0`.

### `arraykit.grid`

- `max_distance(s, k)` takes a string of moves `N`, `S`, `E` and `W`, of which
  up to `k` may be changed to any direction. It returns the largest Manhattan
  distance from the origin reached at any point along the walk. Any other
  character counts as a step that does not move.

```python
from arraykit.counting import count_good_arrays
from arraykit.grid import max_distance

assert count_good_arrays(3, 2, 1) == 4
assert max_distance("NSWWEW", 3) == 6
```

## What it does not do

arraykit is a library only. It has no command-line tool. It does not read
input from files or standard input.