import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraykit.partition import divide_array, partition_array

values_lists = st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=40)


def test_partition_array_worked_examples():
    assert partition_array([3, 6, 1, 2, 5], 2) == 2
    assert partition_array([2, 2, 4, 5], 0) == 3


def test_partition_array_does_not_mutate_input():
    nums = [3, 6, 1, 2, 5]
    partition_array(nums, 2)
    assert nums == [3, 6, 1, 2, 5]


@given(values_lists)
def test_partition_array_zero_k_counts_distinct(nums):
    assert partition_array(nums, 0) == len(set(nums))


@given(values_lists)
def test_partition_array_wide_k_needs_one_group(nums):
    spread = max(nums) - min(nums)
    assert partition_array(nums, spread) == partition_array([nums[0]], 0)


@given(values_lists, st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_partition_array_monotone_in_k(nums, k1, k2):
    small, large = sorted((k1, k2))
    assert partition_array(nums, large) <= partition_array(nums, small)
    assert 1 <= partition_array(nums, large) <= len(nums)


def test_partition_array_rejects_empty():
    with pytest.raises(ValueError):
        partition_array([], 1)


def test_divide_array_worked_example():
    assert divide_array([1, 3, 4, 8, 7, 9, 3, 5, 1], 2) == [[1, 1, 3], [3, 4, 5], [7, 8, 9]]


def test_divide_array_impossible_returns_empty():
    assert divide_array([2, 4, 2, 2, 5, 2], 2) == []


def test_divide_array_large_k_uses_every_value():
    nums = [4, 2, 9, 8, 2, 12, 7, 12, 10, 5, 8, 5, 5, 7, 9, 2, 5, 11]
    result = divide_array(nums, 14)
    assert len(result) * 3 == len(nums)
    assert sorted(v for t in result for v in t) == sorted(nums)


def test_divide_array_rejects_bad_length():
    with pytest.raises(ValueError):
        divide_array([1, 2, 3, 4], 5)