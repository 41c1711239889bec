"""In-place compaction and merging of integer lists.

The functions rewrite the front of the list they are given and report how
many leading elements are meaningful; whatever lies beyond that count is
left unspecified.
"""

from __future__ import annotations

from heapq import merge
from itertools import groupby, islice
from typing import MutableSequence, Sequence


def _write_prefix(nums: MutableSequence[int], values: list[int]) -> int:
    nums[: len(values)] = values
    return len(values)


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Keep one copy of each value of a sorted list at its front.

    Returns the number of distinct values; the first that many elements of
    ``nums`` hold them in their original order.
    """
    return _write_prefix(nums, [value for value, _ in groupby(nums)])


def remove_duplicates_keep_two(nums: MutableSequence[int]) -> int:
    """Keep at most two copies of each value of a sorted list at its front.

    Returns the length of the kept prefix.
    """
    kept = [
        value
        for _, run in groupby(nums)
        for value in islice(run, 2)
    ]
    return _write_prefix(nums, kept)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every element not equal to ``val`` to the front, in order.

    Returns how many elements were kept.
    """
    return _write_prefix(nums, [value for value in nums if value != val])


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1``.

    ``nums1`` holds ``m`` sorted values followed by room for ``n`` more; after
    the call its first ``m + n`` elements are the sorted union of both inputs.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for m + n elements")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n elements")
    nums1[: m + n] = list(merge(nums1[:m], nums2[:n]))