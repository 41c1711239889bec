"""Single-pass scans over integer sequences."""

from __future__ import annotations

from typing import Iterable


def majority_element(nums: Iterable[int]) -> int:
    """Return the value found in more than half of ``nums``.

    Uses Boyer-Moore voting. If no value holds a strict majority, the result
    is the surviving candidate, which need not be meaningful. Raises
    ValueError when ``nums`` is empty.
    """
    values = iter(nums)
    try:
        candidate = next(values)
    except StopIteration:
        raise ValueError("nums must not be empty") from None
    count = 1
    for value in values:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def maximum_difference(nums: Iterable[int]) -> int:
    """Return the largest ``nums[j] - nums[i]`` with ``i < j`` and ``nums[i] < nums[j]``.

    Returns -1 when no such pair exists. Raises ValueError when ``nums`` is
    empty.
    """
    values = iter(nums)
    try:
        low = next(values)
    except StopIteration:
        raise ValueError("nums must not be empty") from None
    best = -1
    for value in values:
        if value <= low:
            low = value
        else:
            best = max(best, value - low)
    return best