"""Splitting integer lists into groups whose spread is bounded."""

from __future__ import annotations

from typing import Iterable


def partition_array(nums: Iterable[int], k: int) -> int:
    """Return the fewest groups such that each group's max - min is at most ``k``.

    Raises ValueError when ``nums`` is empty.
    """
    values = sorted(nums)
    if not values:
        raise ValueError("nums must not be empty")
    groups = 1
    low = values[0]
    for value in values:
        if value - low > k:
            groups += 1
            low = value
    return groups


def divide_array(nums: Iterable[int], k: int) -> list[list[int]]:
    """Split ``nums`` into triples whose elements differ by at most ``k``.

    The triples are taken from the sorted values in order. Returns an empty
    list when no such split exists. Raises ValueError when the number of
    values is not a multiple of three.
    """
    values = sorted(nums)
    if len(values) % 3:
        raise ValueError("the number of values must be a multiple of 3")
    triples = [values[i : i + 3] for i in range(0, len(values), 3)]
    if any(triple[-1] - triple[0] > k for triple in triples):
        return []
    return triples