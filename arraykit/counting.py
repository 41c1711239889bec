"""Counting integer arrays by the number of equal adjacent pairs."""

from __future__ import annotations

MOD = 1_000_000_007


def count_good_arrays(n: int, m: int, k: int) -> int:
    """Count arrays of length ``n`` over ``1..m`` with exactly ``k`` equal neighbours.

    The result is reduced modulo 1_000_000_007. Raises ValueError when ``n``
    or ``m`` is below 1 or ``k`` is negative.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if m < 1:
        raise ValueError("m must be at least 1")
    if k < 0:
        raise ValueError("k must not be negative")

    # row[j]: arrays of the current length with exactly j equal neighbours
    row = [m % MOD] + [0] * k
    for length in range(1, n):
        top = min(k, length) + 1
        row[:top] = [
            (same * (m - 1) + shifted) % MOD
            for same, shifted in zip(row[:top], [0] + row[: top - 1])
        ]
    return row[k]