"""Distances reachable on a grid walk with a limited number of changed steps."""

from __future__ import annotations

_MOVES = {
    "N": (0, 1),
    "S": (0, -1),
    "E": (1, 0),
    "W": (-1, 0),
}


def max_distance(s: str, k: int) -> int:
    """Return the largest Manhattan distance from the origin reached along ``s``.

    ``s`` is a sequence of moves N, S, E, W; up to ``k`` of them may be
    changed to any direction. Other characters count as a step that does
    not move.
    """
    x = y = 0
    best = 0
    for steps, move in enumerate(s, start=1):
        dx, dy = _MOVES.get(move, (0, 0))
        x += dx
        y += dy
        best = max(best, min(abs(x) + abs(y) + 2 * k, steps))
    return best