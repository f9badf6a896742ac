"""Guide count for empty lines, derived from their non-empty neighbours."""

from __future__ import annotations


def interpolate(prev_level: int, next_level: int) -> int:
    """Return how many guides an empty line between two levels shows.

    A line next to top-level code on one side only keeps a single stub guide.
    Between two siblings of equal depth it sits outside the innermost block.
    Otherwise the shallower neighbour wins.
    """
    low = min(prev_level, next_level)
    high = max(prev_level, next_level)

    if low == 0 and high > 0:
        return 1
    if low == high and low > 0:
        return low - 1
    return low


__all__ = ["interpolate"]
